import sys

from flashcards_api.cli import main

sys.exit(main())
