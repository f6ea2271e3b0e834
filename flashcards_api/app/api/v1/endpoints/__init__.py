"""
Endpoint modules for API v1.  Each defines an ``APIRouter`` that
``router.py`` includes.
"""
