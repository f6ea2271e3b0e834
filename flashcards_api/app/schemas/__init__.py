"""
Pydantic models for API payloads.

Schemas are kept apart from the SQL rows they are built from; the
flashcard module also owns the storage/client field mapping.
"""
