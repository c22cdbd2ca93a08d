# Repositories package init
"""
REST Notes — Entity Store
==========================

What:  The narrow store interface services depend on, and its SQLAlchemy
       implementation.

Inventory:
    - base.py: NoteRepository / TagRepository abstract interfaces
    - sql.py:  SqlAlchemyNoteRepository / SqlAlchemyTagRepository

Services never see an AsyncSession; they only call find_all, find_by_id,
save and delete. The test suite plugs in in-memory repositories instead.
"""

from restnotes.repositories.base import NoteRepository, TagRepository
from restnotes.repositories.sql import SqlAlchemyNoteRepository, SqlAlchemyTagRepository

__all__ = [
    "NoteRepository",
    "TagRepository",
    "SqlAlchemyNoteRepository",
    "SqlAlchemyTagRepository",
]
