"""
REST Notes — Abstract Store Interfaces
=======================================

What:  Abstract base classes defining the capabilities the services need
       from storage.
Why:   Services stay independent of SQLAlchemy; an in-memory implementation
       can be substituted in tests without touching any calling code.
How:   Concrete implementations inherit and implement every async method.

Contract shared by both interfaces:
    - find_by_id returns None for a missing id (never raises NotFoundError;
      that translation belongs to the services)
    - save inserts a new entity or updates an existing one, and returns it
      with its identifier assigned
    - delete of a missing id is a silent no-op
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from restnotes.models.note import Note
from restnotes.models.tag import Tag


class NoteRepository(ABC):
    """Store capabilities for notes."""

    @abstractmethod
    async def find_all(self) -> Sequence[Note]:  # pragma: no cover - interface only
        """Return every note, ordered by id."""

    @abstractmethod
    async def find_by_id(self, note_id: int) -> Optional[Note]:  # pragma: no cover
        """Fetch a note by id or return None if not found."""

    @abstractmethod
    async def find_all_by_tag(self, tag_id: int) -> Sequence[Note]:  # pragma: no cover
        """Return the notes that reference the given tag, ordered by id."""

    @abstractmethod
    async def save(self, note: Note) -> Note:  # pragma: no cover
        """Insert or update a note; its id is set on return."""

    @abstractmethod
    async def delete(self, note_id: int) -> None:  # pragma: no cover
        """Delete a note and its tag references. Missing ids are ignored."""


class TagRepository(ABC):
    """Store capabilities for tags."""

    @abstractmethod
    async def find_all(self) -> Sequence[Tag]:  # pragma: no cover - interface only
        """Return every tag, ordered by id."""

    @abstractmethod
    async def find_by_id(self, tag_id: int) -> Optional[Tag]:  # pragma: no cover
        """Fetch a tag by id or return None if not found."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:  # pragma: no cover
        """Insert or update a tag; its id is set on return."""

    @abstractmethod
    async def delete(self, tag_id: int) -> None:  # pragma: no cover
        """
        Delete a tag. Notes referencing it lose that reference.
        Missing ids are ignored.
        """
