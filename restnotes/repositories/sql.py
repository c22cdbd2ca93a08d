"""
REST Notes — SQLAlchemy Store
==============================

What:  Async SQLAlchemy implementations of NoteRepository and TagRepository.
How:   Each repository wraps the request's AsyncSession. Writes are flushed
       (so generated ids are available immediately) but never committed here;
       `get_db_session` commits once the whole request has succeeded.

Error Handling Strategy:
    SQLAlchemyError is logged with its type and wrapped in DatabaseError,
    which the global handler turns into a generic 500. Driver messages never
    reach the client.

Loading:
    Note.tag_links and NoteTag.tag are `selectin` relationships, so every
    query below returns notes with their tags already loaded. Nothing is
    lazy-loaded after the query returns.
"""

import logging
from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from restnotes.exceptions import DatabaseError
from restnotes.models.note import Note, NoteTag
from restnotes.models.tag import Tag
from restnotes.repositories.base import NoteRepository, TagRepository

logger = logging.getLogger(__name__)


def _wrap(operation: str, exc: SQLAlchemyError) -> DatabaseError:
    logger.error("Database error during %s: %s", operation, str(exc), exc_info=True)
    return DatabaseError(context={"operation": operation, "error_type": type(exc).__name__})


class SqlAlchemyNoteRepository(NoteRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> Sequence[Note]:
        try:
            result = await self.session.execute(select(Note).order_by(Note.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise _wrap("find_all notes", e)

    async def find_by_id(self, note_id: int) -> Optional[Note]:
        try:
            return await self.session.get(Note, note_id)
        except SQLAlchemyError as e:
            raise _wrap("find note", e)

    async def find_all_by_tag(self, tag_id: int) -> Sequence[Note]:
        try:
            result = await self.session.execute(
                select(Note)
                .where(Note.tag_links.any(NoteTag.tag_id == tag_id))
                .order_by(Note.id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise _wrap("find notes by tag", e)

    async def save(self, note: Note) -> Note:
        try:
            self.session.add(note)
            await self.session.flush()  # Assigns the id without committing
            return note
        except SQLAlchemyError as e:
            raise _wrap("save note", e)

    async def delete(self, note_id: int) -> None:
        try:
            note = await self.session.get(Note, note_id)
            if note is None:
                return
            # delete-orphan cascade removes the note_tags rows as well
            await self.session.delete(note)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise _wrap("delete note", e)


class SqlAlchemyTagRepository(TagRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> Sequence[Tag]:
        try:
            result = await self.session.execute(select(Tag).order_by(Tag.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise _wrap("find_all tags", e)

    async def find_by_id(self, tag_id: int) -> Optional[Tag]:
        try:
            return await self.session.get(Tag, tag_id)
        except SQLAlchemyError as e:
            raise _wrap("find tag", e)

    async def save(self, tag: Tag) -> Tag:
        try:
            self.session.add(tag)
            await self.session.flush()
            return tag
        except SQLAlchemyError as e:
            raise _wrap("save tag", e)

    async def delete(self, tag_id: int) -> None:
        try:
            tag = await self.session.get(Tag, tag_id)
            if tag is None:
                return
            # Tag has no relationship back to notes, so its references are
            # removed explicitly instead of relying on ON DELETE CASCADE
            # (SQLite does not enforce foreign keys by default)
            await self.session.execute(delete(NoteTag).where(NoteTag.tag_id == tag_id))
            await self.session.delete(tag)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise _wrap("delete tag", e)
