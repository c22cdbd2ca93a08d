"""
REST Notes — Note SQLAlchemy Models
====================================

What:  ORM models for the `notes` table and the `note_tags` association table.
Who:   Used by SqlAlchemyNoteRepository and by Alembic for schema management.

Table Design Rationale:
    - Integer primary key: assigned by the database on insert, used verbatim
      in the note's URI (/notes/{id})
    - note_tags is an association *object* rather than a bare secondary table
      because a note keeps its tags in the order the client supplied them
    - note_tags rows are owned by the note: replacing the tag list or deleting
      the note deletes them. Tag rows themselves are shared and never touched.
"""

from typing import List

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from restnotes.database import Base
from restnotes.models.tag import Tag


class NoteTag(Base):
    """One tag reference held by a note, at a given position."""

    __tablename__ = "note_tags"

    # Surrogate key: the same tag may appear twice in one note, and a
    # replaced tag list is inserted before the old rows are deleted
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    note_id: Mapped[int] = mapped_column(
        ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    tag_id: Mapped[int] = mapped_column(
        ForeignKey("tags.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # selectin: async sessions cannot lazy-load on attribute access
    tag: Mapped[Tag] = relationship(lazy="selectin")
    note: Mapped["Note"] = relationship(back_populates="tag_links")

    __table_args__ = (
        Index("idx_note_tags_note_id", "note_id"),
        Index("idx_note_tags_tag_id", "tag_id"),
    )

    def __repr__(self) -> str:
        return f"<NoteTag(note_id={self.note_id}, tag_id={self.tag_id}, position={self.position})>"


class Note(Base):
    """
    A note: title, body, and an ordered list of tag references.

    Lifecycle:
        1. Created on POST /notes (tags resolved before the note is built)
        2. Fields overwritten on PATCH /notes/{id}; absent fields stay as-is
        3. Destroyed on DELETE /notes/{id}, together with its note_tags rows
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")

    tag_links: Mapped[List[NoteTag]] = relationship(
        back_populates="note",
        order_by=NoteTag.position,
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def tags(self) -> List[Tag]:
        """The note's tags, in the order they were supplied."""
        return [link.tag for link in self.tag_links]

    def replace_tags(self, tags: List[Tag]) -> None:
        """Swap the whole tag list; the old association rows become orphans."""
        self.tag_links = [
            NoteTag(tag=tag, tag_id=tag.id, position=position)
            for position, tag in enumerate(tags)
        ]

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}')>"
