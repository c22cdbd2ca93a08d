"""
REST Notes — Tag SQLAlchemy Model
==================================

Tags are shared between notes. A note only stores references to them
(see NoteTag), so a tag row knows nothing about the notes using it.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from restnotes.database import Base


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name='{self.name}')>"
