"""
Dependency injection for FastAPI routes.

Wires the per-request database session into repositories and services,
and provides the LinkBuilder used by the assemblers.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from restnotes.config import settings
from restnotes.database import get_db_session
from restnotes.repositories import (
    NoteRepository,
    SqlAlchemyNoteRepository,
    SqlAlchemyTagRepository,
    TagRepository,
)
from restnotes.services.assemblers import LinkBuilder
from restnotes.services.note_service import NoteService
from restnotes.services.tag_service import TagService


def get_note_repository(
    db: AsyncSession = Depends(get_db_session),
) -> NoteRepository:
    return SqlAlchemyNoteRepository(db)


def get_tag_repository(
    db: AsyncSession = Depends(get_db_session),
) -> TagRepository:
    return SqlAlchemyTagRepository(db)


def get_note_service(
    notes: NoteRepository = Depends(get_note_repository),
    tags: TagRepository = Depends(get_tag_repository),
) -> NoteService:
    return NoteService(notes, tags)


def get_tag_service(
    notes: NoteRepository = Depends(get_note_repository),
    tags: TagRepository = Depends(get_tag_repository),
) -> TagService:
    return TagService(notes, tags)


def get_link_builder(request: Request) -> LinkBuilder:
    # PUBLIC_BASE_URL wins over the Host the request arrived with
    return LinkBuilder(settings.public_base_url or str(request.base_url))


NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]
TagServiceDep = Annotated[TagService, Depends(get_tag_service)]
LinkBuilderDep = Annotated[LinkBuilder, Depends(get_link_builder)]
