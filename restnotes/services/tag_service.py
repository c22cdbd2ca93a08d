"""
REST Notes — Tag Service
=========================

What:  CRUD for tags plus "notes carrying this tag".
Who:   Called by the /tags route handlers.

Deleting a tag removes it from every note that referenced it; the notes
themselves are kept.
"""

import logging
from typing import Sequence

from restnotes.exceptions import NotFoundError
from restnotes.models.note import Note
from restnotes.models.tag import Tag
from restnotes.repositories.base import NoteRepository, TagRepository
from restnotes.schemas.tag import TagInput, TagPatchInput

logger = logging.getLogger(__name__)


class TagService:

    def __init__(self, notes: NoteRepository, tags: TagRepository):
        self.notes = notes
        self.tags = tags

    async def list_tags(self) -> Sequence[Tag]:
        return await self.tags.find_all()

    async def create_tag(self, tag_input: TagInput) -> Tag:
        tag = await self.tags.save(Tag(name=tag_input.name))
        logger.info("Tag %s created", tag.id)
        return tag

    async def get_tag(self, tag_id: int) -> Tag:
        tag = await self.tags.find_by_id(tag_id)
        if tag is None:
            raise NotFoundError(resource="tag", resource_id=tag_id)
        return tag

    async def patch_tag(self, tag_id: int, patch: TagPatchInput) -> Tag:
        tag = await self.get_tag(tag_id)
        if patch.name is not None:
            tag.name = patch.name
        return await self.tags.save(tag)

    async def delete_tag(self, tag_id: int) -> None:
        await self.tags.delete(tag_id)
        logger.info("Tag %s deleted", tag_id)

    async def get_tagged_notes(self, tag_id: int) -> Sequence[Note]:
        """Notes referencing the tag; 404 when the tag itself is missing."""
        await self.get_tag(tag_id)
        return await self.notes.find_all_by_tag(tag_id)
