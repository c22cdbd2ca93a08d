"""
REST Notes — Note Service (Business Logic Orchestrator)
========================================================

What:  The six note operations behind /notes: list, create, get, get tags,
       patch, delete.
How:   Composes the note store, the tag store and the TagReferenceResolver.
Who:   Called by the /notes route handlers.

Orchestration Flow (POST /notes):
    ┌──────────┐    ┌──────────────┐    ┌──────────┐    ┌──────────┐
    │  Input   │───▶│ Resolve tag  │───▶│  Build   │───▶│  Save    │
    │  (Route) │    │ URIs (store) │    │  Note    │    │  (store) │
    └──────────┘    └──────────────┘    └──────────┘    └──────────┘

    Resolution runs before the note is built or touched, so an invalid or
    unknown tag URI aborts the request with nothing written. Patch follows
    the same rule: all tag URIs are resolved before any field changes.

Design Decision:
    NoteService returns entities, not wire models. Link construction needs
    the request's base URL, which is an HTTP concern handled by the routes
    and the assemblers.
"""

import logging
from typing import List, Sequence

from restnotes.exceptions import NotFoundError
from restnotes.models.note import Note
from restnotes.models.tag import Tag
from restnotes.repositories.base import NoteRepository, TagRepository
from restnotes.schemas.note import NoteInput, NotePatchInput
from restnotes.services.tag_resolver import TagReferenceResolver

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Error Handling Strategy:
        - Missing note → NotFoundError (404)
        - Bad tag URIs → InvalidReferenceError / UnknownTagError (400),
          raised by the resolver before any mutation
        - Store failures surface as DatabaseError from the repositories
    """

    def __init__(self, notes: NoteRepository, tags: TagRepository):
        self.notes = notes
        self.resolver = TagReferenceResolver(tags)

    async def list_notes(self) -> Sequence[Note]:
        return await self.notes.find_all()

    async def create_note(self, note_input: NoteInput) -> Note:
        """
        Resolve the tag references, then build and persist a new note.

        Returns:
            The saved note, with its store-assigned id

        Raises:
            InvalidReferenceError: a tag URI does not match /tags/{id}
            UnknownTagError: a tag URI names a tag that does not exist
        """
        tags = await self.resolver.resolve(note_input.tag_uris)

        note = Note(title=note_input.title, body=note_input.body)
        note.replace_tags(tags)
        note = await self.notes.save(note)

        logger.info("Note %s created with %d tag(s)", note.id, len(tags))
        return note

    async def get_note(self, note_id: int) -> Note:
        """
        Raises:
            NotFoundError: no note with that id
        """
        note = await self.notes.find_by_id(note_id)
        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        return note

    async def get_note_tags(self, note_id: int) -> List[Tag]:
        note = await self.get_note(note_id)
        return note.tags

    async def patch_note(self, note_id: int, patch: NotePatchInput) -> Note:
        """
        Overwrite the fields present in `patch`; leave the others alone.

        A field counts as present when it is not None, so sending
        `{"title": null}` is the same as not sending a title at all.
        """
        note = await self.get_note(note_id)

        # Resolve first: a bad URI must not leave a half-patched note behind
        tags = None
        if patch.tag_uris is not None:
            tags = await self.resolver.resolve(patch.tag_uris)

        if tags is not None:
            note.replace_tags(tags)
        if patch.title is not None:
            note.title = patch.title
        if patch.body is not None:
            note.body = patch.body

        note = await self.notes.save(note)
        logger.info("Note %s patched", note.id)
        return note

    async def delete_note(self, note_id: int) -> None:
        """Delete a note. A missing id is a no-op."""
        await self.notes.delete(note_id)
        logger.info("Note %s deleted", note_id)
