"""
REST Notes — Notes Route Handlers
==================================

What:  The /notes collection and its members.
How:   Extracts path/body data, delegates to NoteService, assembles resources.

Endpoints:
    GET    /notes            envelope of note resources
    POST   /notes            201, Location header, empty body
    GET    /notes/{id}       note resource
    PATCH  /notes/{id}       204, partial update
    DELETE /notes/{id}       204, no-op when missing
    GET    /notes/{id}/tags  envelope of the note's tag resources
"""

from typing import Annotated

from fastapi import APIRouter, Path, Response

from restnotes.dependencies import LinkBuilderDep, NoteServiceDep
from restnotes.schemas.common import MAX_ID, Envelope, ErrorResponse
from restnotes.schemas.note import NoteInput, NotePatchInput, NoteResource
from restnotes.schemas.tag import TagResource
from restnotes.services.assemblers import note_resource, note_resources, tag_resources

router = APIRouter(prefix="/notes", tags=["Notes"])

NoteId = Annotated[int, Path(ge=1, le=MAX_ID, description="Note identifier")]


@router.get(
    "",
    response_model=Envelope[NoteResource],
    summary="List all notes",
)
async def list_notes(service: NoteServiceDep, links: LinkBuilderDep) -> Envelope[NoteResource]:
    notes = await service.list_notes()
    return note_resources(notes, links)


@router.post(
    "",
    status_code=201,
    response_class=Response,
    responses={
        201: {"description": "Note created; Location holds its URI"},
        400: {"description": "Invalid input or tag reference", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    note_input: NoteInput,
    service: NoteServiceDep,
    links: LinkBuilderDep,
) -> Response:
    """
    Create a note from a title, a body and a list of tag URIs.

    Every tag URI is resolved before the note is saved, so a bad reference
    yields a 400 and no note.
    """
    note = await service.create_note(note_input)
    return Response(status_code=201, headers={"Location": links.note(note.id)})


@router.get(
    "/{note_id}",
    response_model=NoteResource,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a single note",
)
async def get_note(
    service: NoteServiceDep,
    links: LinkBuilderDep,
    note_id: NoteId,
) -> NoteResource:
    note = await service.get_note(note_id)
    return note_resource(note, links)


@router.patch(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses={
        400: {"description": "Invalid input or tag reference", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Partially update a note",
)
async def patch_note(
    patch: NotePatchInput,
    service: NoteServiceDep,
    note_id: NoteId,
) -> Response:
    """
    Fields that are absent or null keep their current value; `tagUris`,
    when present, replaces the whole tag list.
    """
    await service.patch_note(note_id, patch)
    return Response(status_code=204)


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a note",
)
async def delete_note(service: NoteServiceDep, note_id: NoteId) -> Response:
    await service.delete_note(note_id)
    return Response(status_code=204)


@router.get(
    "/{note_id}/tags",
    response_model=Envelope[TagResource],
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="List the tags of a note",
)
async def get_note_tags(
    service: NoteServiceDep,
    links: LinkBuilderDep,
    note_id: NoteId,
) -> Envelope[TagResource]:
    tags = await service.get_note_tags(note_id)
    return tag_resources(tags, links)
