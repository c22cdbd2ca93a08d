"""
REST Notes — Tags Route Handlers
=================================

Endpoints:
    GET    /tags             envelope of tag resources
    POST   /tags             201, Location header, empty body
    GET    /tags/{id}        tag resource
    PATCH  /tags/{id}        204
    DELETE /tags/{id}        204, no-op when missing
    GET    /tags/{id}/notes  envelope of the notes carrying the tag

The `self` href of a tag is exactly what a note's `tagUris` accepts.
"""

from typing import Annotated

from fastapi import APIRouter, Path, Response

from restnotes.dependencies import LinkBuilderDep, TagServiceDep
from restnotes.schemas.common import MAX_ID, Envelope, ErrorResponse
from restnotes.schemas.note import NoteResource
from restnotes.schemas.tag import TagInput, TagPatchInput, TagResource
from restnotes.services.assemblers import note_resources, tag_resource, tag_resources

router = APIRouter(prefix="/tags", tags=["Tags"])

TagId = Annotated[int, Path(ge=1, le=MAX_ID, description="Tag identifier")]


@router.get("", response_model=Envelope[TagResource], summary="List all tags")
async def list_tags(service: TagServiceDep, links: LinkBuilderDep) -> Envelope[TagResource]:
    tags = await service.list_tags()
    return tag_resources(tags, links)


@router.post(
    "",
    status_code=201,
    response_class=Response,
    responses={
        201: {"description": "Tag created; Location holds its URI"},
        400: {"description": "Invalid input", "model": ErrorResponse},
    },
    summary="Create a tag",
)
async def create_tag(tag_input: TagInput, service: TagServiceDep, links: LinkBuilderDep) -> Response:
    tag = await service.create_tag(tag_input)
    return Response(status_code=201, headers={"Location": links.tag(tag.id)})


@router.get(
    "/{tag_id}",
    response_model=TagResource,
    responses={404: {"description": "Tag not found", "model": ErrorResponse}},
    summary="Get a single tag",
)
async def get_tag(service: TagServiceDep, links: LinkBuilderDep, tag_id: TagId) -> TagResource:
    tag = await service.get_tag(tag_id)
    return tag_resource(tag, links)


@router.patch(
    "/{tag_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Tag not found", "model": ErrorResponse}},
    summary="Rename a tag",
)
async def patch_tag(patch: TagPatchInput, service: TagServiceDep, tag_id: TagId) -> Response:
    await service.patch_tag(tag_id, patch)
    return Response(status_code=204)


@router.delete("/{tag_id}", status_code=204, response_class=Response, summary="Delete a tag")
async def delete_tag(service: TagServiceDep, tag_id: TagId) -> Response:
    await service.delete_tag(tag_id)
    return Response(status_code=204)


@router.get(
    "/{tag_id}/notes",
    response_model=Envelope[NoteResource],
    responses={404: {"description": "Tag not found", "model": ErrorResponse}},
    summary="List the notes carrying a tag",
)
async def get_tagged_notes(
    service: TagServiceDep,
    links: LinkBuilderDep,
    tag_id: TagId,
) -> Envelope[NoteResource]:
    notes = await service.get_tagged_notes(tag_id)
    return note_resources(notes, links)
