"""
REST Notes — Resource Assemblers
=================================

What:  Read-side transformation of entities into wire resources with links.
How:   Two independent functions, `note_resource` and `tag_resource`, share
       one `LinkBuilder` (URI layout) and one `envelope` helper (collections).
Who:   Called by the route handlers after the services return entities.

Properties:
    - Inputs are never mutated
    - Same entity state + same base URL → identical links
    - Collection order is the order the store returned
"""

from typing import Iterable, Type, TypeVar

from restnotes.models.note import Note
from restnotes.models.tag import Tag
from restnotes.schemas.common import Envelope, IndexResource, Link
from restnotes.schemas.note import NoteResource
from restnotes.schemas.tag import TagResource

T = TypeVar("T")


class LinkBuilder:
    """
    Builds absolute URIs for every resource of the API.

    `base_url` is the externally visible root of the service, e.g.
    "http://localhost:8000". The canonical layout is:

        /notes              /tags
        /notes/{id}         /tags/{id}
        /notes/{id}/tags    /tags/{id}/notes
    """

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def _uri(self, *segments: object) -> str:
        return "/".join([self.base_url, *(str(segment) for segment in segments)])

    def notes(self) -> str:
        return self._uri("notes")

    def note(self, note_id: int) -> str:
        return self._uri("notes", note_id)

    def note_tags(self, note_id: int) -> str:
        return self._uri("notes", note_id, "tags")

    def tags(self) -> str:
        return self._uri("tags")

    def tag(self, tag_id: int) -> str:
        return self._uri("tags", tag_id)

    def tag_notes(self, tag_id: int) -> str:
        return self._uri("tags", tag_id, "notes")


def envelope(resource_type: Type[T], resources: Iterable[T]) -> Envelope[T]:
    """Wrap already-assembled resources in the collection envelope."""
    return Envelope[resource_type](content=list(resources))


def note_resource(note: Note, links: LinkBuilder) -> NoteResource:
    return NoteResource(
        id=note.id,
        title=note.title,
        body=note.body,
        tags=[links.tag(tag.id) for tag in note.tags],
        links={
            "self": Link(href=links.note(note.id)),
            "tags": Link(href=links.note_tags(note.id)),
        },
    )


def tag_resource(tag: Tag, links: LinkBuilder) -> TagResource:
    return TagResource(
        id=tag.id,
        name=tag.name,
        links={
            "self": Link(href=links.tag(tag.id)),
            "notes": Link(href=links.tag_notes(tag.id)),
        },
    )


def note_resources(notes: Iterable[Note], links: LinkBuilder) -> Envelope[NoteResource]:
    return envelope(NoteResource, [note_resource(note, links) for note in notes])


def tag_resources(tags: Iterable[Tag], links: LinkBuilder) -> Envelope[TagResource]:
    return envelope(TagResource, [tag_resource(tag, links) for tag in tags])


def index_resource(links: LinkBuilder) -> IndexResource:
    return IndexResource(
        links={
            "notes": Link(href=links.notes()),
            "tags": Link(href=links.tags()),
        }
    )
