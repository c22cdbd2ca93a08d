"""
REST Notes — Tag Reference Resolver
====================================

What:  Turns the tag URIs a client sends (NoteInput.tagUris) into Tag rows.
Who:   Called by NoteService on create and on patch, before any mutation.

Accepted forms:
    /tags/3                        relative reference
    http://localhost:8000/tags/3   absolute, e.g. a tag's own `self` link

The path has to be exactly `/tags/{id}` with `{id}` a positive integer.
Query strings, fragments, trailing slashes and extra segments are rejected.
"""

import logging
import re
from typing import List, Sequence
from urllib.parse import urlsplit

from restnotes.exceptions import InvalidReferenceError, UnknownTagError
from restnotes.models.tag import Tag
from restnotes.repositories.base import TagRepository
from restnotes.schemas.common import MAX_ID

logger = logging.getLogger(__name__)

TAG_PATH_PATTERN = re.compile(r"/tags/(?P<id>[0-9]+)", re.ASCII)


def extract_tag_id(location: str) -> int:
    """
    Extract the trailing id of a tag URI.

    Raises:
        InvalidReferenceError: the URI does not match `/tags/{id}` or the id
            is not an integer between 1 and MAX_ID
    """
    try:
        parts = urlsplit(location)
    except ValueError:
        raise InvalidReferenceError(location)

    if parts.query or parts.fragment:
        raise InvalidReferenceError(location)

    match = TAG_PATH_PATTERN.fullmatch(parts.path)
    if match is None:
        raise InvalidReferenceError(location)

    tag_id = int(match.group("id"))
    if not 1 <= tag_id <= MAX_ID:
        raise InvalidReferenceError(location)
    return tag_id


class TagReferenceResolver:
    """
    Maps tag URIs to Tag entities, preserving input order.

    Pure lookup: nothing is written, so a failure part-way through leaves
    no trace in the store.
    """

    def __init__(self, tags: TagRepository):
        self.tags = tags

    async def resolve(self, locations: Sequence[str]) -> List[Tag]:
        """
        Raises:
            InvalidReferenceError: a URI is malformed
            UnknownTagError: a URI is well-formed but no such tag exists
        """
        resolved: List[Tag] = []
        for location in locations:
            tag_id = extract_tag_id(location)
            tag = await self.tags.find_by_id(tag_id)
            if tag is None:
                logger.info("Rejected reference to missing tag %d (%s)", tag_id, location)
                raise UnknownTagError(location, tag_id)
            resolved.append(tag)
        return resolved
