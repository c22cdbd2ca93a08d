"""
REST Notes — Note Request/Response Schemas
===========================================

What:  Pydantic models defining the note part of the API contract.
How:   FastAPI validates request bodies against the input models and
       serializes NoteResource responses (by alias, so `_links` and
       `tagUris` keep their wire names).

Design Decision:
    Schemas are separate from SQLAlchemy models because the wire shape
    (links, tag URIs instead of tag rows) has nothing to do with the table
    layout. The assemblers in `restnotes.services.assemblers` do the mapping.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from restnotes.schemas.common import Link


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteInput(BaseModel):
    """
    What:  Payload of POST /notes.
    Tag references are URIs of tag resources, e.g. "/tags/3" or the absolute
    `self` href of a tag. They are resolved before anything is persisted.
    """
    title: str = Field(max_length=255, description="The title of the note")
    body: str = Field(default="", description="The body of the note")
    tag_uris: List[str] = Field(
        default_factory=list,
        alias="tagUris",
        description="URIs of the tags to attach, in order",
    )

    model_config = {"populate_by_name": True}

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _require_text(v)


class NotePatchInput(BaseModel):
    """
    What:  Payload of PATCH /notes/{id}.

    Field presence:
        Every field is optional. A field that is absent, or present with a
        null value, is left unchanged; a non-null value replaces the stored
        one. There is no way to clear the title.
    """
    title: Optional[str] = Field(default=None, max_length=255)
    body: Optional[str] = Field(default=None)
    tag_uris: Optional[List[str]] = Field(default=None, alias="tagUris")

    model_config = {"populate_by_name": True}

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return _require_text(v)


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class NoteResource(BaseModel):
    """
    What:  Wire representation of a note plus its links.
    Who:   Returned by GET /notes/{id} and inside the GET /notes envelope.

    Links:
        self: canonical URI of the note
        tags: the note's tags sub-resource
    """
    id: int = Field(description="Note identifier")
    title: str
    body: str
    tags: List[str] = Field(description="URIs of the note's tags, in order")
    links: Dict[str, Link] = Field(alias="_links")

    model_config = {"populate_by_name": True}
