"""
REST Notes — Tag Request/Response Schemas
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

from restnotes.schemas.common import Link


class TagInput(BaseModel):
    """Payload of POST /tags."""
    name: str = Field(max_length=100, description="The name of the tag")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class TagPatchInput(BaseModel):
    """Payload of PATCH /tags/{id}; a missing or null name is left unchanged."""
    name: Optional[str] = Field(default=None, max_length=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("must not be blank")
        return v


class TagResource(BaseModel):
    """
    Wire representation of a tag.

    Links:
        self:  canonical URI of the tag (also accepted in a note's tagUris)
        notes: the notes that carry this tag
    """
    id: int
    name: str
    links: Dict[str, Link] = Field(alias="_links")

    model_config = {"populate_by_name": True}
