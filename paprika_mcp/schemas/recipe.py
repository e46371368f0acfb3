"""
Recipe Document Schema
======================

Validation model for a single Paprika recipe as exported by the app.

Only ``uid`` and ``name`` are required. Every other field is optional, and
keys the schema does not know about are kept as-is. Scalar types are strict:
Paprika stores times and servings as text (``"20 mins"``, ``"4"``), so a
number showing up in one of those fields is a data error, not something to
coerce.

This schema is used by:
- RecipeStore, which validates every record at insertion time
- the MCP tools, which project stored recipes into responses
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, ValidationError, field_validator

UID_MAX_LENGTH = 100
NAME_MAX_LENGTH = 500

# Default fields for text search
SEARCHABLE_FIELDS = ("name", "description", "ingredients", "notes")

# Optional string fields that must not be null when present
NON_NULLABLE_TEXT_FIELDS = (
    "ingredients",
    "directions",
    "description",
    "notes",
    "nutritional_info",
    "prep_time",
    "cook_time",
    "total_time",
    "servings",
    "difficulty",
    "source",
    "source_url",
    "created",
    "hash",
)


class Photo(BaseModel):
    """Extra photo attached to a recipe (base64 payload)."""

    model_config = ConfigDict(extra="allow")

    data: StrictStr


class Recipe(BaseModel):
    """A Paprika recipe."""

    model_config = ConfigDict(extra="allow")

    # Identity
    uid: StrictStr = Field(min_length=1, max_length=UID_MAX_LENGTH)
    name: StrictStr = Field(max_length=NAME_MAX_LENGTH)

    # Text content
    ingredients: Optional[StrictStr] = None
    directions: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    notes: Optional[StrictStr] = None
    nutritional_info: Optional[StrictStr] = None

    # Timing and yield, free-form text in Paprika
    prep_time: Optional[StrictStr] = None
    cook_time: Optional[StrictStr] = None
    total_time: Optional[StrictStr] = None
    servings: Optional[StrictStr] = None
    difficulty: Optional[StrictStr] = None

    rating: Optional[StrictFloat] = None
    categories: Optional[List[StrictStr]] = None

    # Provenance
    source: Optional[StrictStr] = None
    source_url: Optional[StrictStr] = None
    created: Optional[StrictStr] = None
    hash: Optional[StrictStr] = None

    # Media (Paprika writes null for recipes without a photo)
    image_url: Optional[StrictStr] = None
    photo: Optional[StrictStr] = None
    photo_hash: Optional[StrictStr] = None
    photo_large: Optional[StrictStr] = None
    photo_data: Optional[StrictStr] = None
    photos: Optional[List[Photo]] = None

    @field_validator(*NON_NULLABLE_TEXT_FIELDS, "rating", "categories", "photos", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("must not be null")
        return v


def describe_validation_error(exc: ValidationError) -> list[str]:
    """Flatten a ValidationError into ``/field/path: message`` lines."""
    lines = []
    for error in exc.errors():
        path = "/" + "/".join(str(part) for part in error["loc"])
        lines.append(f"{path}: {error['msg']}")
    return lines
