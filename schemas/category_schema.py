"""Category schema with validation."""
from typing import Optional

from pydantic import Field

from models.category import CATEGORY_KEY_MAX, CATEGORY_KEY_MIN
from schemas.base_schema import BaseSchema


class CategorySchema(BaseSchema):
    """Schema for Category entity with validations."""

    id_key: Optional[int] = Field(
        None,
        ge=CATEGORY_KEY_MIN,
        le=CATEGORY_KEY_MAX,
        description="One-byte category key (0-255), generated when omitted",
    )
    name: str = Field(..., min_length=1, max_length=100, description="Category name (required, unique)")
