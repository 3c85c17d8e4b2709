"""
Pydantic schemas for MenuItem request/response validation.

Field names are camelCase on the wire (``dietaryTag``, ``createdAt``);
snake_case names are accepted on input as well.
"""
from datetime import datetime
from decimal import Decimal
import logging

from pydantic import BaseModel, Field, ValidationInfo, field_serializer, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

MIN_PRICE = Decimal("0.01")
MAX_PRICE = Decimal("999.99")
DEFAULT_DIETARY_TAG = "None"


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class MenuItemWrite(BaseModel):
    """Fields shared by the create and full-replacement update payloads."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)
    price: Decimal = Field(..., ge=MIN_PRICE, le=MAX_PRICE, decimal_places=2)
    category: str = Field(..., min_length=1, max_length=50)
    dietary_tag: str = Field(default=DEFAULT_DIETARY_TAG, max_length=50)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("price", mode="before")
    @classmethod
    def validate_decimal(cls, v):
        """Normalize numeric inputs to Decimal instances."""
        if v is None or isinstance(v, bool):
            return v
        if isinstance(v, (int, float)):
            return Decimal(str(v))
        return v

    @field_validator("name", "category")
    @classmethod
    def validate_required_text(cls, v: str, info: ValidationInfo) -> str:
        """Reject values that are empty once surrounding whitespace is removed."""
        if not v.strip():
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return v


class MenuItemCreate(MenuItemWrite):
    """Payload for creating menu items."""


class MenuItemUpdate(MenuItemWrite):
    """Payload for replacing every mutable field of a menu item."""


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class MenuItemResponse(BaseModel):
    """Response model for menu item data."""

    id: int
    name: str
    description: str
    price: Decimal
    category: str
    dietary_tag: str
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


# ---------------------------------------------------------------------------
# Error schemas
# ---------------------------------------------------------------------------

class FieldError(BaseModel):
    """A single field-level validation failure."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    detail: str = "Validation failed"
    errors: list[FieldError]
