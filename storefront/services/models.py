"""Catalog Models - Pydantic models for catalog entities."""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.services.money import to_decimal as _to_decimal


class Product(BaseModel):
    """Product offered in the catalog. Immutable once created."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    description: str = ""
    price: Decimal
    image_url: str = ""

    @field_validator("price", mode="before")
    @classmethod
    def convert_float(cls, v):
        # Only floats go through str(); anything else is left to pydantic,
        # which rejects None and unparseable values
        if isinstance(v, float):
            return _to_decimal(v)
        return v

    @field_validator("price")
    @classmethod
    def check_non_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("price must be non-negative")
        return v

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name or description."""
        needle = query.lower()
        return needle in self.name.lower() or needle in self.description.lower()
