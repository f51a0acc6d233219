"""Catalog models - immutable product snapshots from the remote source."""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shopcart.services.money import to_decimal as _to_decimal


class ProductRecord(BaseModel):
    """Product as returned by the catalog endpoint."""
    model_config = ConfigDict(frozen=True, extra="ignore")  # remote adds description, category, rating

    id: int
    title: str
    price: Decimal = Field(ge=0, allow_inf_nan=False)
    image: str

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        # Floats go through str() so 109.95 stays 109.95
        if isinstance(v, float):
            return _to_decimal(v)
        return v
