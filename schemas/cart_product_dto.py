"""Read-only product projection returned inside cart responses."""
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CartProductDto(BaseModel):
    """
    Snapshot of a product's id, display name and price.

    Prices stay ``Decimal`` end to end; Pydantic serializes them to JSON as
    strings, so a round trip never goes through a float.
    """
    model_config = ConfigDict(from_attributes=True)

    # Accepts ``id_key`` so a ProductModel row can be projected directly
    id: int = Field(..., validation_alias=AliasChoices("id", "id_key"))
    name: str
    price: Decimal
