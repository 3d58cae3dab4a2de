"""
Product Domain Model

Represents a product listed by a seller (creator).
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from decimal import Decimal


class Product(BaseModel):
    """
    Product domain model - a product owned by a seller

    Fields:
        id: Internal product ID (primary key)
        creator_id: Seller who owns the product
        name: Product name
        price: Listing price (optional)
        created_at: When product was created
        updated_at: When product was last updated
    """

    id: int = Field(..., description="Internal product ID")
    creator_id: int = Field(..., description="Owning seller ID")
    name: str = Field(..., description="Product name")
    price: Optional[Decimal] = Field(None, description="Listing price", ge=0)
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()
        if self.price is not None:
            data['price'] = float(self.price)
        return data
