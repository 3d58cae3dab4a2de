"""
Order Domain Model

Represents a product order placed with a seller (creator).
This is the single source of truth for order data structure.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from decimal import Decimal


class ProductOrder(BaseModel):
    """
    ProductOrder domain model - an order for one of a seller's products

    Fields:
        id: Internal order ID (primary key)
        creator_id: Seller who owns the ordered product
        product_id: Ordered product
        is_paid: Whether payment has been confirmed
        total_price: Order amount
        paid_at: When payment was confirmed (may be missing on older rows)
        created_at: When the order was placed
    """

    id: int = Field(..., description="Internal order ID")
    creator_id: int = Field(..., description="Seller ID")
    product_id: Optional[int] = Field(None, description="Ordered product ID")
    is_paid: bool = Field(False, description="Payment confirmed")
    total_price: Decimal = Field(Decimal('0'), description="Order amount", ge=0)
    paid_at: Optional[datetime] = Field(None, description="Payment timestamp")
    created_at: Optional[datetime] = Field(None, description="Order creation timestamp")

    model_config = ConfigDict(from_attributes=True)

    @property
    def effective_at(self) -> Optional[datetime]:
        """Timestamp the order is dated by: paid_at, falling back to created_at"""
        return self.paid_at or self.created_at

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()
        data['total_price'] = float(self.total_price)
        data['effective_at'] = self.effective_at
        return data
