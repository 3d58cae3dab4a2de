"""
Earnings Domain Models

Aggregated revenue rows, chart-ready series and the dashboard report
returned to the presentation layer.
"""
from pydantic import BaseModel, Field, ConfigDict, model_validator
from typing import List
from datetime import datetime
from decimal import Decimal

from creator_dashboard.domain.order import ProductOrder
from creator_dashboard.domain.product import Product


class EarningBucket(BaseModel):
    """
    One aggregated row of paid orders

    Fields:
        period: Calendar key, 'YYYY-MM-DD' for days or 'YYYY-MM' for months
        total: Sum of total_price for the period
        orders: Number of paid orders in the period
    """

    period: str = Field(..., description="Calendar key of the bucket")
    total: Decimal = Field(Decimal('0'), description="Revenue in the bucket")
    orders: int = Field(0, description="Paid order count in the bucket", ge=0)

    model_config = ConfigDict(from_attributes=True)


class EarningSeries(BaseModel):
    """Parallel labels / revenue / order-count sequences for one chart"""

    labels: List[str] = Field(default_factory=list)
    data: List[Decimal] = Field(default_factory=list)
    orders: List[int] = Field(default_factory=list)

    @model_validator(mode='after')
    def _check_aligned(self) -> 'EarningSeries':
        if not (len(self.labels) == len(self.data) == len(self.orders)):
            raise ValueError(
                f"Series lengths differ: labels={len(self.labels)} "
                f"data={len(self.data)} orders={len(self.orders)}"
            )
        return self

    def __len__(self) -> int:
        return len(self.labels)

    @property
    def total(self) -> Decimal:
        return sum(self.data, Decimal('0'))

    def to_dict(self) -> dict:
        return {
            'labels': list(self.labels),
            'data': [float(value) for value in self.data],
            'orders': list(self.orders),
        }


class DashboardReport(BaseModel):
    """
    Everything the seller dashboard renders

    Fields:
        creator_id: Seller the report was built for
        generated_at: The 'now' the windows were anchored on
        my_products: Seller's products
        my_revenue: Sum of all paid order amounts
        total_order_success: Paid orders
        total_order_pending: Unpaid orders
        earning_history: Daily series
        monthly_earning_history: Monthly series
    """

    creator_id: int
    generated_at: datetime
    my_products: List[Product] = Field(default_factory=list)
    my_revenue: Decimal = Decimal('0')
    total_order_success: List[ProductOrder] = Field(default_factory=list)
    total_order_pending: List[ProductOrder] = Field(default_factory=list)
    earning_history: EarningSeries
    monthly_earning_history: EarningSeries

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary"""
        return {
            'creator_id': self.creator_id,
            'generated_at': self.generated_at.isoformat(),
            'my_products': [product.to_dict() for product in self.my_products],
            'my_revenue': float(self.my_revenue),
            'total_order_success': [order.to_dict() for order in self.total_order_success],
            'total_order_pending': [order.to_dict() for order in self.total_order_pending],
            'earning_history': self.earning_history.to_dict(),
            'monthly_earning_history': self.monthly_earning_history.to_dict(),
        }
