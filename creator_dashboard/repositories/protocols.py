"""Repository protocol definitions used by the dashboard service."""

from datetime import datetime
from decimal import Decimal
from typing import List, Protocol

from creator_dashboard.domain.earnings import EarningBucket
from creator_dashboard.domain.order import ProductOrder
from creator_dashboard.domain.product import Product


class OrderRepositoryProtocol(Protocol):
    """Contract for order data access."""

    def find_by_creator(self, creator_id: int, is_paid: bool) -> List[ProductOrder]: ...

    def sum_paid_revenue(self, creator_id: int) -> Decimal: ...

    def aggregate_paid_earnings(
        self, creator_id: int, start: datetime, end: datetime, granularity: str
    ) -> List[EarningBucket]: ...


class ProductRepositoryProtocol(Protocol):
    """Contract for product data access."""

    def find_by_creator(self, creator_id: int) -> List[Product]: ...
