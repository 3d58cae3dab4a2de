"""
Pytest fixtures and configuration for Creator Dashboard tests

Service and API tests run against in-memory repositories that honour the
same contract as the PostgreSQL ones: paid orders only, dated by
paid_at falling back to created_at, grouped by day or month.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import pytest

from creator_dashboard.domain.earnings import EarningBucket
from creator_dashboard.domain.order import ProductOrder
from creator_dashboard.domain.product import Product


PERIOD_KEYS = {
    'day': '%Y-%m-%d',
    'month': '%Y-%m',
}


class InMemoryOrderRepository:
    """Order repository backed by a list, recording aggregate calls"""

    def __init__(self, orders: Optional[List[ProductOrder]] = None):
        self.orders = list(orders or [])
        self.aggregate_calls = []

    def find_by_creator(self, creator_id: int, is_paid: bool) -> List[ProductOrder]:
        matches = [o for o in self.orders if o.creator_id == creator_id and o.is_paid == is_paid]
        # NULLS LAST under descending order
        return sorted(
            matches,
            key=lambda o: (o.effective_at is not None, o.effective_at or datetime.min, o.id),
            reverse=True
        )

    def sum_paid_revenue(self, creator_id: int) -> Decimal:
        return sum(
            (o.total_price for o in self.orders if o.creator_id == creator_id and o.is_paid),
            Decimal('0')
        )

    def aggregate_paid_earnings(self, creator_id, start, end, granularity) -> List[EarningBucket]:
        self.aggregate_calls.append((creator_id, start, end, granularity))
        fmt = PERIOD_KEYS[granularity]

        buckets = {}
        for order in self.orders:
            if order.creator_id != creator_id or not order.is_paid:
                continue
            if order.effective_at is None or not (start <= order.effective_at <= end):
                continue
            key = order.effective_at.strftime(fmt)
            total, count = buckets.get(key, (Decimal('0'), 0))
            buckets[key] = (total + order.total_price, count + 1)

        return [
            EarningBucket(period=key, total=total, orders=count)
            for key, (total, count) in sorted(buckets.items())
        ]


class InMemoryProductRepository:
    """Product repository backed by a list"""

    def __init__(self, products: Optional[List[Product]] = None):
        self.products = list(products or [])

    def find_by_creator(self, creator_id: int) -> List[Product]:
        return [p for p in self.products if p.creator_id == creator_id]


@pytest.fixture
def make_order():
    """
    Factory for ProductOrder rows

    Usage:
        make_order(100, created_at=datetime(2024, 1, 9), paid_at=None)
    """
    counter = {'id': 0}

    def _make(amount, created_at=None, paid_at=None, is_paid=True, creator_id=1):
        counter['id'] += 1
        return ProductOrder(
            id=counter['id'],
            creator_id=creator_id,
            product_id=10,
            is_paid=is_paid,
            total_price=Decimal(str(amount)),
            paid_at=paid_at,
            created_at=created_at,
        )

    return _make


@pytest.fixture
def sample_products():
    """Two products for seller 1 and one for seller 2"""
    return [
        Product(id=10, creator_id=1, name='Ebook: Python Basics', price=Decimal('100')),
        Product(id=11, creator_id=1, name='Video Course', price=Decimal('250')),
        Product(id=20, creator_id=2, name='Preset Pack', price=Decimal('50')),
    ]


@pytest.fixture
def example_orders(make_order):
    """
    Orders for the reference daily example (today = 2024-01-10):
    paid 100 on 01-09, paid 50 on 01-08, unpaid 999 on 01-10
    """
    return [
        make_order(100, created_at=datetime(2024, 1, 9, 8, 0), paid_at=datetime(2024, 1, 9, 9, 30)),
        make_order(50, created_at=datetime(2024, 1, 8, 12, 0), paid_at=datetime(2024, 1, 8, 12, 5)),
        make_order(999, created_at=datetime(2024, 1, 10, 7, 0), is_paid=False),
    ]


@pytest.fixture
def order_repository(example_orders):
    return InMemoryOrderRepository(example_orders)


@pytest.fixture
def product_repository(sample_products):
    return InMemoryProductRepository(sample_products)


@pytest.fixture
def make_order_repository():
    """Build an in-memory order repository from a list of orders"""
    return InMemoryOrderRepository
