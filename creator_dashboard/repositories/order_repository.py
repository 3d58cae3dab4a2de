"""
Order Repository - Data Access Layer for Orders

Handles all database queries for product orders and returns domain models.
Orders are dated by their effective timestamp, COALESCE(paid_at, created_at),
in filters and grouping alike.
"""
import logging
import time
from datetime import datetime
from decimal import Decimal
from typing import List

from creator_dashboard.core.database import get_db_connection_dict
from creator_dashboard.domain.earnings import EarningBucket
from creator_dashboard.domain.order import ProductOrder

logger = logging.getLogger(__name__)

EFFECTIVE_AT = "COALESCE(paid_at, created_at)"

# TO_CHAR patterns producing the bucket keys
PERIOD_FORMATS = {
    'day': 'YYYY-MM-DD',
    'month': 'YYYY-MM',
}


class OrderRepository:
    """
    Repository for ProductOrder data access

    All SQL queries for product orders are centralized here.
    """

    def find_by_creator(self, creator_id: int, is_paid: bool) -> List[ProductOrder]:
        """
        Find a seller's orders by payment state

        Args:
            creator_id: Seller ID
            is_paid: True for paid orders, False for pending ones

        Returns:
            Orders, most recent effective date first
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT
                    id, creator_id, product_id, is_paid,
                    total_price, paid_at, created_at
                FROM product_orders
                WHERE creator_id = %s AND is_paid = %s
                ORDER BY {EFFECTIVE_AT} DESC NULLS LAST, id DESC
            """, (creator_id, is_paid))

            rows = cursor.fetchall()
            return [ProductOrder(**row) for row in rows]

        finally:
            cursor.close()
            conn.close()

    def sum_paid_revenue(self, creator_id: int) -> Decimal:
        """Total amount of all paid orders for a seller"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT COALESCE(SUM(total_price), 0) AS total
                FROM product_orders
                WHERE creator_id = %s AND is_paid = true
            """, (creator_id,))

            row = cursor.fetchone()
            if not row or row['total'] is None:
                return Decimal('0')
            return Decimal(row['total'])

        finally:
            cursor.close()
            conn.close()

    def aggregate_paid_earnings(
        self,
        creator_id: int,
        start: datetime,
        end: datetime,
        granularity: str
    ) -> List[EarningBucket]:
        """
        Sum and count paid orders per day or per month

        Args:
            creator_id: Seller ID
            start: Window start (inclusive)
            end: Window end (inclusive)
            granularity: 'day' or 'month'

        Returns:
            One EarningBucket per period that has at least one paid order,
            ordered by period. Empty periods are not returned.
        """
        if granularity not in PERIOD_FORMATS:
            raise ValueError(f"granularity must be one of {sorted(PERIOD_FORMATS)}, got {granularity!r}")

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            started = time.time()
            cursor.execute(f"""
                SELECT
                    TO_CHAR({EFFECTIVE_AT}, %s) AS period,
                    COALESCE(SUM(total_price), 0) AS total,
                    COUNT(*) AS orders
                FROM product_orders
                WHERE creator_id = %s
                  AND is_paid = true
                  AND {EFFECTIVE_AT} BETWEEN %s AND %s
                GROUP BY period
                ORDER BY period
            """, (PERIOD_FORMATS[granularity], creator_id, start, end))

            rows = cursor.fetchall()
            logger.debug(
                f"Aggregated {len(rows)} {granularity} buckets for creator {creator_id} "
                f"in {(time.time() - started) * 1000:.1f}ms"
            )
            return [EarningBucket(**row) for row in rows]

        finally:
            cursor.close()
            conn.close()
