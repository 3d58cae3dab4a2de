"""
Dashboard service: seller totals plus daily and monthly earning history.

Revenue series are built from one grouped query per series. The query only
returns periods that have paid orders; the service walks the full calendar
window and fills the gaps with zeros so every series has exactly one slot
per day (or month), aligned with its labels.

The caller supplies ``now``. Nothing in this module reads the wall clock.
Order timestamps are stored without a time zone, in server local time, so an
aware ``now`` is converted to naive local time before windows are computed.
"""
import calendar
import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Dict, List, Tuple

from creator_dashboard.domain.earnings import DashboardReport, EarningBucket, EarningSeries
from creator_dashboard.repositories.protocols import (
    OrderRepositoryProtocol,
    ProductRepositoryProtocol,
)

logger = logging.getLogger(__name__)

DEFAULT_DAYS = 30
DEFAULT_MONTHS = 12

DAY_KEY_FORMAT = '%Y-%m-%d'
MONTH_KEY_FORMAT = '%Y-%m'

# Fixed English labels, independent of LC_TIME
MONTH_ABBREVIATIONS = (
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
)


def day_label(d: date) -> str:
    """'08 Jan' style label"""
    return f"{d.day:02d} {MONTH_ABBREVIATIONS[d.month - 1]}"


def month_label(d: date) -> str:
    """'Jan 2024' style label"""
    return f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.year}"


def to_local_naive(now: datetime) -> datetime:
    """Convert an aware datetime to naive server local time; naive input is returned as is."""
    if now.tzinfo is None:
        return now
    return now.astimezone().replace(tzinfo=None)


def day_window(today: date, days: int) -> List[date]:
    """The ``days`` consecutive dates ending with ``today``, oldest first."""
    if days < 1:
        raise ValueError(f"days must be >= 1, got {days}")
    return [today - timedelta(days=days - 1 - i) for i in range(days)]


def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Move (year, month) by ``offset`` months."""
    y, m = divmod(year * 12 + (month - 1) + offset, 12)
    return y, m + 1


def month_window(today: date, months: int) -> List[Tuple[int, int]]:
    """The ``months`` consecutive (year, month) pairs ending with today's month."""
    if months < 1:
        raise ValueError(f"months must be >= 1, got {months}")
    return [shift_month(today.year, today.month, i - (months - 1)) for i in range(months)]


def fill_series(
    keys: List[str],
    labels: List[str],
    buckets: List[EarningBucket]
) -> EarningSeries:
    """
    Lay aggregated buckets onto a fixed window.

    Each slot takes the bucket whose period matches its key, or (0, 0)
    when none does. Buckets outside the window are dropped.
    """
    lookup: Dict[str, EarningBucket] = {bucket.period: bucket for bucket in buckets}

    data: List[Decimal] = []
    orders: List[int] = []
    for key in keys:
        bucket = lookup.get(key)
        data.append(bucket.total if bucket else Decimal('0'))
        orders.append(bucket.orders if bucket else 0)

    return EarningSeries(labels=labels, data=data, orders=orders)


class DashboardService:
    """Builds the seller dashboard from order and product repositories"""

    def __init__(
        self,
        order_repository: OrderRepositoryProtocol,
        product_repository: ProductRepositoryProtocol
    ):
        self.orders = order_repository
        self.products = product_repository

    def get_earning_history(self, creator_id: int, days: int, now: datetime) -> EarningSeries:
        """
        Daily paid revenue and order counts for the last ``days`` days

        The window runs from the start of ``today - (days - 1)`` to the end
        of today, inclusive. Labels look like '08 Jan'.
        """
        dates = day_window(to_local_naive(now).date(), days)
        start = datetime.combine(dates[0], time.min)
        end = datetime.combine(dates[-1], time.max)

        buckets = self.orders.aggregate_paid_earnings(creator_id, start, end, 'day')

        return fill_series(
            keys=[d.strftime(DAY_KEY_FORMAT) for d in dates],
            labels=[day_label(d) for d in dates],
            buckets=buckets,
        )

    def get_monthly_earning_history(self, creator_id: int, months: int, now: datetime) -> EarningSeries:
        """
        Monthly paid revenue and order counts for the last ``months`` months

        The window runs from the first day of the oldest month to the last
        day of the current month, inclusive. Labels look like 'Jan 2024'.
        """
        periods = [date(y, m, 1) for y, m in month_window(to_local_naive(now).date(), months)]
        last = periods[-1]
        last_day = last.replace(day=calendar.monthrange(last.year, last.month)[1])
        start = datetime.combine(periods[0], time.min)
        end = datetime.combine(last_day, time.max)

        buckets = self.orders.aggregate_paid_earnings(creator_id, start, end, 'month')

        return fill_series(
            keys=[p.strftime(MONTH_KEY_FORMAT) for p in periods],
            labels=[month_label(p) for p in periods],
            buckets=buckets,
        )

    def build_report(
        self,
        creator_id: int,
        now: datetime,
        days: int = DEFAULT_DAYS,
        months: int = DEFAULT_MONTHS,
        include_orders: bool = True
    ) -> DashboardReport:
        """
        Assemble the full dashboard for a seller

        Args:
            creator_id: Seller ID
            now: Instant the daily and monthly windows end on
            days: Length of the daily series
            months: Length of the monthly series
            include_orders: Load the paid and pending order lists

        Returns:
            DashboardReport with totals and both series
        """
        if days < 1 or months < 1:
            raise ValueError(f"days and months must be >= 1, got days={days} months={months}")

        logger.info(f"Building dashboard for creator {creator_id} (days={days}, months={months})")

        paid = self.orders.find_by_creator(creator_id, is_paid=True) if include_orders else []
        pending = self.orders.find_by_creator(creator_id, is_paid=False) if include_orders else []

        return DashboardReport(
            creator_id=creator_id,
            generated_at=now,
            my_products=self.products.find_by_creator(creator_id),
            my_revenue=self.orders.sum_paid_revenue(creator_id),
            total_order_success=paid,
            total_order_pending=pending,
            earning_history=self.get_earning_history(creator_id, days, now),
            monthly_earning_history=self.get_monthly_earning_history(creator_id, months, now),
        )
