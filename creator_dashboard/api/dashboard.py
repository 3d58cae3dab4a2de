"""
Dashboard API Endpoints
Seller revenue totals and daily / monthly earning history for charts
"""
import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from creator_dashboard.core.auth import TokenUser, get_current_user
from creator_dashboard.core.config import settings
from creator_dashboard.repositories.order_repository import OrderRepository
from creator_dashboard.repositories.product_repository import ProductRepository
from creator_dashboard.services.dashboard_service import DashboardService

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_DAYS = 366
MAX_MONTHS = 60


def get_dashboard_service() -> DashboardService:
    """FastAPI dependency wiring the service to the PostgreSQL repositories"""
    return DashboardService(OrderRepository(), ProductRepository())


def get_now() -> datetime:
    """Request-time clock; override in tests to pin 'today'"""
    return datetime.now()


@router.get("/")
async def get_dashboard(
    days: Optional[int] = Query(None, ge=1, le=MAX_DAYS, description="Length of the daily series"),
    months: Optional[int] = Query(None, ge=1, le=MAX_MONTHS, description="Length of the monthly series"),
    include_orders: bool = Query(True, description="Include paid and pending order lists"),
    user: TokenUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
    now: datetime = Depends(get_now),
):
    """
    Get the seller dashboard

    Returns:
    - Seller products
    - Total paid revenue
    - Paid and pending orders
    - Daily earning history (default: last 30 days)
    - Monthly earning history (default: last 12 months)
    """
    try:
        report = service.build_report(
            creator_id=user.id,
            now=now,
            days=days or settings.DASHBOARD_DAYS,
            months=months or settings.DASHBOARD_MONTHS,
            include_orders=include_orders,
        )

        return {
            "status": "success",
            "data": report.to_dict()
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Dashboard failed for creator {user.id}")
        raise HTTPException(status_code=500, detail=f"Error building dashboard: {str(e)}")


@router.get("/earnings/daily")
async def get_daily_earnings(
    days: Optional[int] = Query(None, ge=1, le=MAX_DAYS, description="Number of days, ending today"),
    user: TokenUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
    now: datetime = Depends(get_now),
):
    """Daily paid revenue and order counts, one entry per day"""
    try:
        series = service.get_earning_history(user.id, days or settings.DASHBOARD_DAYS, now)

        return {
            "status": "success",
            "data": series.to_dict()
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Daily earnings failed for creator {user.id}")
        raise HTTPException(status_code=500, detail=f"Error building dashboard: {str(e)}")


@router.get("/earnings/monthly")
async def get_monthly_earnings(
    months: Optional[int] = Query(None, ge=1, le=MAX_MONTHS, description="Number of months, ending this month"),
    user: TokenUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
    now: datetime = Depends(get_now),
):
    """Monthly paid revenue and order counts, one entry per month"""
    try:
        series = service.get_monthly_earning_history(user.id, months or settings.DASHBOARD_MONTHS, now)

        return {
            "status": "success",
            "data": series.to_dict()
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Monthly earnings failed for creator {user.id}")
        raise HTTPException(status_code=500, detail=f"Error building dashboard: {str(e)}")
