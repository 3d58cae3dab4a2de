"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.
"""
from creator_dashboard.domain.product import Product
from creator_dashboard.domain.order import ProductOrder
from creator_dashboard.domain.earnings import EarningBucket, EarningSeries, DashboardReport

__all__ = ['Product', 'ProductOrder', 'EarningBucket', 'EarningSeries', 'DashboardReport']
