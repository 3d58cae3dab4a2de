"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.
"""
from creator_dashboard.repositories.order_repository import OrderRepository
from creator_dashboard.repositories.product_repository import ProductRepository
from creator_dashboard.repositories.protocols import (
    OrderRepositoryProtocol,
    ProductRepositoryProtocol,
)

__all__ = [
    'OrderRepository',
    'ProductRepository',
    'OrderRepositoryProtocol',
    'ProductRepositoryProtocol',
]
