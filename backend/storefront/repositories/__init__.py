"""
Repository Layer - Local storage access

Repositories hide SQLAlchemy details from the Stores and return domain
models.

Author: TM3
Date: 2026-10-19
"""
from storefront.repositories.order_repository import OrderRepository

__all__ = [
    'OrderRepository',
]
