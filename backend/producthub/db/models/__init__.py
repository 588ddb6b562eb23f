"""Database models package."""
from producthub.db.models.product import Product

__all__ = ["Product"]
