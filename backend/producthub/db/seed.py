"""Schema creation and sample catalog data."""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from producthub.db.base import Base
from producthub.db.models.product import Product
from producthub.db.session import SessionLocal, engine
from producthub.services.product_service import utcnow

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    ("iPhone 15 Pro", "Apple's latest flagship phone with A17 Pro chip", "35900", 100),
    ("MacBook Pro 14", "Professional laptop with M3 Pro chip", "52900", 50),
    ("AirPods Pro 2", "Wireless earbuds with active noise cancellation", "6990", 200),
    ("iPad Air", "Lightweight tablet for everyday use", "18900", 75),
    ("Apple Watch Series 9", "Latest generation smartwatch", "12900", 150),
]


def seed_products(session: Session) -> int:
    """Insert the sample catalog when the table is empty; returns rows added."""
    if session.scalar(select(func.count()).select_from(Product)):
        logger.info("Products already present, skipping seed")
        return 0

    now = utcnow()
    session.add_all(
        Product(
            name=name,
            description=description,
            price=Decimal(price),
            stock=stock,
            is_active=True,
            create_time=now,
            update_time=now,
        )
        for name, description, price, stock in SAMPLE_PRODUCTS
    )
    session.commit()
    logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} sample products")
    return len(SAMPLE_PRODUCTS)


def init_db(seed: bool = False) -> None:
    """Create tables if missing and optionally load the sample catalog."""
    Base.metadata.create_all(bind=engine)
    if seed:
        with SessionLocal() as session:
            seed_products(session)
