#!/usr/bin/env python3
"""Create the products table and load the sample catalog if it is empty."""

from producthub.core.config import get_settings
from producthub.core.logging import configure_logging
from producthub.db.base import Base
from producthub.db.seed import seed_products
from producthub.db.session import SessionLocal, engine

settings = get_settings()
configure_logging(settings.log_level)

print(f"Connecting to {engine.url.render_as_string(hide_password=True)}...")
Base.metadata.create_all(bind=engine)

with SessionLocal() as session:
    added = seed_products(session)

if added:
    print(f"✓ Inserted {added} sample products")
else:
    print("✓ Products table already populated, nothing to do")
