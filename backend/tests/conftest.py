"""Shared fixtures: an in-memory SQLite database and a TestClient."""

import logging
import os
from decimal import Decimal

# Must be set before producthub builds its engine
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ.pop("CORS_ORIGINS", None)
os.environ.pop("STATIC_DIR", None)

import pytest
from fastapi.testclient import TestClient

from producthub.db.base import Base
from producthub.db.repositories.product import ProductRepository
from producthub.db.session import SessionLocal, engine
from producthub.main import app
from producthub.services.product_service import ProductPayload, ProductService

# Suppress noisy logs during tests for cleaner output
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("producthub").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def repository(db_session):
    return ProductRepository(db_session)


@pytest.fixture
def service(repository):
    return ProductService(repository)


@pytest.fixture
def make_product(service, db_session):
    """Create and commit a product through the service."""

    def _make(
        name="Widget",
        description="A useful widget",
        price="10.00",
        stock=5,
        is_active=True,
    ):
        product = service.create(
            ProductPayload(
                name=name,
                description=description,
                price=Decimal(str(price)),
                stock=stock,
                is_active=is_active,
            )
        )
        db_session.commit()
        return product

    return _make


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
