"""Pytest configuration and fixtures for testing."""
import os
from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Test database URL, set before any app module reads the environment
TEST_DATABASE_URL = "sqlite:///./test.db"  # File-based DB for inspection
os.environ['DATABASE_URL'] = TEST_DATABASE_URL
os.environ['LOG_LEVEL'] = 'DEBUG'

from config.database import get_db  # noqa: E402
from models.base_model import base as Base  # noqa: E402
from models.category import CategoryModel  # noqa: E402
from models.product import ProductModel  # noqa: E402
from main import create_fastapi_app  # noqa: E402


@pytest.fixture(scope="session")
def engine():
    """Create the SQLite engine shared by the whole test session."""
    test_engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},  # SQLite specific
        echo=False
    )
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def db_session_factory(engine) -> Generator[sessionmaker, None, None]:
    Base.metadata.create_all(bind=engine)
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=connection)
    try:
        yield SessionLocal
    finally:
        transaction.rollback()
        connection.close()
        Base.metadata.drop_all(bind=engine)  # Drop tables after test


@pytest.fixture(scope="function")
def api_client(db_session_factory: sessionmaker) -> Generator[TestClient, None, None]:
    """Create a test client for API testing."""
    app = create_fastapi_app()

    def override_get_db():
        session = db_session_factory()
        try:
            yield session
            session.commit()  # Commit changes made by the request
        except Exception:
            session.rollback()  # Rollback on exception
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client


# Model fixtures
@pytest.fixture
def sample_category_data():
    """Sample category data."""
    return {
        "name": "Electronics"
    }


@pytest.fixture
def sample_login_data():
    """Sample login payload."""
    return {
        "email": "john.doe@example.com",
        "password": "s3cret-passw0rd"
    }


# Database seeding fixtures
@pytest.fixture(scope="function")
def seeded_db(db_session_factory: sessionmaker) -> dict:
    session = db_session_factory()
    try:
        category = CategoryModel(name="Electronics")
        session.add(category)
        session.flush()
        session.refresh(category)

        product = ProductModel(
            name="Widget",
            price=Decimal("9.99"),
            stock=100,
            category_id=category.id_key,
        )
        session.add(product)
        session.flush()
        session.refresh(product)

        # No session.commit() here; the overarching transaction from db_session_factory
        # will handle the rollback at the end of the test.
        return {
            "category": category,
            "product": product,
            "db_session": session  # Provide the session for direct use in tests if needed
        }
    finally:
        session.close()
