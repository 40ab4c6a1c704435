"""
Test configuration and fixtures
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.app import app
from app.database import get_db
from app.domain.entities import Plant
from app.models import Base
from app.repositories.sqlalchemy_repository import SqlAlchemyPlantRepository
from app.services.plants_manager import PlantsManager

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test"""
    # Drop all tables first to ensure clean state
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        # Clean up after test
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def plant_repository(db_session):
    """Repository bound to the test session"""
    return SqlAlchemyPlantRepository(db_session)


@pytest.fixture
def plants_manager(plant_repository):
    """Manager over the real repository and test database"""
    return PlantsManager(plant_repository)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    # Mock init_db to prevent creating the production database file
    with patch("app.app.init_db"):
        app.dependency_overrides[get_db] = override_get_db
        with TestClient(app) as test_client:
            yield test_client
        app.dependency_overrides.clear()


@pytest.fixture
def cucumber():
    """A valid plant that is not yet stored"""
    return Plant(
        catalog_number="1234ABCD9876",
        name="Cucumber",
        plant_type="Some green plant",
        food_type="Vegetable",
        quantity=100,
        is_edible=True,
    )


@pytest.fixture
def tomato():
    """A second valid plant sharing the cucumber's food type"""
    return Plant(
        catalog_number="9876ZXCV6789",
        name="Tomato",
        plant_type="Some red plant",
        food_type="Vegetable",
        quantity=200,
        is_edible=False,
    )


@pytest.fixture
def cucumber_payload():
    """Sample request body for adding a plant over HTTP"""
    return {
        "catalog_number": "1234ABCD9876",
        "name": "Cucumber",
        "plant_type": "Some green plant",
        "food_type": "Vegetable",
        "quantity": 100,
        "is_edible": True,
    }
