import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from drinkwithme.core.database import Base, configure_sqlite, get_db
from drinkwithme.core.security import create_access_token
from drinkwithme.models.user_db.user_db import User
from drinkwithme.models.profile_db.profile_db import Profile
from drinkwithme.models.venue_db.venue_db import Venue
from drinkwithme.models.selection_db.selection_crud import replace_selections
from drinkwithme.services.venue_status import VenueStatus


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    configure_sqlite(engine)

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(name="user", is_admin=False, **profile_fields):
        user = User(
            email=f"{name.lower()}-{uuid.uuid4().hex[:8]}@example.com",
            hashed_password="not-a-real-hash",
            is_admin=is_admin,
        )
        user.profile = Profile(name=name, **profile_fields)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_venue(db):
    def _make_venue(name="Venue", status=VenueStatus.approved, **fields):
        venue = Venue(
            name=name,
            address=fields.pop("address", "1 Main Street, Colombo"),
            latitude=fields.pop("latitude", 6.9),
            longitude=fields.pop("longitude", 79.8),
            status=status.value,
            **fields,
        )
        db.add(venue)
        db.commit()
        db.refresh(venue)
        return venue

    return _make_venue


@pytest.fixture
def select(db):
    def _select(user, *venues):
        return replace_selections(db, user.id, [v.id for v in venues])

    return _select


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        token = create_access_token({"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
