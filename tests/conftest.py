"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Registered users and their bearer tokens
- Sample request payloads
"""

import os

# Settings are read at import time, so point them at SQLite before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JSON_LOGS", "false")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.core.database import Base, get_db
from jobboard.core.enums import RoleType
from jobboard.core.security import create_access_token, get_password_hash
from jobboard.models.user import User
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

USER_PASSWORD = "5W]L8t1m4@PcTTO"


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _make_user(db_session, username, email, role):
    user = User(
        username=username,
        email=email,
        password=get_password_hash(USER_PASSWORD),
        role=role,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_user(db_session):
    """A regular (role User) account"""
    return _make_user(db_session, "johnDoe", "john.doe@mail.com", RoleType.USER)


@pytest.fixture
def admin_user(db_session):
    """An account with the Admin role"""
    return _make_user(db_session, "adminUser", "admin@mail.com", RoleType.ADMIN)


@pytest.fixture
def auth_headers(test_user):
    token = create_access_token(data={"sub": test_user.username})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin_user):
    token = create_access_token(data={"sub": admin_user.username})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_user_data():
    """Valid registration payload"""
    return {
        "username": "newUser",
        "email": "random@mail.com",
        "password": USER_PASSWORD,
        "role": "User",
    }


@pytest.fixture
def sample_person_data():
    """Valid personal profile payload"""
    return {
        "firstName": "John",
        "lastName": "Doe",
        "phoneNumber": "555-0100-22",
        "address": "221B Baker Street, London",
        "dateOfBirth": "1990-04-12",
        "education": [
            {
                "degreeTitle": "BSc Computer Science",
                "institution": "University of Edinburgh",
                "startingDate": "2008-09-01",
                "graduationDate": "2012-06-30",
                "isOngoing": "false",
            }
        ],
        "workExperience": [
            {
                "jobTitle": "Backend Developer",
                "organizationName": "Acme Corp",
                "city": "London",
                "country": "United Kingdom",
                "startingDate": "2013-01-07",
                "isOngoing": True,
                "tasks": [
                    {"name": "API design", "description": "Designed the public REST API"},
                ],
            }
        ],
    }


@pytest.fixture
def sample_listing_data():
    """Valid listing payload"""
    return {
        "title": "Senior Python Developer",
        "organizationName": "Acme Corp",
        "datePosted": "2024-03-01",
        "workType": "Hybrid",
        "employmentType": "Full-time",
        "experienceLevel": "Mid-Senior level",
        "city": "Berlin",
        "country": "Germany",
        "listingDesc": "We are looking for a Python developer with FastAPI experience.",
        "salaryRange": {"minAmount": 60000, "maxAmount": 85000},
        "status": "Open",
    }


@pytest.fixture
def listing(client, admin_headers, sample_listing_data):
    """A stored listing, created through the API"""
    response = client.post("/p/listings", json=sample_listing_data, headers=admin_headers)
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def person(client, auth_headers, sample_person_data):
    """The test user's stored profile, created through the API"""
    response = client.post("/p/users", json=sample_person_data, headers=auth_headers)
    assert response.status_code == 201
    return response.json()["data"]
