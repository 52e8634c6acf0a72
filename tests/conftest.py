# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("PYTEST_RUNNING", "true")
# Minimum bcrypt cost keeps password hashing fast under test.
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from company_reviews.core.security import create_access_token, hash_password
from company_reviews.db.session import Base
from company_reviews.db.session import get_db as app_get_session
from company_reviews.main import app as fastapi_app
from company_reviews.models import Company, Review, User
from company_reviews.models.user import ROLE_ADMIN, ROLE_USER

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "s3cret-pass"

_USER_COUNTER = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # pysqlite needs explicit BEGIN handling for SAVEPOINT to behave.
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn) -> None:
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def _auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that persists users with a known password."""

    def _make_user(role: str = ROLE_USER, **overrides: Any) -> User:
        n = next(_USER_COUNTER)
        fields: dict[str, Any] = {
            "username": f"user{n}",
            "email": f"user{n}@example.com",
            "password_hash": hash_password(TEST_PASSWORD),
            "first_name": "Test",
            "last_name": f"User{n}",
            "role": role,
        }
        fields.update(overrides)
        user = User(**fields)
        db_session.add(user)
        db_session.flush()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def test_user(make_user: Callable[..., User]) -> User:
    """Create and return the primary test user."""
    return make_user(first_name="Alice", last_name="Author")


@pytest.fixture()
def other_user(make_user: Callable[..., User]) -> User:
    """Create and return a second persisted user."""
    return make_user(first_name="Bob", last_name="Voter")


@pytest.fixture()
def admin_user(make_user: Callable[..., User]) -> User:
    return make_user(role=ROLE_ADMIN, first_name="Ada", last_name="Admin")


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return _auth_headers(test_user)


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return _auth_headers(other_user)


@pytest.fixture()
def admin_auth_token(admin_user: User) -> dict[str, str]:
    return _auth_headers(admin_user)


@pytest.fixture()
def headers_for() -> Callable[[User], dict[str, str]]:
    """Return a helper building bearer headers for any user."""
    return _auth_headers


@pytest.fixture()
def company(db_session: Session) -> Company:
    """Create a default test company."""
    company = Company(
        name="TechCorp",
        industry="Technology",
        location="San Francisco, CA",
        description="Software development and cloud solutions.",
        website="https://techcorp.example",
    )
    db_session.add(company)
    db_session.flush()
    db_session.refresh(company)
    return company


@pytest.fixture()
def other_company(db_session: Session) -> Company:
    company = Company(
        name="DataFlow",
        industry="Data Analytics",
        location="Austin, TX",
        description="Business intelligence and analytics.",
    )
    db_session.add(company)
    db_session.flush()
    db_session.refresh(company)
    return company


def _review_payload(company_id: int, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "company_id": company_id,
        "rating": 4,
        "title": "Solid place to work",
        "comment": "Good team, interesting projects and fair management.",
        "pros": "Great colleagues",
        "cons": "Slow promotions",
        "work_environment": "good",
        "work_life_balance": "fair",
        "salary": "good",
        "is_recommended": True,
        "position": "Engineer",
        "employment_type": "full-time",
        "experience_length": "1-2-years",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def test_review(db_session: Session, test_user: User, company: Company) -> Review:
    """A review of ``company`` written by ``test_user`` through the service layer."""
    from company_reviews.schemas.review import ReviewCreate
    from company_reviews.services.review_service import create_review

    return create_review(db_session, test_user, ReviewCreate(**_review_payload(company.id)))


@pytest.fixture()
def review_payload() -> Callable[..., dict[str, Any]]:
    """Return a builder for valid review creation payloads."""
    return _review_payload
