"""Shared fixtures: an in-memory SQLite store, a FastAPI test client and record factories."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator

# Must be set before ``database.base`` builds its engine.
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

import crud
import schemas
from app import app
from database import Base, Product, ProductType, SessionLocal, User, engine


@pytest.fixture(autouse=True)
def _tables() -> Iterator[None]:
    """Recreate every table so each test starts from an empty store."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db() -> Iterator[Session]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Client that keeps redirects visible so auth failures can be asserted."""
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def make_user(db: Session) -> Callable[..., User]:
    counter = {"n": 0}

    def _make_user(email: str | None = None, name: str = "Tester", password: str = "secret123") -> User:
        counter["n"] += 1
        email = email or f"test{counter['n']}@test.com"
        return crud.create_user(db, schemas.UserCreate(name=name, email=email, password=password))

    return _make_user


@pytest.fixture
def make_product(db: Session) -> Callable[..., Product]:
    def _make_product(name: str = "test", type_name: str = "shoes") -> Product:
        product_type = ProductType(name=type_name)
        product = Product(name=name, type=product_type)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make_product


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    """Build the token + email header pair that identifies ``user``."""

    def _auth_headers(user: User) -> dict[str, str]:
        return {"X-User-Token": user.authentication_token, "X-User-Email": user.email}

    return _auth_headers
