"""Pytest fixtures for GrowCery tests."""

import os

# Settings are read at import time, so point them at an in-memory database first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient

from growcery import models  # noqa: F401
from growcery.database import Base, SessionLocal, engine
from growcery.models.product import ProductType
from growcery.models.user import Role
from growcery.repositories.user_repository import UserRepository
from growcery.schemas.auth import Identity
from growcery.schemas.product import ProductCreate
from growcery.security import create_token, hash_password
from growcery.services.product_service import ProductService


@pytest.fixture(autouse=True)
def tables():
    """Create a fresh schema for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    from growcery.main import app

    return TestClient(app)


def make_user(db, email, role=Role.CUSTOMER):
    user = UserRepository(db).create({
        "first_name": "Test",
        "last_name": "User",
        "email": email,
        "password_hash": hash_password("secret"),
        "role": role.value,
    })
    return Identity(id=user.id, email=user.email, role=role)


def make_product(db, name="Tomato", quantity=10, price=2.5, product_type=ProductType.CROP):
    return ProductService(db).create_product(ProductCreate(
        name=name,
        product_type=product_type,
        quantity=quantity,
        price=price,
    ))


@pytest.fixture
def customer(db):
    return make_user(db, "customer@example.com")


@pytest.fixture
def admin(db):
    return make_user(db, "admin@example.com", role=Role.ADMIN)


@pytest.fixture
def customer_headers(customer):
    token = create_token(customer.id, customer.email, customer.role.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin):
    token = create_token(admin.id, admin.email, admin.role.value)
    return {"Authorization": f"Bearer {token}"}
