"""Shared fixtures: an in-memory SQLite database with the full schema."""

import os

os.environ.setdefault("SQLITE_PATH", ":memory:")

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.models.user import User


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool, )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def user(db) -> User:
    user = User(email="sleeper@example.com", full_name="Sleeper")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def other_user(db) -> User:
    user = User(email="other@example.com")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
