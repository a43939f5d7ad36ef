import os

# keep the application engine off PostgreSQL while the app module is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from thingful.database.connection import Base, get_db
from thingful.main import app
from thingful.models.model import User
from thingful.security.user_security import hash_password

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "11AAaa!!"


def make_users_array():
    return [
        {"user_name": "TestUser1", "full_name": "Test user 1", "nick_name": "TU1"},
        {"user_name": "TestUser2", "full_name": "Test user 2", "nick_name": "TU2"},
        {"user_name": "TestUser3", "full_name": "Test user 3", "nick_name": None},
    ]


@pytest.fixture(scope="session")
def hashed_test_password():
    return hash_password(TEST_PASSWORD)


@pytest.fixture()
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db_session):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def test_users():
    return make_users_array()


@pytest.fixture()
def seeded_users(db_session, test_users, hashed_test_password):
    users = [User(password=hashed_test_password, **user) for user in test_users]
    db_session.add_all(users)
    db_session.commit()
    for user in users:
        db_session.refresh(user)
    return users
