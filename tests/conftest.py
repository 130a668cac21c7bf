import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.database import Database
from app.core.security import TokenValidator
from app.main import create_app
from fakes import AUTH_URL, VALID_TOKEN, FakeAuthSession


@pytest.fixture
def database():
    """SQLite en mémoire, partagée entre les threads du TestClient"""
    db = Database(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield db
    db.drop_all()


@pytest.fixture
def auth_session():
    return FakeAuthSession()


@pytest.fixture
def test_app(database, auth_session):
    settings = Settings()
    settings.AUTH_VALIDATE_URL = AUTH_URL
    validator = TokenValidator(AUTH_URL, timeout=5, session=auth_session)
    return create_app(settings=settings, database=database, token_validator=validator)


@pytest.fixture
def client(test_app):
    """Client de test FastAPI (lifespan inclus)"""
    with TestClient(test_app) as c:
        yield c


@pytest.fixture
def db(database, client):
    """Session DB pour les tests"""
    session = database.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def auth_headers():
    return {"Authorization": VALID_TOKEN}
