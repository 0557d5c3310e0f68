import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"
os.environ["WELCOME_PACK_FEE"] = "0"

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from cleantrack.database import Base, get_db  # noqa: E402
from cleantrack.main import app  # noqa: E402
from cleantrack.shared.clock import get_today  # noqa: E402

TODAY = date(2025, 3, 15)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_apartment(client):
    def _make(apartment_number="A101", owner_name="Alice Owner", **fields):
        payload = {"apartment_number": apartment_number, "owner_name": owner_name, **fields}
        response = client.post("/apartments", json=payload)
        assert response.status_code == 201, response.json()
        return response.json()["data"]

    return _make


@pytest.fixture
def make_cleaner(client):
    def _make(name="Jane", **fields):
        response = client.post("/cleaners", json={"name": name, **fields})
        assert response.status_code == 201, response.json()
        return response.json()["data"]

    return _make


@pytest.fixture
def make_session(client):
    def _make(apartment, cleaner, cleaning_date, **fields):
        payload = {
            "apartment_id": apartment["id"],
            "cleaner_id": cleaner["id"],
            "cleaning_date": cleaning_date,
            **fields,
        }
        response = client.post("/cleaning-sessions", json=payload)
        assert response.status_code == 201, response.json()
        return response.json()["data"]

    return _make
