import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tablepilot.api.deps import get_db
from tablepilot.db.models import Base
from tablepilot.main import app


@pytest.fixture
def client():
    # one shared in-memory connection per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def business(client):
    response = client.post("/api/v1/businesses", json={"name": "Casa Pepe"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def business_url(business):
    return f"/api/v1/businesses/{business['id']}"


@pytest.fixture
def tables(client, business_url):
    created = []
    for number, max_capacity in [(1, 2), (2, 4), (3, 6)]:
        response = client.post(
            f"{business_url}/tables",
            json={"table_number": number, "min_capacity": 1, "max_capacity": max_capacity},
        )
        assert response.status_code == 201
        created.append(response.json())
    return created
