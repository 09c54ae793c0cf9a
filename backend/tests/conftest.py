import pytest
from fastapi.testclient import TestClient

from healthapp.config import Settings
from healthapp.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        secret_key="test-secret-key",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        log_level="WARNING",
    )


@pytest.fixture
def client(settings):
    # with 블록 안에서 lifespan 이 실행되어 테이블이 만들어짐
    with TestClient(create_app(settings)) as c:
        yield c


def register(client, email="user@example.com", password="password123"):
    return client.post("/api/auth/register", json={"email": email, "password": password})


def login(client, email="user@example.com", password="password123"):
    return client.post("/api/auth/login", json={"email": email, "password": password})


@pytest.fixture
def auth_headers(client):
    assert register(client).status_code == 201
    resp = login(client)
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}
