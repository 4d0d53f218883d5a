"""Shared fixtures: a fresh app on a temporary SQLite database per test."""

import os

os.environ.setdefault("APP_ENV", "test")

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.scripts.create_admin import create_admin
from main import create_app

ADMIN = ("admin", "admin123")
MANAGER = ("manager", "manager123")
USER = ("clerk", "clerk123")


def login(client: TestClient, username: str, password: str) -> dict:
    res = client.post("/auth/login", json={"username": username, "password": password})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        app_env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        jwt_secret="test-secret",
        log_level="WARNING",
    )


@pytest.fixture
def application(settings):
    return create_app(settings)


@pytest.fixture
def client(application):
    with TestClient(application) as c:
        # runs on the app's own event loop
        c.portal.call(create_admin, application.state.session_factory, *ADMIN)
        yield c


@pytest.fixture
def admin_headers(client) -> dict:
    return login(client, *ADMIN)


@pytest.fixture
def manager_headers(client, admin_headers) -> dict:
    res = client.post(
        "/api/users",
        json={"username": MANAGER[0], "password": MANAGER[1], "name": "Mia Manager", "role": "manager"},
        headers=admin_headers,
    )
    assert res.status_code == 201, res.text
    return login(client, *MANAGER)


@pytest.fixture
def user_headers(client, admin_headers) -> dict:
    res = client.post(
        "/api/users",
        json={"username": USER[0], "password": USER[1], "name": "Carl Clerk", "role": "user"},
        headers=admin_headers,
    )
    assert res.status_code == 201, res.text
    return login(client, *USER)


@pytest.fixture
def catalog(client, admin_headers) -> dict:
    """One individual customer, two options and two products."""
    color = client.post(
        "/api/options",
        json={"title": "Color", "model": "multiState", "states": ["red", "blue"]},
        headers=admin_headers,
    ).json()
    note = client.post(
        "/api/options",
        json={"title": "Engraving", "model": "text"},
        headers=admin_headers,
    ).json()
    chair = client.post(
        "/api/products",
        json={"name": "Chair", "productOptions": [{"optionId": color["id"], "maxNo": 1}]},
        headers=admin_headers,
    ).json()
    table = client.post(
        "/api/products",
        json={"name": "Table", "productOptions": [{"optionId": note["id"]}]},
        headers=admin_headers,
    ).json()
    customer = client.post(
        "/api/customers",
        json={"name": "Alice", "type": "individual", "mobile": "555-0100"},
        headers=admin_headers,
    ).json()
    return {
        "color": color["id"],
        "note": note["id"],
        "chair": chair["id"],
        "table": table["id"],
        "customer": customer["id"],
    }
