"""
Fixtures for API tests.

The application is built with create_app() and its service dependencies
are overridden with services backed by the in-memory stores.
"""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from api import create_app
from api.dependencies import get_identity_service, get_movie_service, get_token_service


@pytest.fixture
def app(identity_service, token_service, movie_service):
    app = create_app()
    app.dependency_overrides[get_identity_service] = lambda: identity_service
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_movie_service] = lambda: movie_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def register(client: TestClient, email: str, password: str = "Passw0rd!", role: Optional[str] = None):
    body = {"email": email, "password": password}
    if role is not None:
        body["role"] = role
    return client.post("/api/auth/register", json=body)


def login_token(client: TestClient, email: str, password: str = "Passw0rd!") -> str:
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def signed_up(client: TestClient, email: str, role: Optional[str] = None) -> tuple[dict, dict[str, str]]:
    """Register a user, log in, and return (identity json, auth headers)."""
    response = register(client, email, role=role)
    assert response.status_code == 201, response.text
    return response.json(), auth_header(login_token(client, email))
