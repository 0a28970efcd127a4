import uuid

import pytest

from api import create_app
from models import storage


@pytest.fixture
def app():
    # TestingConfig: in-memory SQLite (fresh per app), cheap argon2 parameters
    app = create_app("testing")
    yield app
    storage.close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_service(app):
    return app.extensions["auth_service"]


@pytest.fixture
def role_id():
    return str(uuid.uuid4())


@pytest.fixture
def user_payload(role_id):
    return {
        "username": "john_doe",
        "email": "john@x.com",
        "password": "secret1",
        "roleId": role_id,
    }


@pytest.fixture
def registered_user(client, user_payload):
    response = client.post("/auth/register", json=user_payload)
    assert response.status_code == 201, response.get_data(as_text=True)
    return response.get_json()["data"]["user"]


@pytest.fixture
def tokens(client, registered_user, user_payload):
    response = client.post(
        "/auth/login",
        json={"email": user_payload["email"], "password": user_payload["password"]},
    )
    assert response.status_code == 200, response.get_data(as_text=True)
    return response.get_json()["data"]


@pytest.fixture
def auth_headers(tokens):
    return {"Authorization": f"Bearer {tokens['accessToken']}"}
