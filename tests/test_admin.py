import uuid
from datetime import timedelta

import pytest

from utils.security import TokenSigner

ROLES_URL = "/admin/api/v1/get/roles"


def test_admin_requires_token(client):
    response = client.get(ROLES_URL)

    assert response.status_code == 401
    assert response.get_json() == {"status": "fail", "message": "Access token required"}


@pytest.mark.parametrize(
    "header",
    ["Bearer", "Bearer   ", "Basic dXNlcjpwYXNz"],
)
def test_admin_malformed_header_counts_as_missing(client, header):
    response = client.get(ROLES_URL, headers={"Authorization": header})
    assert response.status_code == 401


def test_admin_rejects_invalid_token(client):
    response = client.get(ROLES_URL, headers={"Authorization": "Bearer not.a.token"})

    assert response.status_code == 403
    assert response.get_json() == {
        "status": "fail",
        "message": "Access token is invalid or expired",
    }


def test_admin_rejects_refresh_token(client, tokens):
    response = client.get(ROLES_URL, headers={"Authorization": f"Bearer {tokens['refreshToken']}"})
    assert response.status_code == 403


def test_admin_rejects_expired_access_token(client, app, registered_user):
    signer = TokenSigner(app.config["JWT_ACCESS_TOKEN_SECRET_KEY"], timedelta(seconds=-5))
    token = signer.sign({"userId": registered_user["id"], "roleId": registered_user["roleId"]})

    response = client.get(ROLES_URL, headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403


def test_admin_accepts_refreshed_access_token(client, tokens):
    refreshed = client.post("/auth/refresh/token", json={"token": tokens["refreshToken"]})
    headers = {"Authorization": f"Bearer {refreshed.get_json()['accessToken']}"}

    response = client.get(ROLES_URL, headers=headers)
    assert response.status_code == 404
    assert response.get_json()["message"] == "No roles found"


def test_role_lifecycle(client, auth_headers):
    response = client.post(
        "/admin/api/v1/create/role", json={"name": "Moderator"}, headers=auth_headers
    )
    assert response.status_code == 201
    role = response.get_json()["data"]["role"]
    assert role["name"] == "Moderator"

    response = client.post(
        "/admin/api/v1/create/role", json={"name": "Moderator"}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.get_json()["message"] == "Role already exists"

    response = client.get(ROLES_URL, headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()["data"]["roles"] == [role]

    response = client.delete(
        "/admin/api/v1/delete/role", json={"roleId": role["id"]}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.get_json() == {"status": "success", "message": "Role deleted successfully"}

    response = client.get(ROLES_URL, headers=auth_headers)
    assert response.status_code == 404


def test_delete_unknown_role(client, auth_headers):
    response = client.delete(
        "/admin/api/v1/delete/role", json={"roleId": str(uuid.uuid4())}, headers=auth_headers
    )
    assert response.status_code == 404
    assert response.get_json()["message"] == "Role not found"


def test_create_role_validation(client, auth_headers):
    response = client.post("/admin/api/v1/create/role", json={}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()["errors"] == ["name: Missing data for required field."]


def test_registered_user_can_reference_created_role(client, auth_headers):
    role = client.post(
        "/admin/api/v1/create/role", json={"name": "Reader"}, headers=auth_headers
    ).get_json()["data"]["role"]

    response = client.post(
        "/auth/register",
        json={
            "username": "jane_doe",
            "email": "jane@x.com",
            "password": "secret2",
            "roleId": role["id"],
        },
    )
    assert response.status_code == 201
    assert response.get_json()["data"]["user"]["roleId"] == role["id"]


def test_admin_preflight_skips_token_check(client):
    response = client.options(
        ROLES_URL,
        headers={
            "Origin": "http://reader.example",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "Authorization",
        },
    )

    assert 200 <= response.status_code < 300
    assert response.headers.get("Access-Control-Allow-Origin")
