"""
Authentication blueprint:
- POST /auth/register
- POST /auth/login
- POST /auth/refresh/token

The views only move JSON in and out; validation, hashing, signing and the
refresh-token bookkeeping live in services.auth_service.AuthService.
"""
from __future__ import annotations

from flask import Blueprint, request, jsonify, current_app

bp = Blueprint("auth", __name__, url_prefix="/auth")


def _service():
    return current_app.extensions["auth_service"]


@bp.post("/register")
def register():
    """
    Register a new user.
    Body: { "username", "email", "password", "roleId" }
    201 with the created user (never the password); 400 on validation error or
    when the email or username is taken.
    """
    payload = request.get_json(silent=True)
    user = _service().register(payload)
    return jsonify(
        {
            "status": "success",
            "data": {"user": user},
        }
    ), 201


@bp.post("/login")
def login():
    """
    Login: return accessToken and refreshToken
    Body: { "email", "password" }
    """
    payload = request.get_json(silent=True)
    tokens = _service().login(payload)
    return jsonify(
        {
            "status": "success",
            "data": tokens,
        }
    ), 200


@bp.post("/refresh/token")
def refresh_token():
    """
    Exchange the stored refresh token for a new access token.
    Body: { "token": "<refresh token>" }
    """
    payload = request.get_json(silent=True)
    return jsonify(_service().refresh(payload)), 200
