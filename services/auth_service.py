"""
Authentication service: registration, login and access-token refresh.

The service receives its stores, token signers and password hasher explicitly,
so it can run inside or outside a Flask application context.

Token lifecycle:
- login signs an access token (24h) and a refresh token (7d) and overwrites the
  user's single stored refresh token
- refresh only accepts the token currently stored for a user, then issues a new
  access token; the stored refresh token is left as is
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from argon2 import PasswordHasher
from marshmallow import Schema, ValidationError as SchemaValidationError
from sqlalchemy.exc import IntegrityError

from models.schemas.user import (
    RefreshTokenSchema,
    UserCreateSchema,
    UserLoginSchema,
    UserOutSchema,
)
from models.stores import RefreshTokenStore, UserStore
from models.user import User
from services.errors import (
    AuthenticationError,
    ConflictError,
    ExpiredOrInvalidTokenError,
    InvalidTokenError,
    ValidationError,
    flatten_messages,
)
from utils.security import TokenError, TokenSigner, hash_password, ph, verify_password

logger = logging.getLogger(__name__)

user_create_schema = UserCreateSchema()
user_login_schema = UserLoginSchema()
refresh_token_schema = RefreshTokenSchema()
user_out_schema = UserOutSchema()


def load_payload(schema: Schema, payload: Any) -> Dict[str, Any]:
    """Run a marshmallow schema, reporting every violation at once."""
    try:
        return schema.load(payload if payload is not None else {})
    except SchemaValidationError as err:
        raise ValidationError(errors=flatten_messages(err.messages)) from err


class AuthService:
    def __init__(
        self,
        users: UserStore,
        refresh_tokens: RefreshTokenStore,
        access_signer: TokenSigner,
        refresh_signer: TokenSigner,
        hasher: PasswordHasher = ph,
    ):
        self.users = users
        self.refresh_tokens = refresh_tokens
        self.access_signer = access_signer
        self.refresh_signer = refresh_signer
        self.hasher = hasher

    def register(self, payload: Any) -> Dict[str, Any]:
        """
        Create a user from {username, email, password, roleId}.
        Returns {id, username, email, roleId}; no tokens are issued.
        """
        data = load_payload(user_create_schema, payload)

        if self.users.find_by_email_or_username(data["email"], data["username"]):
            raise ConflictError()

        user = User(
            username=data["username"],
            email=data["email"],
            password_hash=hash_password(data["password"], self.hasher),
            role_id=data["role_id"],
        )
        try:
            self.users.insert(user)
        except IntegrityError as err:
            # lost a race against a concurrent registration
            raise ConflictError() from err

        logger.info("Registered user %s", user.id)
        return user_out_schema.dump(user)

    def login(self, payload: Any) -> Dict[str, str]:
        """
        Check {email, password} and issue an access/refresh token pair.
        Unknown email and wrong password fail identically.
        """
        data = load_payload(user_login_schema, payload)

        user = self.users.find_by_email(data["email"])
        if user is None:
            logger.info("Login rejected: unknown email")
            raise AuthenticationError()
        if not verify_password(data["password"], user.password_hash, self.hasher):
            logger.info("Login rejected for user %s: bad password", user.id)
            raise AuthenticationError()

        claims = {"userId": user.id, "roleId": user.role_id}
        access_token = self.access_signer.sign(claims)
        refresh_token = self.refresh_signer.sign(claims)

        expiry = datetime.now(timezone.utc) + self.refresh_signer.ttl
        self.refresh_tokens.upsert_for_user(user.id, refresh_token, expiry)

        logger.info("User %s logged in", user.id)
        return {"accessToken": access_token, "refreshToken": refresh_token}

    def refresh(self, payload: Any) -> Dict[str, str]:
        """
        Exchange the stored refresh token for a new access token.

        The presence check runs first: a correctly signed token that has been
        replaced by a later login is rejected.
        """
        data = load_payload(refresh_token_schema, payload)
        token = data["token"]

        if self.refresh_tokens.find_by_token(token) is None:
            raise InvalidTokenError()

        try:
            decoded = self.refresh_signer.verify(token)
        except TokenError as err:
            raise ExpiredOrInvalidTokenError() from err

        # Only userId is carried over; roleId is not part of refreshed access tokens
        access_token = self.access_signer.sign({"userId": decoded.get("userId")})
        return {"accessToken": access_token}
