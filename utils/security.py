"""
security helpers:
- Argon2 password hashing via argon2-cffi
- JWT creation/verification via PyJWT
- JTI generation for token identifiers
"""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, Any

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

ph = PasswordHasher()


class TokenError(Exception):
    """Base class for token verification failures."""


class ExpiredTokenError(TokenError):
    pass


class TokenSignatureError(TokenError):
    """Signature mismatch or a token that cannot be decoded at all."""


def hash_password(password: str, hasher: PasswordHasher = ph) -> str:
    """Hash a plaintext password using Argon2
    """
    return hasher.hash(password)


def verify_password(password: str, password_hash: str, hasher: PasswordHasher = ph) -> bool:
    """ Verify a plaintext password using argon2.
    Mismatches and malformed hashes both count as a failed verification.
    """
    try:
        return hasher.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def generate_jti() -> str:
    """Generate a unique JTI (JWT ID).
    """
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class TokenSigner:
    """
    Issues and verifies HMAC-signed JWTs of one token class.
    Access and refresh tokens each get their own signer (and secret).
    """

    def __init__(self, secret: str, ttl: timedelta, algorithm: str = "HS256"):
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self.ttl = ttl
        self.algorithm = algorithm

    def __repr__(self):
        return f"<TokenSigner algorithm={self.algorithm} ttl={self.ttl}>"

    def sign(self, claims: Dict[str, Any]) -> str:
        now = _now()
        payload = dict(claims)
        payload["iat"] = int(now.timestamp())
        payload["exp"] = int((now + self.ttl).timestamp())
        payload["jti"] = generate_jti()
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """
        Decode and validate a JWT signed by this signer.
        Raises ExpiredTokenError past `exp`, TokenSignatureError for anything else invalid.
        """
        try:
            return jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as exc:
            raise ExpiredTokenError("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise TokenSignatureError(f"Invalid token: {exc}") from exc
