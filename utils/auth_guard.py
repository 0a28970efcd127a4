from __future__ import annotations
from typing import Any, Dict, Mapping

from flask import current_app, g, request

from services.errors import ForbiddenError, MissingTokenError
from utils.security import TokenError, TokenSigner


def extract_bearer_token(headers: Mapping[str, str]) -> str | None:
    """Return the token of an `Authorization: Bearer <token>` header, if any."""
    auth = headers.get("Authorization") or ""
    parts = auth.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None


def authenticate(headers: Mapping[str, str], signer: TokenSigner) -> Dict[str, Any]:
    """
    Verify the access token carried by the request headers.
    401 when no token is present, 403 when it does not verify.
    """
    token = extract_bearer_token(headers)
    if not token:
        raise MissingTokenError()
    try:
        return signer.verify(token)
    except TokenError as err:
        raise ForbiddenError() from err


def authenticate_request():
    """before_request hook: attach the access token claims to g.current_user."""
    # CORS preflights carry no Authorization header; Flask answers them itself
    if request.method == "OPTIONS":
        return None
    service = current_app.extensions["auth_service"]
    g.current_user = authenticate(request.headers, service.access_signer)

