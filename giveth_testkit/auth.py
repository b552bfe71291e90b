"""Bearer tokens for e2e requests.

Tokens are signed the same way the backend's authentication service signs
them, so the API under test accepts them as a logged-in user.
"""

from __future__ import annotations

import time

import jwt

from giveth_testkit.sample_data import TEST_ADDRESS
from giveth_testkit.settings import Settings, get_settings

BEARER_PREFIX = "Bearer "


def get_jwt(address: str = TEST_ADDRESS, settings: Settings | None = None) -> str:
    """Sign an access token for ``address`` and return it as ``"Bearer <token>"``.

    Raises whatever PyJWT raises for an unusable configuration (unknown
    algorithm, invalid key, ...).
    """
    settings = settings or get_settings()
    now = int(time.time())
    payload = {
        "userId": address,
        "aud": settings.jwt_audience,
        "iss": settings.jwt_issuer,
        "sub": settings.jwt_subject,
        "iat": now,
        "exp": now + settings.jwt_expires_in,
    }
    token = jwt.encode(
        payload,
        settings.auth_secret,
        algorithm=settings.jwt_algorithm,
        headers=settings.jwt_header or None,
    )
    return f"{BEARER_PREFIX}{token}"


def auth_headers(address: str = TEST_ADDRESS, settings: Settings | None = None) -> dict[str, str]:
    """``Authorization`` header dict for an HTTP client."""
    return {"Authorization": get_jwt(address, settings)}


def decode_jwt(token: str, settings: Settings | None = None) -> dict:
    """Verify a token issued by get_jwt(). Raises jwt.PyJWTError on failure.

    Accepts the raw token or the ``"Bearer "``-prefixed form.
    """
    settings = settings or get_settings()
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):]
    return jwt.decode(
        token,
        settings.auth_secret,
        algorithms=[settings.jwt_algorithm],
        audience=settings.jwt_audience,
        issuer=settings.jwt_issuer,
    )
