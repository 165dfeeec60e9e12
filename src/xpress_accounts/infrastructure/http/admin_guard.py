"""Bearer-token capability check for admin-only account endpoints."""

from __future__ import annotations

import hmac


class MissingAdminTokenError(PermissionError):
    """Raised when an admin bearer token is required but not provided."""


class InvalidAdminTokenError(PermissionError):
    """Raised when the bearer header is malformed or carries the wrong token."""


def extract_bearer_token(authorization_header: str | None) -> str:
    """Extract token from standard `Authorization: Bearer <token>` header."""

    if authorization_header is None or not authorization_header.strip():
        raise MissingAdminTokenError("missing bearer token")

    parts = authorization_header.strip().split()
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        raise InvalidAdminTokenError("invalid bearer token header")

    return parts[1]


class AdminTokenGuard:
    """Compare caller bearer tokens against the configured admin API token."""

    def __init__(self, *, admin_token: str) -> None:
        if not admin_token:
            raise ValueError("admin token cannot be blank")
        self._admin_token = admin_token.encode("utf-8")

    def require_admin(self, *, authorization_header: str | None) -> None:
        """Raise unless the header carries the admin token."""

        token = extract_bearer_token(authorization_header)
        if not hmac.compare_digest(token.encode("utf-8"), self._admin_token):
            raise InvalidAdminTokenError("invalid admin token")
