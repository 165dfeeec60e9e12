"""Signed-cookie session issuer backed by itsdangerous."""

from __future__ import annotations

from uuid import UUID

from itsdangerous import BadData, URLSafeTimedSerializer

from xpress_accounts.application.ports.session_issuer_port import (
    IssuedSession,
    SessionIssuerPort,
)

SESSION_COOKIE_NAME = "AUTH_COOKIE"
DEFAULT_SESSION_MAX_AGE_SECONDS = 8 * 60 * 60
_SESSION_SALT = "xpress.accounts.session.v1"


class SignedCookieSessionIssuer(SessionIssuerPort):
    """Issue timestamped, HMAC-signed tokens carrying the user id.

    The token is the whole session: there is no server-side store, and a
    token stops resolving once it is older than `max_age_seconds`.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        max_age_seconds: int = DEFAULT_SESSION_MAX_AGE_SECONDS,
    ) -> None:
        if not secret_key:
            raise ValueError("session secret key cannot be blank")
        self._serializer = URLSafeTimedSerializer(secret_key=secret_key, salt=_SESSION_SALT)
        self._max_age_seconds = max_age_seconds

    def issue(self, *, user_id: UUID) -> IssuedSession:
        token = self._serializer.dumps({"uid": str(user_id)})
        return IssuedSession(token=token, max_age_seconds=self._max_age_seconds)

    def resolve(self, token: str | None) -> UUID | None:
        if not token:
            return None
        try:
            data = self._serializer.loads(token, max_age=self._max_age_seconds)
        except BadData:
            return None

        raw_user_id = data.get("uid") if isinstance(data, dict) else None
        if not isinstance(raw_user_id, str):
            return None
        try:
            return UUID(raw_user_id)
        except ValueError:
            return None
