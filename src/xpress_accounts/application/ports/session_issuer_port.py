"""Port for issuing and resolving client-held session tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True)
class IssuedSession:
    """Signed session token and the lifetime the client should keep it for."""

    token: str
    max_age_seconds: int


class SessionIssuerPort(Protocol):
    """Session token contract."""

    def issue(self, *, user_id: UUID) -> IssuedSession:
        """Return a tamper-evident token bound to one user id."""

    def resolve(self, token: str | None) -> UUID | None:
        """Return the bound user id, or None for missing/invalid/expired tokens."""
