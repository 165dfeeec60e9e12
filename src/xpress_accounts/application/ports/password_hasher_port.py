"""Port for password hashing, verification, and generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class GeneratedPassword:
    """Freshly generated plaintext password and its storable hash."""

    plaintext: str
    hashed: str

    def __repr__(self) -> str:
        return "GeneratedPassword(plaintext=***, hashed=***)"


class PasswordHasherPort(Protocol):
    """Password hashing/verification contract.

    Implementations must not block the event loop while hashing.
    """

    async def hash_password(self, password: str) -> str:
        """Hash plaintext password for storage."""

    async def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Verify plaintext password against stored hash."""

    async def generate_password(self) -> GeneratedPassword:
        """Generate a random plaintext password together with its hash."""
