"""Bcrypt password hasher adapter."""

from __future__ import annotations

import asyncio
import base64
import hashlib
import re
import secrets

import bcrypt

from xpress_accounts.application.ports.password_hasher_port import (
    GeneratedPassword,
    PasswordHasherPort,
)
from xpress_accounts.domain.accounts.errors import CredentialError

DEFAULT_BCRYPT_ROUNDS = 12
GENERATED_PASSWORD_BYTES = 18

_BCRYPT_HASH_PATTERN = re.compile(r"^\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{53}$")


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt in worker threads."""

    def __init__(self, *, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        self._rounds = rounds

    async def hash_password(self, password: str) -> str:
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify_password(self, *, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self._verify_sync, password, password_hash)

    async def generate_password(self) -> GeneratedPassword:
        try:
            plaintext = secrets.token_urlsafe(GENERATED_PASSWORD_BYTES)
        except OSError as exc:
            raise CredentialError("failed to generate random password") from exc
        hashed = await self.hash_password(plaintext)
        return GeneratedPassword(plaintext=plaintext, hashed=hashed)

    def _hash_sync(self, password: str) -> str:
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            return bcrypt.hashpw(_encode(password), salt).decode("utf-8")
        except ValueError as exc:
            raise CredentialError("failed to hash password") from exc

    def _verify_sync(self, password: str, password_hash: str) -> bool:
        if not _BCRYPT_HASH_PATTERN.match(password_hash):
            raise CredentialError("stored password hash is malformed")
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError as exc:
            raise CredentialError("stored password hash is malformed") from exc


def _encode(password: str) -> bytes:
    # SHA-256 then base64 keeps every input byte significant and stays under
    # bcrypt's 72-byte input limit.
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)
