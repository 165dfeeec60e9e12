"""Shared normalization and validation helpers for account credentials."""

from __future__ import annotations

from xpress_accounts.domain.accounts.errors import AccountValidationError

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 125


def normalize_taxi_number(*, number: str) -> str:
    """Normalize one taxi number for lookup/storage and reject blank values."""

    normalized = number.strip().lower()
    if not normalized:
        raise AccountValidationError("number cannot be blank")
    return normalized


def validate_sign_in_password(*, password: str) -> str:
    """Return password unchanged when its length is within sign-in bounds."""

    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        raise AccountValidationError(
            f"password length must be between {PASSWORD_MIN_LENGTH} "
            f"and {PASSWORD_MAX_LENGTH} characters"
        )
    return password
