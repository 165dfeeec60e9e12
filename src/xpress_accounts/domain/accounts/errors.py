"""Error taxonomy for account provisioning and sign-in."""

from __future__ import annotations


class AccountValidationError(ValueError):
    """Raised when caller input is malformed or out of range."""


class AuthenticationError(PermissionError):
    """Raised when credentials do not match a known account.

    The same message is used for unknown numbers and wrong passwords so the
    caller cannot tell whether an account exists.
    """

    def __init__(self) -> None:
        super().__init__("incorrect data")


class CredentialError(RuntimeError):
    """Raised when password hashing or verification fails internally."""


class PersistenceError(RuntimeError):
    """Raised when account storage cannot complete a read or write."""


class DuplicateTaxiNumberError(PersistenceError):
    """Raised when a taxi number is already linked to an account."""

    def __init__(self, *, number: str) -> None:
        super().__init__(f"taxi number already registered: {number}")
        self.number = number


class AccountNotFoundError(LookupError):
    """Raised when a session points at an account that no longer exists."""

    def __init__(self, *, user_id: object) -> None:
        super().__init__(f"account not found: {user_id}")
        self.user_id = user_id
