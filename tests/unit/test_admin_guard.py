from __future__ import annotations

import pytest

from xpress_accounts.infrastructure.http.admin_guard import (
    AdminTokenGuard,
    InvalidAdminTokenError,
    MissingAdminTokenError,
    extract_bearer_token,
)


def test_extract_bearer_token_accepts_case_insensitive_scheme() -> None:
    assert extract_bearer_token("bearer admin-token") == "admin-token"
    assert extract_bearer_token("  Bearer admin-token  ") == "admin-token"


@pytest.mark.parametrize("header", [None, "", "   "])
def test_missing_header_raises_missing_token(header: str | None) -> None:
    with pytest.raises(MissingAdminTokenError):
        extract_bearer_token(header)


@pytest.mark.parametrize("header", ["Basic abc", "Bearer", "Bearer a b", "token"])
def test_malformed_header_raises_invalid_token(header: str) -> None:
    with pytest.raises(InvalidAdminTokenError):
        extract_bearer_token(header)


def test_require_admin_accepts_configured_token() -> None:
    guard = AdminTokenGuard(admin_token="admin-token")

    guard.require_admin(authorization_header="Bearer admin-token")


def test_require_admin_rejects_other_token() -> None:
    guard = AdminTokenGuard(admin_token="admin-token")

    with pytest.raises(InvalidAdminTokenError):
        guard.require_admin(authorization_header="Bearer not-the-token")
