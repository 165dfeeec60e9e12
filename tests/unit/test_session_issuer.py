from __future__ import annotations

from uuid import uuid4

import pytest

from xpress_accounts.infrastructure.security.session_issuer import (
    DEFAULT_SESSION_MAX_AGE_SECONDS,
    SignedCookieSessionIssuer,
)


def test_issued_token_resolves_to_same_user() -> None:
    issuer = SignedCookieSessionIssuer(secret_key="session-secret")
    user_id = uuid4()

    session = issuer.issue(user_id=user_id)

    assert str(user_id) != session.token
    assert session.max_age_seconds == DEFAULT_SESSION_MAX_AGE_SECONDS
    assert issuer.resolve(session.token) == user_id


def test_tampered_token_does_not_resolve() -> None:
    issuer = SignedCookieSessionIssuer(secret_key="session-secret")
    token = issuer.issue(user_id=uuid4()).token

    tampered = ("x" if token[0] != "x" else "y") + token[1:]

    assert issuer.resolve(tampered) is None


def test_token_signed_with_other_secret_does_not_resolve() -> None:
    issuer = SignedCookieSessionIssuer(secret_key="session-secret")
    forger = SignedCookieSessionIssuer(secret_key="attacker-secret")

    forged = forger.issue(user_id=uuid4()).token

    assert issuer.resolve(forged) is None


def test_expired_token_does_not_resolve() -> None:
    issuer = SignedCookieSessionIssuer(secret_key="session-secret", max_age_seconds=-1)
    token = issuer.issue(user_id=uuid4()).token

    assert issuer.resolve(token) is None


@pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
def test_missing_or_malformed_token_does_not_resolve(token: str | None) -> None:
    issuer = SignedCookieSessionIssuer(secret_key="session-secret")

    assert issuer.resolve(token) is None


def test_blank_secret_is_rejected() -> None:
    with pytest.raises(ValueError):
        SignedCookieSessionIssuer(secret_key="")


def test_signature_cannot_be_moved_onto_another_users_payload() -> None:
    issuer = SignedCookieSessionIssuer(secret_key="session-secret")
    victim_token = issuer.issue(user_id=uuid4()).token
    attacker_token = issuer.issue(user_id=uuid4()).token

    victim_payload = victim_token.split(".", 1)[0]
    attacker_rest = attacker_token.split(".", 1)[1]

    assert issuer.resolve(f"{victim_payload}.{attacker_rest}") is None
