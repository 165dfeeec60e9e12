from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError

from xpress_accounts.application.dto.account_models import (
    CreateUserRequest,
    SignInRequest,
    to_public_user,
)
from xpress_accounts.application.ports.account_repository_port import AccountRecord, TaxiRecord


def _account() -> AccountRecord:
    return AccountRecord(
        user_id=uuid4(),
        password_hash="$2b$12$secret-hash-material",
        created_at=datetime.now(tz=UTC),
        taxi=TaxiRecord(
            taxi_id=uuid4(),
            number="ab-123",
            max_place=4,
            available_place=4,
            current_station=uuid4(),
            destination_station=uuid4(),
        ),
    )


def test_public_user_projection_exposes_only_allow_listed_fields() -> None:
    account = _account()

    public = to_public_user(account, base_url="https://xpress.example.org/")
    body = public.model_dump(mode="json", by_alias=True, exclude_none=True)

    assert body == {
        "id": str(account.user_id),
        "links": {"self": "https://xpress.example.org/accounts/me"},
    }
    assert account.password_hash not in str(body)


def test_create_user_request_reads_camel_case_taxi_fields() -> None:
    current, destination = uuid4(), uuid4()

    request = CreateUserRequest.model_validate(
        {
            "taxi": {
                "number": "AB-123",
                "maxPlace": 4,
                "currentStation": str(current),
                "destinationStation": str(destination),
            }
        }
    )

    assert request.taxi.number == "AB-123"
    assert request.taxi.max_place == 4
    assert request.taxi.current_station == current
    assert request.taxi.destination_station == destination


def test_create_user_request_rejects_caller_supplied_password() -> None:
    with pytest.raises(ValidationError):
        CreateUserRequest.model_validate(
            {
                "taxi": {
                    "number": "AB-123",
                    "maxPlace": 4,
                    "currentStation": str(uuid4()),
                    "destinationStation": str(uuid4()),
                },
                "password": "chosen-by-caller",
            }
        )


@pytest.mark.parametrize("password", ["1234567", "x" * 126])
def test_sign_in_request_enforces_password_bounds(password: str) -> None:
    with pytest.raises(ValidationError):
        SignInRequest.model_validate({"number": "ab-123", "password": password})
