from __future__ import annotations

import pytest

from xpress_accounts.domain.accounts.credentials import (
    normalize_taxi_number,
    validate_sign_in_password,
)
from xpress_accounts.domain.accounts.errors import AccountValidationError


def test_normalize_taxi_number_strips_and_lowercases() -> None:
    assert normalize_taxi_number(number="  AB-123 ") == "ab-123"


def test_normalize_taxi_number_rejects_blank() -> None:
    with pytest.raises(AccountValidationError):
        normalize_taxi_number(number=" \t ")


@pytest.mark.parametrize("length", [8, 9, 124, 125])
def test_password_lengths_inside_bounds_are_accepted(length: int) -> None:
    password = "p" * length

    assert validate_sign_in_password(password=password) == password


@pytest.mark.parametrize("length", [0, 7, 126])
def test_password_lengths_outside_bounds_are_rejected(length: int) -> None:
    with pytest.raises(AccountValidationError):
        validate_sign_in_password(password="p" * length)
