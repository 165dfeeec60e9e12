"""Pydantic models for account sign-in, provisioning, and discovery contracts."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from xpress_accounts.application.ports.account_repository_port import AccountRecord
from xpress_accounts.domain.accounts.credentials import PASSWORD_MAX_LENGTH, PASSWORD_MIN_LENGTH


class StrictModel(BaseModel):
    """Base model with camelCase wire names and unknown-field rejection."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SignInRequest(StrictModel):
    """HTTP request model for taxi-number sign-in."""

    number: str = Field(min_length=1)
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)


class NewTaxiRequest(StrictModel):
    """Taxi fields supplied by an admin when provisioning an account."""

    number: str = Field(min_length=1)
    max_place: int = Field(gt=0)
    current_station: UUID
    destination_station: UUID


class CreateUserRequest(StrictModel):
    """HTTP request model for admin account provisioning."""

    taxi: NewTaxiRequest


class CreatedUserResponse(StrictModel):
    """One-time response carrying a generated password, when enabled."""

    id: UUID
    password: str


class UserLinks(StrictModel):
    """Discovery links attached to a public user view."""

    self_: str = Field(alias="self")
    bookings: str | None = None


class PublicUser(StrictModel):
    """Public user view; never carries credential material."""

    id: UUID
    links: UserLinks


class SignInLinks(StrictModel):
    """Sign-in endpoints by account kind."""

    user: str


class AccountLinksResponse(StrictModel):
    """HTTP response model for the accounts discovery index."""

    sign_in: SignInLinks


def to_public_user(account: AccountRecord, *, base_url: str) -> PublicUser:
    """Project a stored account onto the public allow-listed fields."""

    return PublicUser(
        id=account.user_id,
        links=UserLinks(self_=absolute_url(base_url, "/accounts/me")),
    )


def absolute_url(base_url: str, path: str) -> str:
    """Join configured public base URL and one absolute route path."""

    return f"{base_url.rstrip('/')}{path}"
