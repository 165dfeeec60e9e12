"""Port for account and taxi persistence used by account services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True)
class TaxiRecord:
    """Taxi persistence model owned by exactly one account."""

    taxi_id: UUID
    number: str
    max_place: int
    available_place: int
    current_station: UUID
    destination_station: UUID


@dataclass(frozen=True)
class AccountRecord:
    """User account persistence model joined with its taxi."""

    user_id: UUID
    password_hash: str
    taxi: TaxiRecord
    created_at: datetime


@dataclass(frozen=True)
class AccountCreateInput:
    """Input payload for inserting one user account together with its taxi."""

    user_id: UUID
    password_hash: str
    taxi: TaxiRecord


class AccountRepositoryPort(Protocol):
    """Account repository contract."""

    async def get_by_number(self, *, number: str) -> AccountRecord | None:
        """Return account by normalized taxi number or None."""

    async def get_by_id(self, *, user_id: UUID) -> AccountRecord | None:
        """Return account by user id or None."""

    async def create_account(self, payload: AccountCreateInput) -> AccountRecord:
        """Persist taxi and account atomically and return the stored account."""
