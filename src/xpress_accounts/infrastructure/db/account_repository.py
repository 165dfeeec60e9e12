"""SQLAlchemy adapter for account and taxi persistence."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import cast
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from xpress_accounts.application.ports.account_repository_port import (
    AccountCreateInput,
    AccountRecord,
    AccountRepositoryPort,
    TaxiRecord,
)
from xpress_accounts.domain.accounts.errors import DuplicateTaxiNumberError, PersistenceError
from xpress_accounts.infrastructure.db.metadata import taxis, user_accounts

logger = logging.getLogger(__name__)

_ACCOUNT_COLUMNS = (
    user_accounts.c.id.label("user_id"),
    user_accounts.c.password_hash,
    user_accounts.c.created_at,
    taxis.c.id.label("taxi_id"),
    taxis.c.number,
    taxis.c.max_place,
    taxis.c.available_place,
    taxis.c.current_station,
    taxis.c.destination_station,
)


class SqlAlchemyAccountRepository(AccountRepositoryPort):
    """Account repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_by_number(self, *, number: str) -> AccountRecord | None:
        """Return account by normalized taxi number."""

        return await self._fetch_one(taxis.c.number == number)

    async def get_by_id(self, *, user_id: UUID) -> AccountRecord | None:
        """Return account by user id."""

        return await self._fetch_one(user_accounts.c.id == user_id)

    async def create_account(self, payload: AccountCreateInput) -> AccountRecord:
        """Insert taxi and user rows in one transaction."""

        taxi = payload.taxi
        insert_taxi = sa.insert(taxis).values(
            id=taxi.taxi_id,
            number=taxi.number,
            max_place=taxi.max_place,
            available_place=taxi.available_place,
            current_station=taxi.current_station,
            destination_station=taxi.destination_station,
        )
        insert_user = sa.insert(user_accounts).values(
            id=payload.user_id,
            password_hash=payload.password_hash,
            taxi_id=taxi.taxi_id,
        ).returning(user_accounts.c.created_at)

        async with self._session_factory() as session:
            try:
                await session.execute(insert_taxi)
            except IntegrityError as exc:
                await session.rollback()
                raise DuplicateTaxiNumberError(number=taxi.number) from exc
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception("account_store_insert_failed table=taxis")
                raise PersistenceError("failed to store taxi") from exc

            try:
                result = await session.execute(insert_user)
                created_at = cast(datetime, result.scalar_one())
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception("account_store_insert_failed table=user_accounts")
                raise PersistenceError("failed to store user account") from exc

        return AccountRecord(
            user_id=payload.user_id,
            password_hash=payload.password_hash,
            taxi=taxi,
            created_at=created_at,
        )

    async def _fetch_one(self, condition: sa.ColumnElement[bool]) -> AccountRecord | None:
        statement = (
            sa.select(*_ACCOUNT_COLUMNS)
            .select_from(user_accounts.join(taxis, user_accounts.c.taxi_id == taxis.c.id))
            .where(condition)
            .limit(1)
        )

        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
        except SQLAlchemyError as exc:
            logger.exception("account_store_read_failed")
            raise PersistenceError("failed to read account") from exc

        row = result.mappings().first()
        if row is None:
            return None
        return _to_account_record(row)


def _to_uuid(raw: object) -> UUID:
    return raw if isinstance(raw, UUID) else UUID(str(raw))


def _to_account_record(row: sa.RowMapping) -> AccountRecord:
    return AccountRecord(
        user_id=_to_uuid(row["user_id"]),
        password_hash=cast(str, row["password_hash"]),
        created_at=cast(datetime, row["created_at"]),
        taxi=TaxiRecord(
            taxi_id=_to_uuid(row["taxi_id"]),
            number=cast(str, row["number"]),
            max_place=int(row["max_place"]),
            available_place=int(row["available_place"]),
            current_station=_to_uuid(row["current_station"]),
            destination_station=_to_uuid(row["destination_station"]),
        ),
    )
