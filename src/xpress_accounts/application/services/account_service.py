"""Application service for account provisioning and sign-in."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID, uuid4

from xpress_accounts.application.ports.account_repository_port import (
    AccountCreateInput,
    AccountRecord,
    AccountRepositoryPort,
    TaxiRecord,
)
from xpress_accounts.application.ports.password_hasher_port import PasswordHasherPort
from xpress_accounts.application.ports.session_issuer_port import (
    IssuedSession,
    SessionIssuerPort,
)
from xpress_accounts.domain.accounts.credentials import (
    normalize_taxi_number,
    validate_sign_in_password,
)
from xpress_accounts.domain.accounts.errors import (
    AccountNotFoundError,
    AccountValidationError,
    AuthenticationError,
)

logger = logging.getLogger(__name__)

_DUMMY_PASSWORD = "xpress-accounts-unknown-number"


@dataclass(frozen=True)
class NewTaxi:
    """Admin-supplied fields for the taxi linked to a new account."""

    number: str
    max_place: int
    current_station: UUID
    destination_station: UUID


@dataclass(frozen=True)
class SignInResult:
    """Authenticated account and the session issued for it."""

    account: AccountRecord
    session: IssuedSession


@dataclass(frozen=True)
class CreatedAccount:
    """Identifiers of a newly provisioned account and its one-time password."""

    user_id: UUID
    taxi_id: UUID
    generated_password: str

    def __repr__(self) -> str:
        return (
            f"CreatedAccount(user_id={self.user_id!r}, taxi_id={self.taxi_id!r}, "
            "generated_password=***)"
        )


class AccountService:
    """Authenticate taxi accounts and provision new ones."""

    def __init__(
        self,
        *,
        accounts: AccountRepositoryPort,
        password_hasher: PasswordHasherPort,
        session_issuer: SessionIssuerPort,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._session_issuer = session_issuer
        self._dummy_password_hash: str | None = None

    async def sign_in(self, *, number: str, password: str) -> SignInResult:
        """Verify credentials and issue a session bound to the account.

        Password bounds are checked before any storage access. Unknown numbers
        and wrong passwords both raise the same `AuthenticationError`.
        """

        validate_sign_in_password(password=password)
        normalized_number = normalize_taxi_number(number=number)

        account = await self._accounts.get_by_number(number=normalized_number)
        if account is None:
            logger.info(
                "account_sign_in_failed number=%s reason=unknown_number",
                normalized_number,
            )
            await self._verify_against_dummy_hash(password=password)
            raise AuthenticationError()

        is_valid = await self._password_hasher.verify_password(
            password=password,
            password_hash=account.password_hash,
        )
        if not is_valid:
            logger.info(
                "account_sign_in_failed number=%s reason=wrong_password",
                normalized_number,
            )
            raise AuthenticationError()

        session = self._session_issuer.issue(user_id=account.user_id)
        logger.info(
            "account_sign_in_succeeded number=%s user_id=%s",
            normalized_number,
            account.user_id,
        )
        return SignInResult(account=account, session=session)

    async def _verify_against_dummy_hash(self, *, password: str) -> None:
        # Unknown numbers still pay for one verify.
        if self._dummy_password_hash is None:
            self._dummy_password_hash = await self._password_hasher.hash_password(
                _DUMMY_PASSWORD
            )
        await self._password_hasher.verify_password(
            password=password,
            password_hash=self._dummy_password_hash,
        )

    async def create_account(self, *, new_taxi: NewTaxi) -> CreatedAccount:
        """Generate a password, then build, hash and persist a new account."""

        if new_taxi.max_place <= 0:
            raise AccountValidationError("maxPlace must be greater than zero")
        normalized_number = normalize_taxi_number(number=new_taxi.number)

        password = await self._password_hasher.generate_password()

        taxi = TaxiRecord(
            taxi_id=uuid4(),
            number=normalized_number,
            max_place=new_taxi.max_place,
            available_place=new_taxi.max_place,
            current_station=new_taxi.current_station,
            destination_station=new_taxi.destination_station,
        )
        payload = AccountCreateInput(
            user_id=uuid4(),
            password_hash=password.hashed,
            taxi=taxi,
        )

        created = await self._accounts.create_account(payload)
        logger.info(
            "account_created user_id=%s taxi_id=%s number=%s",
            created.user_id,
            created.taxi.taxi_id,
            created.taxi.number,
        )
        return CreatedAccount(
            user_id=created.user_id,
            taxi_id=created.taxi.taxi_id,
            generated_password=password.plaintext,
        )

    async def get_account(self, *, user_id: UUID) -> AccountRecord:
        """Return account by id or raise deterministic not-found error."""

        account = await self._accounts.get_by_id(user_id=user_id)
        if account is None:
            raise AccountNotFoundError(user_id=user_id)
        return account
