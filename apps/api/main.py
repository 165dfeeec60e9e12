"""accounts-api entrypoint and HTTP route wiring."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from xpress_accounts.application.services.account_service import AccountService
from xpress_accounts.config.settings import Settings, load_settings
from xpress_accounts.infrastructure.db.account_repository import SqlAlchemyAccountRepository
from xpress_accounts.infrastructure.db.session import create_session_factory
from xpress_accounts.infrastructure.http.accounts_router import build_accounts_router
from xpress_accounts.infrastructure.http.admin_guard import AdminTokenGuard
from xpress_accounts.infrastructure.logging import configure_logging
from xpress_accounts.infrastructure.security.password_hasher import BcryptPasswordHasher
from xpress_accounts.infrastructure.security.session_issuer import SignedCookieSessionIssuer

ACCOUNTS_API_HOST = "0.0.0.0"
ACCOUNTS_API_PORT = 8000
logger = logging.getLogger(__name__)


def build_session_issuer(settings: Settings) -> SignedCookieSessionIssuer:
    """Build signed-cookie session issuer from runtime settings."""

    return SignedCookieSessionIssuer(
        secret_key=settings.session_secret_key,
        max_age_seconds=settings.session_max_age_seconds,
    )


def build_account_service(
    database_url: str,
    *,
    session_issuer: SignedCookieSessionIssuer,
    bcrypt_rounds: int,
) -> AccountService:
    """Build account service with SQLAlchemy-backed dependencies."""

    session_factory = create_session_factory(database_url)
    return AccountService(
        accounts=SqlAlchemyAccountRepository(session_factory),
        password_hasher=BcryptPasswordHasher(rounds=bcrypt_rounds),
        session_issuer=session_issuer,
    )


def create_app(
    *,
    settings: Settings | None = None,
    account_service: AccountService | None = None,
    session_issuer: SignedCookieSessionIssuer | None = None,
) -> FastAPI:
    """Create FastAPI app exposing account discovery, sign-in, and provisioning."""

    if settings is None:
        settings = load_settings()
        configure_logging(level=settings.log_level)

    if session_issuer is None:
        session_issuer = build_session_issuer(settings)
    if account_service is None:
        account_service = build_account_service(
            settings.database_url,
            session_issuer=session_issuer,
            bcrypt_rounds=settings.bcrypt_rounds,
        )

    if settings.reveal_generated_password:
        logger.warning("accounts_api_reveal_generated_password enabled=true")

    app = FastAPI(title="xpress-accounts")
    app.include_router(
        build_accounts_router(
            account_service=account_service,
            session_issuer=session_issuer,
            admin_guard=AdminTokenGuard(admin_token=settings.admin_api_token),
            public_base_url=str(settings.public_base_url),
            secure_cookies=settings.session_cookie_secure,
            reveal_generated_password=settings.reveal_generated_password,
        )
    )
    return app


def run_asgi_server(*, host: str = ACCOUNTS_API_HOST, port: int = ACCOUNTS_API_PORT) -> None:
    """Run accounts-api as a long-lived ASGI process using application factory mode."""

    uvicorn.run(
        "apps.api.main:create_app",
        host=host,
        port=port,
        factory=True,
    )


def main() -> None:
    """Run accounts-api runtime process."""

    run_asgi_server()


if __name__ == "__main__":
    main()
