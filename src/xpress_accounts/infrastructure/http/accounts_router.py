"""FastAPI router for account discovery, sign-in, and admin provisioning."""

from __future__ import annotations

import logging
from typing import Annotated, NoReturn

from fastapi import APIRouter, Cookie, Depends, Header, HTTPException, Response, status

from xpress_accounts.application.dto.account_models import (
    AccountLinksResponse,
    CreatedUserResponse,
    CreateUserRequest,
    PublicUser,
    SignInLinks,
    SignInRequest,
    absolute_url,
    to_public_user,
)
from xpress_accounts.application.ports.session_issuer_port import IssuedSession, SessionIssuerPort
from xpress_accounts.application.services.account_service import AccountService, NewTaxi
from xpress_accounts.domain.accounts.errors import (
    AccountNotFoundError,
    AccountValidationError,
    AuthenticationError,
    CredentialError,
    DuplicateTaxiNumberError,
    PersistenceError,
)
from xpress_accounts.infrastructure.http.admin_guard import (
    AdminTokenGuard,
    InvalidAdminTokenError,
    MissingAdminTokenError,
)
from xpress_accounts.infrastructure.security.session_issuer import SESSION_COOKIE_NAME

logger = logging.getLogger(__name__)

SIGN_IN_PATH = "/accounts/sign-in"


def build_accounts_router(
    *,
    account_service: AccountService,
    session_issuer: SessionIssuerPort,
    admin_guard: AdminTokenGuard,
    public_base_url: str,
    secure_cookies: bool = True,
    reveal_generated_password: bool = False,
) -> APIRouter:
    """Build router exposing the account endpoints."""

    router = APIRouter(tags=["accounts"])

    async def require_admin(
        authorization: Annotated[str | None, Header()] = None,
    ) -> None:
        _require_admin(admin_guard=admin_guard, authorization_header=authorization)

    @router.get("/accounts", response_model=AccountLinksResponse)
    async def accounts_index() -> AccountLinksResponse:
        return AccountLinksResponse(
            sign_in=SignInLinks(user=absolute_url(public_base_url, SIGN_IN_PATH)),
        )

    @router.post(
        SIGN_IN_PATH,
        response_model=PublicUser,
        response_model_exclude_none=True,
    )
    async def user_sign_in(payload: SignInRequest, response: Response) -> PublicUser:
        try:
            result = await account_service.sign_in(
                number=payload.number,
                password=payload.password,
            )
        except AccountValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except AuthenticationError as exc:
            raise HTTPException(status_code=401, detail=str(exc)) from exc
        except (CredentialError, PersistenceError) as exc:
            _raise_internal_error(exc)

        _set_session_cookie(response, session=result.session, secure=secure_cookies)
        return to_public_user(result.account, base_url=public_base_url)

    @router.get(
        "/accounts/me",
        response_model=PublicUser,
        response_model_exclude_none=True,
    )
    async def current_user(
        auth_cookie: Annotated[str | None, Cookie(alias=SESSION_COOKIE_NAME)] = None,
    ) -> PublicUser:
        user_id = session_issuer.resolve(auth_cookie)
        if user_id is None:
            raise HTTPException(status_code=401, detail="not signed in")
        try:
            account = await account_service.get_account(user_id=user_id)
        except AccountNotFoundError as exc:
            raise HTTPException(status_code=401, detail="not signed in") from exc
        except PersistenceError as exc:
            _raise_internal_error(exc)
        return to_public_user(account, base_url=public_base_url)

    @router.post("/accounts/sign-out", status_code=status.HTTP_204_NO_CONTENT)
    async def user_sign_out() -> Response:
        response = Response(status_code=status.HTTP_204_NO_CONTENT)
        response.delete_cookie(
            SESSION_COOKIE_NAME,
            httponly=True,
            samesite="lax",
            secure=secure_cookies,
        )
        return response

    @router.post(
        "/accounts/admin/create-user",
        status_code=status.HTTP_201_CREATED,
        dependencies=[Depends(require_admin)],
    )
    async def create_user(payload: CreateUserRequest) -> Response:
        taxi = payload.taxi
        try:
            created = await account_service.create_account(
                new_taxi=NewTaxi(
                    number=taxi.number,
                    max_place=taxi.max_place,
                    current_station=taxi.current_station,
                    destination_station=taxi.destination_station,
                )
            )
        except AccountValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except DuplicateTaxiNumberError as exc:
            raise HTTPException(status_code=409, detail="taxi number already registered") from exc
        except (CredentialError, PersistenceError) as exc:
            _raise_internal_error(exc)

        if not reveal_generated_password:
            return Response(status_code=status.HTTP_201_CREATED)

        body = CreatedUserResponse(id=created.user_id, password=created.generated_password)
        return Response(
            content=body.model_dump_json(by_alias=True),
            status_code=status.HTTP_201_CREATED,
            media_type="application/json",
            headers={"cache-control": "no-store"},
        )

    return router


def _set_session_cookie(response: Response, *, session: IssuedSession, secure: bool) -> None:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        session.token,
        max_age=session.max_age_seconds,
        httponly=True,
        samesite="lax",
        secure=secure,
    )


def _require_admin(*, admin_guard: AdminTokenGuard, authorization_header: str | None) -> None:
    """Map admin capability failures into HTTP 401 responses."""

    try:
        admin_guard.require_admin(authorization_header=authorization_header)
    except MissingAdminTokenError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except InvalidAdminTokenError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc


def _raise_internal_error(exc: Exception) -> NoReturn:
    logger.error("account_request_failed error=%s", type(exc).__name__, exc_info=exc)
    raise HTTPException(status_code=500, detail="internal error") from exc
