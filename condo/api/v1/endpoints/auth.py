"""Auth API: register, login, refresh, condominium selection, logout, me.

Uses only injected dependencies; tokens are minted by AuthService.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from condo.api.v1.dependencies import (
    Principal,
    get_account_service,
    get_auth_service,
    get_token_issuer,
)
from condo.api.v1.policies import require
from condo.application.dtos.account import AccountCreate
from condo.application.services import AccountService, AuthService
from condo.core.limiter import limit_auth, limit_refresh
from condo.domain.exceptions import UnauthorizedException
from condo.infrastructure.security.jwt import TokenIssuer
from condo.schemas.account import AccountResponse
from condo.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MeResponse,
    RefreshRequest,
    RegisterRequest,
    RegisterResponse,
    SelectCondominiumRequest,
    TokenResponse,
)
from condo.schemas.condominium import CondominiumResponse

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=201,
    dependencies=[Depends(require("auth.register"))],
)
@limit_auth
async def register(
    request: Request,
    body: RegisterRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> RegisterResponse:
    """Register a USER account and return its first token pair (public endpoint)."""
    result = await service.register(
        AccountCreate(
            email=body.email,
            password=body.password,
            first_name=body.first_name,
            last_name=body.last_name,
        )
    )
    return RegisterResponse(
        user=AccountResponse.model_validate(result.account),
        access_token=result.access_token,
        refresh_token=result.refresh_token,
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    dependencies=[Depends(require("auth.login"))],
)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """Authenticate with email and password; returns tokens and condominium memberships."""
    result = await service.login(body.email, body.password)
    return LoginResponse(
        user=AccountResponse.model_validate(result.account),
        condominiums=[CondominiumResponse.model_validate(c) for c in result.condominiums],
        access_token=result.access_token,
        refresh_token=result.refresh_token,
    )


@router.post(
    "/refresh",
    response_model=TokenResponse,
    dependencies=[Depends(require("auth.refresh"))],
)
@limit_refresh
async def refresh(
    request: Request,
    body: RefreshRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> TokenResponse:
    """Rotate the session. The account is recovered from the refresh token itself."""
    try:
        payload = token_issuer.verify_refresh(body.refresh_token)
    except ValueError as e:
        raise UnauthorizedException("Invalid refresh token") from e
    pair = await service.refresh(payload["sub"], body.refresh_token)
    return TokenResponse(access_token=pair.access_token, refresh_token=pair.refresh_token)


@router.post("/select-condominium", response_model=TokenResponse)
async def select_condominium(
    body: SelectCondominiumRequest,
    principal: Annotated[Principal, Depends(require("auth.select_condominium"))],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenResponse:
    """Return a token pair scoped to one of the caller's condominiums."""
    pair = await service.select_condominium(principal.account_id, body.condominium_id)
    return TokenResponse(access_token=pair.access_token, refresh_token=pair.refresh_token)


@router.post("/logout", status_code=204)
async def logout(
    principal: Annotated[Principal, Depends(require("auth.logout"))],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> Response:
    """Revoke the caller's refresh token."""
    await service.logout(principal.account_id)
    return Response(status_code=204)


@router.get("/me", response_model=MeResponse)
async def me(
    principal: Annotated[Principal, Depends(require("auth.me"))],
    accounts: Annotated[AccountService, Depends(get_account_service)],
) -> MeResponse:
    """Return the caller's account and selected condominium."""
    account = await accounts.find_one(principal.account_id)
    return MeResponse(
        **AccountResponse.model_validate(account).model_dump(),
        condominium_id=principal.condominium_id,
    )
