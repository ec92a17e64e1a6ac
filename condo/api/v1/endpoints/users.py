"""Users API: account administration (list, get, create, update, soft delete, restore, purge)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from condo.api.v1.dependencies import (
    Principal,
    get_account_service,
    get_account_service_for_write,
)
from condo.api.v1.policies import require
from condo.application.dtos.account import AccountCreate, AccountUpdate
from condo.application.services import AccountService
from condo.core.limiter import limit_writes
from condo.domain.enums import Role
from condo.domain.exceptions import ForbiddenException
from condo.domain.roles import has_min_role
from condo.schemas.account import (
    AccountCreateRequest,
    AccountResponse,
    AccountUpdateRequest,
)
from condo.schemas.common import PageResponse

router = APIRouter()

PageQuery = Annotated[int, Query(ge=1)]
LimitQuery = Annotated[int, Query(ge=1, le=100)]


@router.get(
    "",
    response_model=PageResponse[AccountResponse],
    dependencies=[Depends(require("users.list"))],
)
async def list_users(
    service: Annotated[AccountService, Depends(get_account_service)],
    page: PageQuery = 1,
    limit: LimitQuery = 10,
    include_deleted: bool = False,
) -> PageResponse[AccountResponse]:
    result = await service.find_all(page, limit, include_deleted)
    return PageResponse[AccountResponse](
        data=[AccountResponse.model_validate(a) for a in result.items],
        total=result.total,
        page=page,
        limit=limit,
    )


@router.get(
    "/deleted",
    response_model=PageResponse[AccountResponse],
    dependencies=[Depends(require("users.list_deleted"))],
)
async def list_deleted_users(
    service: Annotated[AccountService, Depends(get_account_service)],
    page: PageQuery = 1,
    limit: LimitQuery = 10,
) -> PageResponse[AccountResponse]:
    result = await service.find_deleted(page, limit)
    return PageResponse[AccountResponse](
        data=[AccountResponse.model_validate(a) for a in result.items],
        total=result.total,
        page=page,
        limit=limit,
    )


@router.get("/{account_id}", response_model=AccountResponse)
async def get_user(
    account_id: str,
    principal: Annotated[Principal, Depends(require("users.get"))],
    service: Annotated[AccountService, Depends(get_account_service)],
    include_deleted: bool = False,
) -> AccountResponse:
    """Return one account; include_deleted=true requires admin."""
    if include_deleted and not has_min_role(principal.role, Role.ADMIN):
        raise ForbiddenException("include_deleted requires role admin or higher")
    account = await service.find_one(account_id, include_deleted=include_deleted)
    return AccountResponse.model_validate(account)


@router.post("", response_model=AccountResponse, status_code=201)
@limit_writes
async def create_user(
    request: Request,
    body: AccountCreateRequest,
    principal: Annotated[Principal, Depends(require("users.create"))],
    service: Annotated[AccountService, Depends(get_account_service_for_write)],
) -> AccountResponse:
    """Create an account with a role strictly below the caller's (super_admin may create super_admin)."""
    account = await service.create(
        AccountCreate(**body.model_dump()),
        caller_role=principal.role,
    )
    return AccountResponse.model_validate(account)


@router.patch("/{account_id}", response_model=AccountResponse)
@limit_writes
async def update_user(
    request: Request,
    account_id: str,
    body: AccountUpdateRequest,
    principal: Annotated[Principal, Depends(require("users.update"))],
    service: Annotated[AccountService, Depends(get_account_service_for_write)],
) -> AccountResponse:
    account = await service.update(
        account_id,
        AccountUpdate(**body.model_dump(exclude_unset=True)),
        caller_role=principal.role,
    )
    return AccountResponse.model_validate(account)


@router.delete("/{account_id}", status_code=204)
async def delete_user(
    account_id: str,
    principal: Annotated[Principal, Depends(require("users.delete"))],
    service: Annotated[AccountService, Depends(get_account_service_for_write)],
) -> Response:
    """Soft delete."""
    await service.remove(account_id, caller_role=principal.role)
    return Response(status_code=204)


@router.post(
    "/{account_id}/restore",
    response_model=AccountResponse,
    dependencies=[Depends(require("users.restore"))],
)
async def restore_user(
    account_id: str,
    service: Annotated[AccountService, Depends(get_account_service_for_write)],
) -> AccountResponse:
    account = await service.restore(account_id)
    return AccountResponse.model_validate(account)


@router.delete(
    "/{account_id}/purge",
    status_code=204,
    dependencies=[Depends(require("users.purge"))],
)
async def purge_user(
    account_id: str,
    service: Annotated[AccountService, Depends(get_account_service_for_write)],
) -> Response:
    """Permanently delete the account row."""
    await service.purge(account_id)
    return Response(status_code=204)
