"""Condominiums API: tenant administration and membership management."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from condo.api.v1.dependencies import (
    Principal,
    get_condominium_service,
    get_condominium_service_for_write,
)
from condo.api.v1.policies import require
from condo.application.dtos.condominium import CondominiumCreate, CondominiumUpdate
from condo.application.services import CondominiumService
from condo.core.limiter import limit_writes
from condo.domain.enums import Role
from condo.domain.exceptions import ForbiddenException
from condo.domain.roles import has_min_role
from condo.schemas.common import PageResponse
from condo.schemas.condominium import (
    CondominiumCreateRequest,
    CondominiumResponse,
    CondominiumUpdateRequest,
)

router = APIRouter()


def _ensure_can_see_deleted(principal: Principal, include_deleted: bool) -> None:
    if include_deleted and not has_min_role(principal.role, Role.ADMIN):
        raise ForbiddenException("include_deleted requires role admin or higher")


@router.get("", response_model=PageResponse[CondominiumResponse])
async def list_condominiums(
    principal: Annotated[Principal, Depends(require("condominiums.list"))],
    service: Annotated[CondominiumService, Depends(get_condominium_service)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    include_deleted: bool = False,
) -> PageResponse[CondominiumResponse]:
    _ensure_can_see_deleted(principal, include_deleted)
    result = await service.find_all(page, limit, include_deleted)
    return PageResponse[CondominiumResponse](
        data=[CondominiumResponse.model_validate(c) for c in result.items],
        total=result.total,
        page=page,
        limit=limit,
    )


@router.get("/{condominium_id}", response_model=CondominiumResponse)
async def get_condominium(
    condominium_id: str,
    principal: Annotated[Principal, Depends(require("condominiums.get"))],
    service: Annotated[CondominiumService, Depends(get_condominium_service)],
    include_deleted: bool = False,
) -> CondominiumResponse:
    _ensure_can_see_deleted(principal, include_deleted)
    condominium = await service.find_one(condominium_id, include_deleted=include_deleted)
    return CondominiumResponse.model_validate(condominium)


@router.post(
    "",
    response_model=CondominiumResponse,
    status_code=201,
    dependencies=[Depends(require("condominiums.create"))],
)
@limit_writes
async def create_condominium(
    request: Request,
    body: CondominiumCreateRequest,
    service: Annotated[CondominiumService, Depends(get_condominium_service_for_write)],
) -> CondominiumResponse:
    condominium = await service.create(CondominiumCreate(**body.model_dump()))
    return CondominiumResponse.model_validate(condominium)


@router.patch(
    "/{condominium_id}",
    response_model=CondominiumResponse,
    dependencies=[Depends(require("condominiums.update"))],
)
@limit_writes
async def update_condominium(
    request: Request,
    condominium_id: str,
    body: CondominiumUpdateRequest,
    service: Annotated[CondominiumService, Depends(get_condominium_service_for_write)],
) -> CondominiumResponse:
    condominium = await service.update(
        condominium_id, CondominiumUpdate(**body.model_dump(exclude_unset=True))
    )
    return CondominiumResponse.model_validate(condominium)


@router.delete(
    "/{condominium_id}",
    status_code=204,
    dependencies=[Depends(require("condominiums.delete"))],
)
async def delete_condominium(
    condominium_id: str,
    service: Annotated[CondominiumService, Depends(get_condominium_service_for_write)],
) -> Response:
    """Soft delete."""
    await service.remove(condominium_id)
    return Response(status_code=204)


@router.post(
    "/{condominium_id}/restore",
    response_model=CondominiumResponse,
    dependencies=[Depends(require("condominiums.restore"))],
)
async def restore_condominium(
    condominium_id: str,
    service: Annotated[CondominiumService, Depends(get_condominium_service_for_write)],
) -> CondominiumResponse:
    condominium = await service.restore(condominium_id)
    return CondominiumResponse.model_validate(condominium)


@router.put(
    "/{condominium_id}/members/{account_id}",
    status_code=204,
    dependencies=[Depends(require("condominiums.add_member"))],
)
async def add_member(
    condominium_id: str,
    account_id: str,
    service: Annotated[CondominiumService, Depends(get_condominium_service_for_write)],
) -> Response:
    await service.add_member(condominium_id, account_id)
    return Response(status_code=204)


@router.delete(
    "/{condominium_id}/members/{account_id}",
    status_code=204,
    dependencies=[Depends(require("condominiums.remove_member"))],
)
async def remove_member(
    condominium_id: str,
    account_id: str,
    service: Annotated[CondominiumService, Depends(get_condominium_service_for_write)],
) -> Response:
    await service.remove_member(condominium_id, account_id)
    return Response(status_code=204)
