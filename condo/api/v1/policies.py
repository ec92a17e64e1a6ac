"""Route access policies: one table, one enforcing dependency.

Every route looks up its policy here by name through require(name); adding a
route without a table entry fails at import time.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends

from condo.api.v1.dependencies.auth import Principal, get_current_principal
from condo.domain.enums import Role
from condo.domain.exceptions import ForbiddenException
from condo.domain.roles import has_min_role


@dataclass(frozen=True)
class RoutePolicy:
    """public routes skip authentication; otherwise min_role (None = any role) applies."""

    min_role: Role | None = None
    public: bool = False


PUBLIC = RoutePolicy(public=True)
AUTHENTICATED = RoutePolicy()
USER = RoutePolicy(min_role=Role.USER)
ADMIN = RoutePolicy(min_role=Role.ADMIN)
SUPER_ADMIN = RoutePolicy(min_role=Role.SUPER_ADMIN)

ROUTE_POLICIES: dict[str, RoutePolicy] = {
    "health.check": PUBLIC,
    "auth.register": PUBLIC,
    "auth.login": PUBLIC,
    "auth.refresh": PUBLIC,
    "auth.select_condominium": AUTHENTICATED,
    "auth.logout": AUTHENTICATED,
    "auth.me": AUTHENTICATED,
    "users.list": ADMIN,
    "users.list_deleted": ADMIN,
    "users.get": USER,
    "users.create": ADMIN,
    "users.update": ADMIN,
    "users.delete": ADMIN,
    "users.restore": ADMIN,
    "users.purge": SUPER_ADMIN,
    "condominiums.list": USER,
    "condominiums.get": USER,
    "condominiums.create": SUPER_ADMIN,
    "condominiums.update": ADMIN,
    "condominiums.delete": SUPER_ADMIN,
    "condominiums.restore": SUPER_ADMIN,
    "condominiums.add_member": SUPER_ADMIN,
    "condominiums.remove_member": SUPER_ADMIN,
}


def enforce(policy: RoutePolicy) -> Callable[..., Awaitable[Principal]]:
    """Dependency factory: authenticate the caller and check policy.min_role."""

    async def _enforce(
        principal: Annotated[Principal, Depends(get_current_principal)],
    ) -> Principal:
        if policy.min_role is not None and not has_min_role(principal.role, policy.min_role):
            raise ForbiddenException(
                f"Requires role {policy.min_role.value} or higher"
            )
        return principal

    return _enforce


async def _no_auth() -> None:
    return None


def require(route_name: str) -> Callable[..., Awaitable[Principal | None]]:
    """Dependency for route_name's policy. Raises KeyError for unknown routes."""
    policy = ROUTE_POLICIES[route_name]
    if policy.public:
        return _no_auth
    return enforce(policy)
