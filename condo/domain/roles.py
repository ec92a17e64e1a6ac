"""Role hierarchy: total order over roles.

Gates minimum-role access to endpoints (has_min_role), which role a
caller may assign to another account (can_assign_role /
ensure_can_assign_role), and which accounts a caller may modify at all
(ensure_can_manage_account).
"""

from condo.domain.enums import Role
from condo.domain.exceptions import ForbiddenException

ROLE_HIERARCHY: dict[Role, int] = {role: rank for rank, role in enumerate(Role)}
TOP_ROLE: Role = max(ROLE_HIERARCHY, key=ROLE_HIERARCHY.__getitem__)


def role_rank(role: Role | str) -> int:
    """Return the rank of role (higher means more privilege).

    Raises:
        ValueError: If role is not a known role value.
    """
    return ROLE_HIERARCHY[Role(role)]


def has_min_role(role: Role | str, minimum: Role) -> bool:
    """Return True if role is at least minimum in the hierarchy."""
    return role_rank(role) >= role_rank(minimum)


def can_assign_role(caller_role: Role | str, target_role: Role | str) -> bool:
    """Return True if a caller with caller_role may set target_role on an account.

    A caller may assign only roles strictly below their own; the top role is
    the single exception and may assign itself.
    """
    caller, target = Role(caller_role), Role(target_role)
    if target is TOP_ROLE:
        return caller is TOP_ROLE
    return role_rank(caller) > role_rank(target)


def ensure_can_assign_role(caller_role: Role | str, target_role: Role | str) -> None:
    """Raise ForbiddenException unless caller_role may assign target_role."""
    if not can_assign_role(caller_role, target_role):
        target = Role(target_role)
        if target is TOP_ROLE:
            raise ForbiddenException(f"Only {TOP_ROLE.value} can assign the {target.value} role")
        raise ForbiddenException(
            f"Cannot assign role {target.value}: it must be lower than your own role"
        )


def ensure_can_manage_account(caller_role: Role | str, account_role: Role | str) -> None:
    """Raise ForbiddenException if account_role outranks caller_role.

    Peers may manage each other; role changes are still bounded by
    ensure_can_assign_role.
    """
    if role_rank(account_role) > role_rank(caller_role):
        raise ForbiddenException(
            f"Cannot modify an account with role {Role(account_role).value}: "
            "it is higher than your own role"
        )
