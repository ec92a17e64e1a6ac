"""Domain layer: enums, role hierarchy, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from condo.domain.enums import Role
from condo.domain.exceptions import (
    AlreadyExistsException,
    CondoException,
    ForbiddenException,
    NotFoundException,
    UnauthorizedException,
    ValidationException,
)
from condo.domain.roles import (
    can_assign_role,
    ensure_can_assign_role,
    ensure_can_manage_account,
    has_min_role,
    role_rank,
)

__all__ = [
    # Enums
    "Role",
    # Exceptions
    "AlreadyExistsException",
    "CondoException",
    "ForbiddenException",
    "NotFoundException",
    "UnauthorizedException",
    "ValidationException",
    # Role hierarchy
    "can_assign_role",
    "ensure_can_assign_role",
    "ensure_can_manage_account",
    "has_min_role",
    "role_rank",
]
