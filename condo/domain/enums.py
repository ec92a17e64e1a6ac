"""Domain enumerations for the Condo application.

Enums represent fixed sets of domain values (e.g. account role).
"""

from enum import Enum


class Role(str, Enum):
    """Account role, declared in ascending privilege order.

    Declaration order is the hierarchy; see condo.domain.roles.
    """

    USER = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"
