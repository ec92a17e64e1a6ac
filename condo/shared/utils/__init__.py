"""Utility helpers: UTC datetimes, id generation, password strength."""

from condo.shared.utils.datetime import ensure_utc, utc_now
from condo.shared.utils.generators import generate_cuid
from condo.shared.utils.validators import password_strength_errors, validate_password_strength

__all__ = [
    "ensure_utc",
    "generate_cuid",
    "password_strength_errors",
    "utc_now",
    "validate_password_strength",
]
