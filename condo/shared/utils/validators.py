"""Password strength rules shared by request schemas and the seed script."""

import re

PASSWORD_MIN_LENGTH = 8

_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"[A-Z]"), "at least one uppercase letter"),
    (re.compile(r"[a-z]"), "at least one lowercase letter"),
    (re.compile(r"\d"), "at least one number"),
    (re.compile(r"[^A-Za-z0-9]"), "at least one special character"),
)


def password_strength_errors(password: str) -> list[str]:
    """Return the list of unmet requirements (empty when the password is strong)."""
    errors: list[str] = []
    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(f"at least {PASSWORD_MIN_LENGTH} characters")
    errors.extend(message for pattern, message in _RULES if not pattern.search(password))
    return errors


def validate_password_strength(password: str) -> str:
    """Return password unchanged or raise ValueError naming every unmet rule.

    Usable directly as a pydantic field validator body.
    """
    errors = password_strength_errors(password)
    if errors:
        raise ValueError("Password must contain " + ", ".join(errors))
    return password
