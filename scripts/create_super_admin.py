"""Create a super_admin account, or promote an existing one.

Usage:
    python -m scripts.create_super_admin <email> [password] [first_name] [last_name]
If password is omitted, a random one that passes the strength rules is printed.
An existing account (live or soft-deleted) with the email is restored,
reactivated and promoted; its password is replaced only when one is given.
"""

import asyncio
import secrets
import sys

from condo.application.dtos.account import AccountCreate
from condo.core.config import get_settings
from condo.core.logging import get_logger, setup_logging
from condo.domain.enums import Role
from condo.infrastructure.persistence.database import _ensure_engine, dispose_engine
from condo.infrastructure.persistence.repositories import AccountRepository
from condo.shared.utils.validators import password_strength_errors

logger = get_logger(__name__)


def _generate_password() -> str:
    while True:
        candidate = secrets.token_urlsafe(12) + "!"
        if not password_strength_errors(candidate):
            return candidate


async def main() -> None:
    """Create or promote the super_admin identified by email."""
    if len(sys.argv) < 2:
        print(
            "Usage: python -m scripts.create_super_admin <email> [password] [first_name] [last_name]",
            file=sys.stderr,
        )
        sys.exit(1)
    email = sys.argv[1].strip().lower()
    password = sys.argv[2] if len(sys.argv) > 2 else None
    first_name = sys.argv[3] if len(sys.argv) > 3 else "Super"
    last_name = sys.argv[4] if len(sys.argv) > 4 else "Admin"

    if password is not None:
        errors = password_strength_errors(password)
        if errors:
            print("Password must contain " + ", ".join(errors), file=sys.stderr)
            sys.exit(1)

    get_settings()
    setup_logging()
    session_factory = _ensure_engine()

    try:
        async with session_factory() as session:
            async with session.begin():
                repo = AccountRepository(session)
                existing = await repo.get_by_email(email, include_deleted=True)
                if existing is None:
                    password = password or _generate_password()
                    account = await repo.create_account(
                        AccountCreate(
                            email=email,
                            password=password,
                            first_name=first_name,
                            last_name=last_name,
                            role=Role.SUPER_ADMIN,
                        )
                    )
                    logger.info("Created super_admin %s (%s)", account.id, email)
                    print(f"Created super_admin: {account.id} ({email})")
                    print(f"Password: {password}")
                    return

                if existing.is_deleted:
                    await repo.restore(existing.id)
                changes: dict[str, object] = {"role": Role.SUPER_ADMIN, "is_active": True}
                if password:
                    changes["password"] = password
                await repo.update_account(existing.id, changes)
                logger.info("Promoted %s (%s) to super_admin", existing.id, email)
                print(f"Promoted to super_admin: {existing.id} ({email})")
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
