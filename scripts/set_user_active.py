"""Activate or deactivate a user account by email.

Usage:
    python scripts/set_user_active.py student@campus.edu --deactivate
    python scripts/set_user_active.py student@campus.edu --activate
"""

import argparse
import os
import sys

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from academix.core.logging import configure_logging
from academix.domain.models.user import User
from academix.infrastructure.database import SessionLocal
from academix.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

import structlog

logger = structlog.get_logger("set_user_active")


def set_user_active(email: str, active: bool) -> bool:
    db = SessionLocal()
    try:
        repo = SQLAlchemyUserRepository(db, User)
        user = repo.get_by_email(email.strip().lower())
        if user is None:
            logger.warning("User not found", email=email)
            return False
        repo.update(user, {"is_active": active})
        logger.info("User updated", email=user.email, is_active=active)
        return True
    finally:
        db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--activate", action="store_true")
    group.add_argument("--deactivate", action="store_true")
    args = parser.parse_args(argv)

    configure_logging()
    return 0 if set_user_active(args.email, active=args.activate) else 1


if __name__ == "__main__":
    sys.exit(main())
