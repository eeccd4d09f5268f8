"""Script to create an admin user. Public registration only creates standard users."""
import argparse
import getpass
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.database.db import SessionLocal, init_db
from core.database.entities import UserRole
from core.services.auth.credential_store import CredentialStore
from core.services.errors.exceptions import DuplicateEmail, ValidationError
from core.utils.logger import logger


def create_admin(name: str, email: str, password: str) -> bool:
    init_db()
    db = SessionLocal()
    try:
        user = CredentialStore(db).create(name, email, password, role=UserRole.ADMIN)
        logger.info(f"Admin created: {user.email} ({user.id})")
        return True
    except ValidationError as e:
        logger.error(f"Invalid {e.field}: {e.message}")
    except DuplicateEmail as e:
        logger.error(f"Email already registered: {e.email}")
    finally:
        db.close()
    return False


def main():
    parser = argparse.ArgumentParser(description="Create a Fruitie admin account")
    parser.add_argument("name")
    parser.add_argument("email")
    args = parser.parse_args()

    password = getpass.getpass("Password: ")
    if not create_admin(args.name, args.email, password):
        sys.exit(1)


if __name__ == "__main__":
    main()
