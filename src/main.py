"""Admin user command-line utility.

Creates admin users, lists them and changes their passwords directly against
the configured database.

Usage:
  python src/main.py create-admin --username admin --name "Site Admin"
  python src/main.py list-admins
  python src/main.py change-password --username admin
"""

import argparse
import getpass
import logging
import sys
from typing import List, Optional

from core.database import SessionLocal, init_db
from core.exceptions import ConstructionApiError
from core.logging_config import setup_logging
from utils.user_manager import AdminUserManager

logger = logging.getLogger(__name__)


def print_banner() -> None:
    """Print program banner."""
    print("=" * 50)
    print("  Construction Site API - Admin Users")
    print("=" * 50)
    print()


def _prompt_password(password: Optional[str]) -> str:
    """Return the given password or prompt for one twice."""
    if password:
        return password
    first = getpass.getpass("Password: ")
    second = getpass.getpass("Confirm password: ")
    if first != second:
        raise ConstructionApiError("Passwords do not match")
    return first


def create_admin(manager: AdminUserManager, args: argparse.Namespace) -> None:
    password = _prompt_password(args.password)
    user = manager.create_user(
        username=args.username,
        password=password,
        name=args.name or args.username,
        email=args.email,
        role=args.role,
    )
    print(f"✓ Created admin user '{user.username}' (id={user.id}, role={user.role})")


def list_admins(manager: AdminUserManager, args: argparse.Namespace) -> None:
    users = manager.list_users()
    if not users:
        print("No admin users found.")
        print("Create one with: python src/main.py create-admin --username <name>")
        return

    print(f"Found {len(users)} admin user(s):\n")
    for index, user in enumerate(users, 1):
        last_login = user.last_login.isoformat() if user.last_login else "Never"
        print(f"{index}. {user.name}")
        print(f"   Username: {user.username}")
        print(f"   Email: {user.email or 'Not set'}")
        print(f"   Role: {user.role}")
        print(f"   Created: {user.created_at.date().isoformat()}")
        print(f"   Last Login: {last_login}")
        print()


def change_password(manager: AdminUserManager, args: argparse.Namespace) -> None:
    user = manager.get_user_by_username(args.username)
    if user is None:
        available = ", ".join(u.username for u in manager.list_users()) or "none"
        raise ConstructionApiError(
            f"Admin user '{args.username}' not found (available: {available})"
        )
    password = _prompt_password(args.password)
    manager.update_password(user.id, password)
    print(f"✓ Password updated for '{user.username}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage admin users")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create-admin", help="Create an admin user")
    create.add_argument("--username", required=True)
    create.add_argument("--name", default=None, help="Display name (defaults to username)")
    create.add_argument("--email", default=None)
    create.add_argument("--role", default="admin")
    create.add_argument("--password", default=None, help="Prompted for when omitted")
    create.set_defaults(handler=create_admin)

    listing = subparsers.add_parser("list-admins", help="List admin users")
    listing.set_defaults(handler=list_admins)

    change = subparsers.add_parser("change-password", help="Change an admin password")
    change.add_argument("--username", required=True)
    change.add_argument("--password", default=None, help="Prompted for when omitted")
    change.set_defaults(handler=change_password)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return a process exit code."""
    setup_logging()
    args = build_parser().parse_args(argv)
    print_banner()

    init_db()
    db = SessionLocal()
    try:
        args.handler(AdminUserManager(db), args)
    except ConstructionApiError as e:
        print(f"✗ Error: {e.message}")
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
