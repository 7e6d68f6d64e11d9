"""
Create a user (e.g. the first admin or a coach). Run from project root:
  python -m league.scripts.create_user USERNAME PASSWORD EMAIL [role]
Example:
  python -m league.scripts.create_user admin your-secure-password admin@example.com admin
"""
import argparse
import logging
import sys

from league.core.database import SessionLocal
from league.core.errors import LeagueError
from league.core.security import USER_ROLES
from league.schemas.auth import UserCreate
from league.services.credentials import SqlCredentialStore
from league.services.users import create_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a league user account.")
    parser.add_argument("username", help="Username (case-sensitive, unique)")
    parser.add_argument("password", help="Password")
    parser.add_argument("email", help="Email address")
    parser.add_argument("role", nargs="?", default="user", choices=list(USER_ROLES))
    args = parser.parse_args(argv)

    username = args.username.strip()
    db = SessionLocal()
    try:
        user = create_user(
            SqlCredentialStore(db),
            UserCreate(
                username=username,
                password=args.password,
                email=args.email.strip(),
                role=args.role,
            ),
        )
        print(f"Created user '{user.username}' with role '{user.role}'.")
        return 0
    except LeagueError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
