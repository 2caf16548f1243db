"""
Create a user (e.g. the first admin, since /users/sign-up/admin needs an admin token).
Run from project root:
  python -m playlist_api.scripts.create_user EMAIL PASSWORD FIRST_NAME [--last L] [--age N] [--role R]
Example:
  python -m playlist_api.scripts.create_user admin@example.com your-secure-password Ada --role admin
"""
import argparse
import logging
import sys

from playlist_api.core.config import get_settings
from playlist_api.core.database import SessionLocal
from playlist_api.core.exceptions import PlaylistApiError
from playlist_api.core.security import ROLE_ADMIN, ROLE_USER, PasswordHasher
from playlist_api.schemas.user import Name, UserCreate
from playlist_api.services.user_service import UserAuthService


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Playlist API user.")
    parser.add_argument("email", help="Email address (must be unique)")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument("first_name", help="First name")
    parser.add_argument("--last", dest="last_name", default=None, help="Last name")
    parser.add_argument("--age", type=int, default=18)
    parser.add_argument("--role", default=ROLE_USER, choices=[ROLE_USER, ROLE_ADMIN])
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s %(message)s")

    data = UserCreate(
        name=Name(first=args.first_name, last=args.last_name),
        email=args.email.strip(),
        age=args.age,
    )
    db = SessionLocal()
    try:
        service = UserAuthService(db, PasswordHasher(rounds=settings.BCRYPT_ROUNDS))
        user = service.sign_up(data, args.password, role=args.role)
    except PlaylistApiError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user id={user.id} email='{user.email}' with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
