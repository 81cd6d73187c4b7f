"""
Create a user (e.g. first admin). Run from project root:
  python -m sunflix.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m sunflix.scripts.create_user "Site Admin" admin@sunflix.com your-secure-password admin
"""
import argparse
import logging
import sys

from dotenv import load_dotenv
from sqlalchemy.exc import IntegrityError

from sunflix.core.config import Settings, get_settings
from sunflix.core.database import Database
from sunflix.core.security import PASSWORD_MAX_BYTES, hash_password
from sunflix.models import User
from sunflix.models.user import ROLES

logger = logging.getLogger(__name__)


def main(
    argv: list[str] | None = None,
    settings: Settings | None = None,
    database: Database | None = None,
) -> int:
    parser = argparse.ArgumentParser(description="Create a Sunflix user (admins have no signup UI).")
    parser.add_argument("name", help="Display name")
    parser.add_argument("email", help="Login email")
    parser.add_argument("password", help=f"Password (1-{PASSWORD_MAX_BYTES} bytes)")
    parser.add_argument("role", nargs="?", default="user", choices=list(ROLES))
    parser.add_argument(
        "--approved", action="store_true", help="Mark the account as approved"
    )
    args = parser.parse_args(argv)

    name = args.name.strip()
    email = args.email.strip()
    if not name or not email:
        print("Name and email must be non-empty.", file=sys.stderr)
        return 1
    if not args.password or len(args.password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        print(f"Password must be 1-{PASSWORD_MAX_BYTES} bytes.", file=sys.stderr)
        return 1

    if settings is None:
        settings = get_settings()
    if database is None:
        database = Database(settings.DATABASE_URL)
    db = database.session()
    try:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        user = User(
            name=name,
            email=email,
            password_hash=hash_password(args.password, rounds=settings.BCRYPT_ROUNDS),
            role=args.role,
            approved=args.approved,
            favorites=[],
            subscriptions=[],
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        logger.info("Created user", extra={"user_id": user.id, "role": args.role})
        print(f"Created user '{email}' with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    load_dotenv()
    sys.exit(main())
