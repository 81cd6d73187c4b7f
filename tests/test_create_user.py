"""Tests for the create_user seeding script."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError

from sunflix.core.config import Settings
from sunflix.core.database import Database
from sunflix.core.security import verify_password
from sunflix.models import User
from sunflix.scripts.create_user import main


class TestCreateUser(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = Settings(
            _env_file=None, JWT_SECRET="s", DATABASE_URL="sqlite://", BCRYPT_ROUNDS=4
        )
        self.database = Database("sqlite://")
        self.database.create_all()

    def tearDown(self) -> None:
        self.database.dispose()

    def run_main(self, *argv: str) -> int:
        return main(list(argv), settings=self.settings, database=self.database)

    def test_creates_admin(self) -> None:
        code = self.run_main("Site Admin", "admin@sunflix.com", "admin123", "admin", "--approved")
        self.assertEqual(code, 0)
        db = self.database.session()
        try:
            user = db.query(User).filter(User.email == "admin@sunflix.com").one()
            self.assertEqual(user.role, "admin")
            self.assertTrue(user.approved)
            self.assertTrue(verify_password("admin123", user.password_hash))
        finally:
            db.close()

    def test_default_role_is_user(self) -> None:
        self.assertEqual(self.run_main("Ann", "ann@x.com", "pw123"), 0)
        db = self.database.session()
        try:
            user = db.query(User).filter(User.email == "ann@x.com").one()
            self.assertEqual(user.role, "user")
            self.assertFalse(user.approved)
        finally:
            db.close()

    def test_existing_email(self) -> None:
        self.assertEqual(self.run_main("Ann", "ann@x.com", "pw123"), 0)
        self.assertEqual(self.run_main("Ann", "ann@x.com", "other"), 1)

    def test_lost_race_on_unique_index_reports_existing(self) -> None:
        session = MagicMock()
        session.query.return_value.filter.return_value.first.return_value = None
        session.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))
        database = MagicMock()
        database.session.return_value = session
        code = main(["Ann", "ann@x.com", "pw123"], settings=self.settings, database=database)
        self.assertEqual(code, 1)
        session.rollback.assert_called_once()
        session.close.assert_called_once()

    def test_password_too_long(self) -> None:
        self.assertEqual(self.run_main("Ann", "ann@x.com", "x" * 73), 1)


if __name__ == "__main__":
    unittest.main()
