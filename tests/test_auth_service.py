"""Tests for the auth service: register, login, admin login, role checks."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError

from sunflix.core.config import Settings
from sunflix.core.database import Database
from sunflix.core.exceptions import AuthError, AuthzError, ConflictError, ValidationError
from sunflix.core.security import hash_password, verify_password, verify_token
from sunflix.models import User
from sunflix.services import auth as auth_service


def make_settings() -> Settings:
    return Settings(
        _env_file=None,
        JWT_SECRET="unit-test-secret",
        DATABASE_URL="sqlite://",
        BCRYPT_ROUNDS=4,
    )


class AuthServiceTestCase(unittest.TestCase):
    """In-memory SQLite database with one regular user and one admin."""

    def setUp(self) -> None:
        self.settings = make_settings()
        self.database = Database("sqlite://")
        self.database.create_all()
        self.db = self.database.session()
        self.admin = User(
            name="Admin",
            email="admin@sunflix.com",
            password_hash=hash_password("admin123", rounds=4),
            role="admin",
            approved=True,
            favorites=[],
            subscriptions=[],
        )
        self.db.add(self.admin)
        self.db.commit()

    def tearDown(self) -> None:
        self.db.close()
        self.database.dispose()


class TestRegister(AuthServiceTestCase):
    def test_creates_unapproved_user_and_token(self) -> None:
        result = auth_service.register(self.db, self.settings, "Ann", "ann@x.com", "pw123")
        self.assertEqual(result.user.email, "ann@x.com")
        self.assertEqual(result.user.role, "user")
        self.assertFalse(result.user.approved)
        self.assertEqual(result.user.favorites, [])
        self.assertEqual(verify_token(result.token, self.settings), result.user.id)

    def test_stores_hash_not_plaintext(self) -> None:
        result = auth_service.register(self.db, self.settings, "Ann", "ann@x.com", "pw123")
        stored = self.db.get(User, result.user.id)
        self.assertNotEqual(stored.password_hash, "pw123")
        self.assertTrue(verify_password("pw123", stored.password_hash))
        self.assertNotIn("password", result.user.model_dump())
        self.assertNotIn("password_hash", result.user.model_dump())

    def test_duplicate_email_conflicts_regardless_of_password(self) -> None:
        auth_service.register(self.db, self.settings, "Ann", "ann@x.com", "pw123")
        with self.assertRaises(ConflictError) as ctx:
            auth_service.register(self.db, self.settings, "Ann Two", "ann@x.com", "different")
        self.assertEqual(ctx.exception.message, "User already exists")
        self.assertEqual(self.db.query(User).filter(User.email == "ann@x.com").count(), 1)

    def test_missing_fields(self) -> None:
        for name, email, password in [
            (None, "ann@x.com", "pw123"),
            ("Ann", "", "pw123"),
            ("Ann", "ann@x.com", None),
        ]:
            with self.assertRaises(ValidationError) as ctx:
                auth_service.register(self.db, self.settings, name, email, password)
            self.assertEqual(ctx.exception.message, "Missing required fields")

    def test_password_over_bcrypt_limit_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            auth_service.register(self.db, self.settings, "Ann", "ann@x.com", "x" * 73)

    def test_lost_race_on_unique_index_is_conflict(self) -> None:
        session = MagicMock()
        session.query.return_value.filter.return_value.first.return_value = None
        session.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))
        with self.assertRaises(ConflictError):
            auth_service.register(session, self.settings, "Ann", "ann@x.com", "pw123")
        session.rollback.assert_called_once()


class TestLogin(AuthServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.registered = auth_service.register(
            self.db, self.settings, "Ann", "ann@x.com", "pw123"
        )

    def test_correct_password(self) -> None:
        result = auth_service.login(self.db, self.settings, "ann@x.com", "pw123")
        self.assertEqual(verify_token(result.token, self.settings), self.registered.user.id)

    def test_wrong_password_and_unknown_email_look_the_same(self) -> None:
        with self.assertRaises(AuthError) as wrong_pw:
            auth_service.login(self.db, self.settings, "ann@x.com", "wrong")
        with self.assertRaises(AuthError) as unknown:
            auth_service.login(self.db, self.settings, "nobody@x.com", "pw123")
        self.assertEqual(wrong_pw.exception.message, "Invalid credentials")
        self.assertEqual(wrong_pw.exception.message, unknown.exception.message)

    def test_email_is_case_sensitive(self) -> None:
        with self.assertRaises(AuthError):
            auth_service.login(self.db, self.settings, "ANN@x.com", "pw123")

    def test_missing_fields(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            auth_service.login(self.db, self.settings, "ann@x.com", "")
        self.assertEqual(ctx.exception.message, "Missing email or password")

    def test_admin_can_use_regular_login(self) -> None:
        result = auth_service.login(self.db, self.settings, "admin@sunflix.com", "admin123")
        self.assertEqual(result.user.role, "admin")


class TestAdminLogin(AuthServiceTestCase):
    def test_admin_succeeds(self) -> None:
        result = auth_service.admin_login(self.db, self.settings, "admin@sunflix.com", "admin123")
        self.assertEqual(result.user.id, self.admin.id)
        self.assertEqual(verify_token(result.token, self.settings), self.admin.id)

    def test_regular_user_gets_generic_failure(self) -> None:
        auth_service.register(self.db, self.settings, "Ann", "ann@x.com", "pw123")
        with self.assertRaises(AuthError) as right_pw:
            auth_service.admin_login(self.db, self.settings, "ann@x.com", "pw123")
        with self.assertRaises(AuthError) as wrong_pw:
            auth_service.admin_login(self.db, self.settings, "admin@sunflix.com", "nope")
        with self.assertRaises(AuthError) as unknown:
            auth_service.admin_login(self.db, self.settings, "nobody@x.com", "pw123")
        self.assertEqual(right_pw.exception.message, "Invalid admin credentials")
        self.assertEqual(right_pw.exception.message, wrong_pw.exception.message)
        self.assertEqual(right_pw.exception.message, unknown.exception.message)


class TestRequireRole(AuthServiceTestCase):
    def test_admin_passes(self) -> None:
        user = auth_service.require_role(self.db, self.admin.id, "admin")
        self.assertEqual(user.id, self.admin.id)

    def test_regular_user_rejected(self) -> None:
        result = auth_service.register(self.db, self.settings, "Ann", "ann@x.com", "pw123")
        with self.assertRaises(AuthzError) as ctx:
            auth_service.require_role(self.db, result.user.id, "admin")
        self.assertEqual(ctx.exception.message, "Unauthorized")

    def test_unknown_user_rejected(self) -> None:
        with self.assertRaises(AuthzError):
            auth_service.require_role(self.db, "0" * 32, "admin")


if __name__ == "__main__":
    unittest.main()
