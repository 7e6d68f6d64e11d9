"""Tests for SqlCredentialStore and the user service against in-memory SQLite."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from league.core.errors import DependencyError, NotFoundError, ValidationError
from league.core.security import verify_password
from league.schemas.auth import RegisterRequest, UserCreate, UserUpdate
from league.services import users as user_service
from league.services.credentials import SqlCredentialStore
from tests.db_helpers import make_session_factory


class CredentialStoreTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()
        self.store = SqlCredentialStore(self.db)

    def tearDown(self) -> None:
        self.db.close()


class TestFindByUsername(CredentialStoreTestCase):
    """find_by_username is an exact, case-sensitive match."""

    def test_found_and_not_found(self) -> None:
        self.store.create("alice", "secret123", "alice@example.com", "coach")
        self.assertEqual(self.store.find_by_username("alice").role, "coach")
        self.assertIsNone(self.store.find_by_username("ALICE"))
        self.assertIsNone(self.store.find_by_username("bob"))

    def test_stores_hash_not_plaintext(self) -> None:
        user = self.store.create("alice", "secret123", "alice@example.com", "user")
        self.assertNotEqual(user.password_hash, "secret123")
        self.assertTrue(verify_password("secret123", user.password_hash))

    def test_lookup_failure_is_dependency_error(self) -> None:
        db = MagicMock()
        db.execute.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))
        with self.assertRaises(DependencyError):
            SqlCredentialStore(db).find_by_username("alice")


class TestCreateUser(CredentialStoreTestCase):
    """create_user validates presence and username uniqueness."""

    def test_default_role(self) -> None:
        user = user_service.create_user(
            self.store,
            UserCreate(username="carol", password="pw123456", email="carol@example.com"),
        )
        self.assertEqual(user.role, "user")
        self.assertIsNotNone(user.created_at)

    def test_missing_fields(self) -> None:
        cases = [
            UserCreate(password="pw", email="e@example.com"),
            UserCreate(username="u", email="e@example.com"),
            UserCreate(username="u", password="pw"),
        ]
        for data in cases:
            with self.subTest(data=data):
                with self.assertRaises(ValidationError):
                    user_service.create_user(self.store, data)

    def test_duplicate_username(self) -> None:
        data = UserCreate(username="dave", password="pw123456", email="d@example.com")
        user_service.create_user(self.store, data)
        with self.assertRaises(ValidationError) as ctx:
            user_service.create_user(self.store, data)
        self.assertEqual(ctx.exception.message, "Username already exists")

    def test_register_forces_user_role(self) -> None:
        for username, role in (("eve", "admin"), ("mallory", "superuser")):
            with self.subTest(role=role):
                data = RegisterRequest.model_validate(
                    {"username": username, "password": "pw123456", "email": f"{username}@example.com", "role": role}
                )
                user = user_service.register_user(self.store, data)
                self.assertEqual(user.role, "user")


class TestUpdateAndDeleteUser(CredentialStoreTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice = self.store.create("alice", "secret123", "alice@example.com", "coach")
        self.bob = self.store.create("bob", "hunter22", "bob@example.com", "user")

    def test_update_keeps_password_when_omitted(self) -> None:
        old_hash = self.alice.password_hash
        user = user_service.update_user(
            self.store,
            self.alice.user_id,
            UserUpdate(username="alice", email="new@example.com"),
        )
        self.assertEqual(user.email, "new@example.com")
        self.assertEqual(user.role, "coach")
        self.assertEqual(user.password_hash, old_hash)

    def test_update_rehashes_new_password(self) -> None:
        user = user_service.update_user(
            self.store,
            self.alice.user_id,
            UserUpdate(username="alice", email="alice@example.com", password="changed99"),
        )
        self.assertTrue(verify_password("changed99", user.password_hash))
        self.assertFalse(verify_password("secret123", user.password_hash))

    def test_update_to_taken_username(self) -> None:
        with self.assertRaises(ValidationError):
            user_service.update_user(
                self.store,
                self.alice.user_id,
                UserUpdate(username="bob", email="alice@example.com"),
            )

    def test_update_unknown_user(self) -> None:
        with self.assertRaises(NotFoundError):
            user_service.update_user(
                self.store, 999, UserUpdate(username="x", email="x@example.com")
            )

    def test_delete(self) -> None:
        bob_id = self.bob.user_id
        result = user_service.delete_user(self.store, bob_id)
        self.assertEqual(result, {"message": "User deleted successfully"})
        with self.assertRaises(NotFoundError):
            user_service.get_user(self.store, bob_id)

    def test_list_newest_first(self) -> None:
        usernames = [u.username for u in user_service.list_users(self.store)]
        self.assertEqual(usernames, ["bob", "alice"])


if __name__ == "__main__":
    unittest.main()
