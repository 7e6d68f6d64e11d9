"""Tests for the create_user admin script."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from league.core.security import verify_password
from league.scripts import create_user
from league.services.credentials import SqlCredentialStore
from tests.db_helpers import make_session_factory


class TestCreateUserScript(unittest.TestCase):
    def setUp(self) -> None:
        self.session_factory = make_session_factory()
        patcher = patch.object(create_user, "SessionLocal", self.session_factory)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = create_user.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_creates_admin(self) -> None:
        code, out, _ = self._run("admin", "s3cure-pass", "admin@example.com", "admin")
        self.assertEqual(code, 0)
        self.assertIn("role 'admin'", out)
        db = self.session_factory()
        try:
            user = SqlCredentialStore(db).find_by_username("admin")
            self.assertEqual(user.role, "admin")
            self.assertTrue(verify_password("s3cure-pass", user.password_hash))
        finally:
            db.close()

    def test_duplicate_username_fails(self) -> None:
        self.assertEqual(self._run("coach1", "pw123456", "c@example.com", "coach")[0], 0)
        code, _, err = self._run("coach1", "pw123456", "c@example.com")
        self.assertEqual(code, 1)
        self.assertIn("Username already exists", err)


if __name__ == "__main__":
    unittest.main()
