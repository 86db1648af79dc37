"""Tests for /api/signup, /api/login and /api/user routes."""

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from fastapi.testclient import TestClient
from jose import jwt

from api.main import app
from api.dependencies import get_user_repo
from api.security import JWT_ALGORITHM, JWT_SECRET_KEY, create_access_token
from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import DependencyError


class AuthRouteTestCase(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.repo = FakeUserRepository()
        app.dependency_overrides[get_user_repo] = lambda: self.repo

        rounds = patch('services.auth_service.BCRYPT_ROUNDS', 4)
        rounds.start()
        self.addCleanup(rounds.stop)

    def tearDown(self):
        app.dependency_overrides.clear()

    def signup(self, **overrides):
        body = {"name": "Ada", "email": "ada@x.com", "password": "secret123"}
        body.update(overrides)
        return self.client.post("/api/signup", json=body)

    def login(self, email="ada@x.com", password="secret123"):
        return self.client.post("/api/login", json={"email": email, "password": password})


class TestSignup(AuthRouteTestCase):

    def test_signup_success(self):
        response = self.signup()

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "User registered successfully!"})
        self.assertEqual(len(self.repo.store), 1)

    def test_signup_does_not_issue_token(self):
        self.assertNotIn("token", self.signup().json())

    def test_signup_duplicate_email(self):
        self.signup()
        response = self.signup(name="Someone Else")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "User already exists"})
        self.assertEqual(len(self.repo.store), 1)

    def test_signup_missing_field(self):
        response = self.client.post("/api/signup", json={"name": "Ada", "email": "ada@x.com"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "All fields are required"})

    def test_signup_empty_field(self):
        response = self.signup(name="")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "All fields are required"})
        self.assertEqual(self.repo.store, {})

    def test_signup_invalid_email(self):
        response = self.signup(email="not-an-email")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "Invalid email"})

    def test_signup_store_failure_is_500(self):
        with patch.object(self.repo, 'create', side_effect=DependencyError("boom")):
            response = self.signup()

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"message": "Error registering user"})


class TestLogin(AuthRouteTestCase):

    def setUp(self):
        super().setUp()
        self.signup()

    def test_login_success_returns_token(self):
        response = self.login()

        self.assertEqual(response.status_code, 200)
        token = response.json()["token"]
        self.assertTrue(token)
        user = self.repo.get_by_email("ada@x.com")
        self.assertEqual(jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])["sub"], user.id)

    def test_account_email_domain_is_case_insensitive(self):
        self.signup(name="Grace", email="grace@Acme.IO")

        self.assertIsNotNone(self.repo.get_by_email("grace@acme.io"))
        self.assertEqual(self.login(email="grace@ACME.io").status_code, 200)

    def test_login_wrong_password(self):
        response = self.login(password="wrong-password")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "Invalid credentials"})

    def test_login_unknown_email(self):
        response = self.login(email="nobody@x.com")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "User not found"})

    def test_login_missing_password(self):
        response = self.client.post("/api/login", json={"email": "ada@x.com"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "All fields are required"})

    def test_login_store_failure_is_500(self):
        with patch.object(self.repo, 'get_by_email', side_effect=DependencyError("boom")):
            response = self.login()

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"message": "Error logging in"})


class TestGetUser(AuthRouteTestCase):

    def setUp(self):
        super().setUp()
        self.signup()
        self.token = self.login().json()["token"]

    def test_get_user_without_header_is_401(self):
        response = self.client.get("/api/user")

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"message": "Not authenticated"})

    def test_get_user_with_non_bearer_scheme_is_401(self):
        response = self.client.get("/api/user", headers={"Authorization": f"Token {self.token}"})
        self.assertEqual(response.status_code, 401)

    def test_get_user_with_malformed_token_is_403(self):
        response = self.client.get("/api/user", headers={"Authorization": "Bearer garbage"})

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json(), {"message": "Invalid or expired token"})

    def test_get_user_with_expired_token_is_403(self):
        user = self.repo.get_by_email("ada@x.com")
        now = datetime.now(timezone.utc)
        expired = jwt.encode(
            {"sub": user.id, "iat": now - timedelta(hours=2), "exp": now - timedelta(hours=1)},
            JWT_SECRET_KEY,
            algorithm=JWT_ALGORITHM,
        )

        response = self.client.get("/api/user", headers={"Authorization": f"Bearer {expired}"})
        self.assertEqual(response.status_code, 403)

    def test_get_user_returns_profile_without_password(self):
        response = self.client.get("/api/user", headers={"Authorization": f"Bearer {self.token}"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["name"], "Ada")
        self.assertEqual(data["email"], "ada@x.com")
        self.assertNotIn("password", data)
        self.assertNotIn("password_hash", data)

    def test_get_user_returns_token_holder_only(self):
        self.signup(name="Grace", email="grace@x.com")
        grace_token = self.login(email="grace@x.com").json()["token"]

        response = self.client.get("/api/user", headers={"Authorization": f"Bearer {grace_token}"})
        self.assertEqual(response.json()["email"], "grace@x.com")

    def test_get_user_for_deleted_user_is_404(self):
        user = self.repo.get_by_email("ada@x.com")
        self.repo.delete(user.id)

        response = self.client.get("/api/user", headers={"Authorization": f"Bearer {self.token}"})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"message": "User not found"})

    def test_get_user_token_for_unknown_id_is_404(self):
        token = create_access_token("no-such-user")
        response = self.client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(response.status_code, 404)


if __name__ == '__main__':
    unittest.main()
