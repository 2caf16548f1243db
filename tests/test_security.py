"""Unit tests for credential validation, bcrypt hashing, JWT issue/verify and the role gate."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from playlist_api.core.exceptions import InvalidCredentialsFormat, Unauthorized
from playlist_api.core.security import (
    INVALID_TOKEN_MESSAGE,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    PasswordHasher,
    TokenService,
    authorize,
    validate_credentials,
)
from playlist_api.schemas.auth import SecurityProfile

SECRET = "unit-test-secret"


class TestValidateCredentials(unittest.TestCase):
    """validate_credentials rejects malformed emails and out-of-range passwords."""

    def test_accepts_valid_pair(self) -> None:
        validate_credentials("someone@example.com", "a" * PASSWORD_MIN_LEN)

    def test_rejects_email_without_at(self) -> None:
        with self.assertRaises(InvalidCredentialsFormat):
            validate_credentials("not-an-email", "long-enough-password")

    def test_rejects_empty_email(self) -> None:
        with self.assertRaises(InvalidCredentialsFormat):
            validate_credentials("", "long-enough-password")

    def test_rejects_short_password(self) -> None:
        with self.assertRaises(InvalidCredentialsFormat) as ctx:
            validate_credentials("someone@example.com", "a" * (PASSWORD_MIN_LEN - 1))
        self.assertIn(str(PASSWORD_MIN_LEN), ctx.exception.message)

    def test_rejects_empty_password(self) -> None:
        with self.assertRaises(InvalidCredentialsFormat):
            validate_credentials("someone@example.com", "")

    def test_rejects_overlong_password(self) -> None:
        with self.assertRaises(InvalidCredentialsFormat):
            validate_credentials("someone@example.com", "a" * (PASSWORD_MAX_LEN + 1))


class TestPasswordHasher(unittest.TestCase):
    """hash_password / compare_password behave like bcrypt with a fresh salt each call."""

    def setUp(self) -> None:
        self.hasher = PasswordHasher(rounds=4)

    def test_compare_matches_own_hash(self) -> None:
        hashed = self.hasher.hash_password("s3cret-password")
        self.assertTrue(self.hasher.compare_password("s3cret-password", hashed))

    def test_compare_rejects_other_password(self) -> None:
        hashed = self.hasher.hash_password("s3cret-password")
        self.assertFalse(self.hasher.compare_password("s3cret-passwore", hashed))
        self.assertFalse(self.hasher.compare_password("", hashed))

    def test_hashes_differ_across_calls(self) -> None:
        first = self.hasher.hash_password("same-password")
        second = self.hasher.hash_password("same-password")
        self.assertNotEqual(first, second)
        self.assertNotIn("same-password", first)

    def test_cost_is_embedded_in_hash(self) -> None:
        hashed = PasswordHasher(rounds=5).hash_password("any-password")
        self.assertTrue(hashed.startswith("$2b$05$"))

    def test_malformed_hash_is_a_mismatch_not_an_error(self) -> None:
        self.assertFalse(self.hasher.compare_password("whatever1", "not-a-bcrypt-hash"))

    def test_bytes_past_bcrypt_limit_still_count(self) -> None:
        hashed = self.hasher.hash_password("a" * 72 + "right-suffix")
        self.assertTrue(self.hasher.compare_password("a" * 72 + "right-suffix", hashed))
        self.assertFalse(self.hasher.compare_password("a" * 72 + "WRONG", hashed))
        self.assertFalse(self.hasher.compare_password("a" * 72, hashed))

    def test_multibyte_passwords_with_shared_prefix_differ(self) -> None:
        # 40 two-byte characters already exceed 72 bytes of UTF-8.
        hashed = self.hasher.hash_password("é" * 40 + "secret")
        self.assertTrue(self.hasher.compare_password("é" * 40 + "secret", hashed))
        self.assertFalse(self.hasher.compare_password("é" * 40 + "guess!", hashed))


class TestTokenService(unittest.TestCase):
    """issue() then verify() round-trips {id, role}; bad or expired tokens raise Unauthorized."""

    def setUp(self) -> None:
        self.tokens = TokenService(SECRET, expires_minutes=60)

    def test_round_trip(self) -> None:
        token = self.tokens.issue(SecurityProfile(id=7, role="admin"))
        profile = self.tokens.verify(token)
        self.assertEqual(profile, SecurityProfile(id=7, role="admin"))

    def test_payload_claims(self) -> None:
        token = self.tokens.issue(SecurityProfile(id=3, role="user"))
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        self.assertEqual(payload["sub"], "3")
        self.assertEqual(payload["role"], "user")
        self.assertEqual(payload["exp"] - payload["iat"], 60 * 60)

    def test_expired_token_is_rejected(self) -> None:
        issued_long_ago = TokenService(
            SECRET,
            expires_minutes=1,
            clock=lambda: datetime.now(UTC) - timedelta(minutes=5),
        )
        token = issued_long_ago.issue(SecurityProfile(id=1, role="user"))
        with self.assertRaises(Unauthorized) as ctx:
            self.tokens.verify(token)
        self.assertEqual(ctx.exception.message, INVALID_TOKEN_MESSAGE)

    def test_expiry_follows_the_service_clock(self) -> None:
        token = self.tokens.issue(SecurityProfile(id=1, role="user"))
        two_hours_later = TokenService(
            SECRET,
            expires_minutes=60,
            clock=lambda: datetime.now(UTC) + timedelta(hours=2),
        )
        with self.assertRaises(Unauthorized) as ctx:
            two_hours_later.verify(token)
        self.assertEqual(ctx.exception.message, INVALID_TOKEN_MESSAGE)

    def test_token_is_valid_until_service_clock_passes_exp(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=3)
        past = TokenService(SECRET, expires_minutes=60, clock=lambda: issued)
        token = past.issue(SecurityProfile(id=4, role="admin"))
        still_valid = TokenService(
            SECRET, expires_minutes=60, clock=lambda: issued + timedelta(minutes=59)
        )
        self.assertEqual(still_valid.verify(token), SecurityProfile(id=4, role="admin"))

    def test_wrong_secret_is_rejected(self) -> None:
        token = TokenService("other-secret").issue(SecurityProfile(id=1, role="user"))
        with self.assertRaises(Unauthorized) as ctx:
            self.tokens.verify(token)
        self.assertEqual(ctx.exception.message, INVALID_TOKEN_MESSAGE)

    def test_garbage_is_rejected(self) -> None:
        with self.assertRaises(Unauthorized):
            self.tokens.verify("not.a.jwt")

    def test_non_integer_sub_is_rejected(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "abc", "role": "user", "iat": now, "exp": now + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(Unauthorized):
            self.tokens.verify(token)

    def test_unknown_role_is_rejected(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "1", "role": "superuser", "iat": now, "exp": now + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(Unauthorized):
            self.tokens.verify(token)

    def test_missing_exp_is_rejected(self) -> None:
        token = jwt.encode({"sub": "1", "role": "user", "iat": datetime.now(UTC)}, SECRET)
        with self.assertRaises(Unauthorized):
            self.tokens.verify(token)


class TestAuthorize(unittest.TestCase):
    """authorize() is a plain role-membership check."""

    def test_user_denied_admin_operation(self) -> None:
        self.assertFalse(authorize(SecurityProfile(id=1, role="user"), ["admin"]))

    def test_admin_allowed_admin_operation(self) -> None:
        self.assertTrue(authorize(SecurityProfile(id=1, role="admin"), ["admin"]))

    def test_any_listed_role_is_allowed(self) -> None:
        self.assertTrue(authorize(SecurityProfile(id=1, role="user"), ("user", "admin")))

    def test_empty_allowed_roles_denies(self) -> None:
        self.assertFalse(authorize(SecurityProfile(id=1, role="admin"), []))


if __name__ == "__main__":
    unittest.main()
