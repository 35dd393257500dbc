"""Unit tests for password hashing."""

from user_registry.core.security import (
    get_password_context,
    hash_password,
    verify_password,
)
from user_registry.runtime.config.config_data import ConfigData, SecurityConfig
from user_registry.runtime.context import with_context


class TestPasswordHashing:
    """Tests for the passlib-backed hashing helpers."""

    def test_hash_is_not_the_plaintext(self):
        hashed = hash_password("s3cret-pass")

        assert hashed != "s3cret-pass"
        assert hashed.startswith("$pbkdf2-sha256$")

    def test_hashes_are_salted(self):
        assert hash_password("s3cret-pass") != hash_password("s3cret-pass")

    def test_verify_accepts_only_the_original(self):
        hashed = hash_password("s3cret-pass")

        assert verify_password("s3cret-pass", hashed)
        assert not verify_password("s3cret-pas", hashed)
        assert not verify_password(" s3cret-pass", hashed)

    def test_first_configured_scheme_hashes_new_passwords(self):
        override = ConfigData(
            security=SecurityConfig(password_schemes=["pbkdf2_sha512", "pbkdf2_sha256"])
        )

        with with_context(override):
            context = get_password_context()
            hashed = hash_password("s3cret-pass")

            assert context.default_scheme() == "pbkdf2_sha512"
            assert hashed.startswith("$pbkdf2-sha512$")

        assert get_password_context().default_scheme() == "pbkdf2_sha256"
