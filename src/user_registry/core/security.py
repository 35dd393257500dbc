"""Credential hashing helpers."""

from functools import lru_cache

from passlib.context import CryptContext

from user_registry.runtime.context import get_config


@lru_cache(maxsize=8)
def _crypt_context(schemes: tuple[str, ...]) -> CryptContext:
    return CryptContext(schemes=list(schemes), deprecated="auto")


def get_password_context() -> CryptContext:
    """Return the hashing context for the configured schemes."""
    return _crypt_context(tuple(get_config().security.password_schemes))


def hash_password(password: str) -> str:
    """Hash a plaintext password with the preferred configured scheme."""
    return get_password_context().hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored hash."""
    return get_password_context().verify(password, password_hash)
