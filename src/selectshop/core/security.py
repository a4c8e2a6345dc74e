"""Password hashing helpers."""

import base64
import hashlib
import hmac
import secrets

from src.selectshop.runtime.context import get_config

_ALGORITHM = "pbkdf2_sha256"


def generate_secure_token(length: int = 32) -> str:
    """Generate a URL-safe random token from ``length`` random bytes."""
    return (
        base64.urlsafe_b64encode(secrets.token_bytes(length))
        .decode("utf-8")
        .rstrip("=")
    )


def hash_password(password: str, iterations: int | None = None) -> str:
    """Hash ``password`` with a fresh salt.

    Returns:
        ``pbkdf2_sha256$<iterations>$<salt>$<hex digest>``
    """
    if iterations is None:
        iterations = get_config().security.password_hash_iterations
    salt = generate_secure_token(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations
    )
    return f"{_ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    """Check ``password`` against a value produced by :func:`hash_password`."""
    try:
        algorithm, iterations, salt, expected = encoded.split("$", 3)
        rounds = int(iterations)
    except ValueError:
        return False
    if algorithm != _ALGORITHM:
        return False

    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), rounds
    )
    return hmac.compare_digest(digest.hex(), expected)
