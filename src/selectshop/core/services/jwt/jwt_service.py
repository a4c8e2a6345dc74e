"""Access token generation and verification."""

import time
from typing import Any

from authlib.common.security import generate_token
from authlib.jose import JoseError, jwt
from loguru import logger
from pydantic import BaseModel

from src.selectshop.core.exceptions import UnauthenticatedError
from src.selectshop.entities.core.user import User
from src.selectshop.runtime.context import get_config


class TokenClaims(BaseModel):
    """Verified claims of an access token."""

    subject: str
    issuer: str
    audience: list[str]
    expires_at: int
    username: str | None = None
    role: str | None = None

    @property
    def user_id(self) -> int:
        return int(self.subject)


def _as_list(v: Any) -> list[str]:
    return [v] if isinstance(v, str) else list(v or ())


class JwtService:
    """Issues and checks the HS256 access tokens handed out at login."""

    def _secret(self) -> str:
        secret = get_config().app.session_signing_secret
        if not secret:
            raise RuntimeError("JWT signing secret not configured")
        return secret

    def generate_access_token(
        self,
        user: User,
        expires_in_seconds: int | None = None,
        algorithm: str = "HS256",
    ) -> str:
        """Sign an access token whose subject is the user's id."""
        config = get_config()
        if algorithm not in config.jwt.allowed_algorithms:
            raise RuntimeError(f"Algorithm {algorithm} not allowed")

        now = int(time.time())
        ttl = expires_in_seconds if expires_in_seconds is not None else config.jwt.access_token_ttl_seconds
        payload = {
            "iss": config.jwt.gen_issuer,
            "sub": str(user.id),
            "aud": config.jwt.audiences,
            "exp": now + ttl,
            "iat": now,
            "nbf": now,
            "jti": generate_token(16),
            "username": user.username,
            "role": str(user.role),
        }
        header = {"alg": algorithm, "typ": "JWT"}

        token = jwt.encode(header, payload, self._secret())
        return token.decode() if isinstance(token, bytes) else token

    def verify_jwt(self, token: str) -> TokenClaims:
        """Check signature, issuer, audience and lifetime of ``token``.

        Raises:
            UnauthenticatedError: The token is malformed, forged or expired.
        """
        cfg = get_config()
        claims_options = {
            "iss": {"essential": True, "values": [cfg.jwt.gen_issuer]},
            "aud": {"essential": True, "values": cfg.jwt.audiences},
            "sub": {"essential": True},
            "exp": {"essential": True},
        }

        try:
            claims = jwt.decode(token, self._secret(), claims_options=claims_options)
            claims.validate(leeway=cfg.jwt.clock_skew)
        except (JoseError, ValueError) as exc:
            logger.debug("Rejected access token: {}", exc)
            raise UnauthenticatedError("Invalid access token") from exc

        if claims.header.get("alg") not in cfg.jwt.allowed_algorithms:
            raise UnauthenticatedError("Disallowed JWT algorithm")

        return TokenClaims(
            subject=str(claims["sub"]),
            issuer=claims["iss"],
            audience=_as_list(claims["aud"]),
            expires_at=int(claims["exp"]),
            username=claims.get("username"),
            role=claims.get("role"),
        )
