"""
Signed, time-limited session tokens.

Tokens are HMAC-signed JWTs carrying {userId, iat, exp, jti}. Verification
collapses every failure (bad signature, malformed input, expiry) into
``None`` so callers cannot tell a forged token from an expired one.
"""
import time
from datetime import timedelta
from typing import Callable
from uuid import uuid4

from jose import JWTError, jwt

from ..models.Token import Identity, TokenPayload


class TokenService:
    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(hours=30),
        clock: Callable[[], float] = time.time,
    ):
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self.algorithm = algorithm
        self.expires_delta = expires_delta
        self.clock = clock

    def issue(self, user_id: str) -> str:
        issued_at = int(self.clock())
        claims = {
            "userId": str(user_id),
            "iat": issued_at,
            "exp": issued_at + int(self.expires_delta.total_seconds()),
            "jti": uuid4().hex,
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> TokenPayload | None:
        """
        Returns the verified claims, or None if the token is not currently valid.
        """
        if not isinstance(token, str) or not token:
            return None
        try:
            # Expiry is checked below against our own clock
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
            payload = TokenPayload.model_validate(claims)
        except (JWTError, ValueError):
            return None

        if self.clock() >= payload.exp:
            return None
        return payload

    def verify(self, token: str) -> Identity | None:
        payload = self.decode(token)
        if payload is None:
            return None
        return Identity(user_id=payload.user_id)
