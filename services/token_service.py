"""
Token service for issuing and verifying signed bearer tokens.
Tokens are stateless HS256 JWTs carrying only a subject and an expiry.
"""
import time

from jose import jwt, JWTError

from utils.errors import Unauthenticated, Forbidden
from utils.logger import app_logger


class TokenService:
    """Issues and verifies time-limited bearer tokens."""

    ALGORITHM = "HS256"

    def __init__(self, secret: str, ttl_seconds: int = 3600):
        self._secret = secret
        self.ttl_seconds = ttl_seconds

    def issue(self, subject_id: str) -> str:
        """Sign a token for subject_id that expires ttl_seconds from now."""
        payload = {"sub": subject_id, "exp": int(time.time()) + self.ttl_seconds}
        return jwt.encode(payload, self._secret, algorithm=self.ALGORITHM)

    def verify(self, token: str | None) -> str:
        """
        Verify a token and return its subject.

        Raises:
            Unauthenticated: no token supplied
            Forbidden: malformed, wrongly signed, expired or subject-less token
        """
        if not token:
            raise Unauthenticated()

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.ALGORITHM])
        except JWTError as e:
            app_logger.warning(f"Token rejected: {e}")
            raise Forbidden() from e

        subject = payload.get("sub")
        if not subject:
            app_logger.warning("Token rejected: missing subject")
            raise Forbidden()

        return subject

    @staticmethod
    def extract_bearer(authorization: str | None) -> str | None:
        """Return the credential part of an 'Authorization: Bearer <token>' header."""
        if not authorization:
            return None

        parts = authorization.split()
        if len(parts) < 2:
            return None

        return parts[1]
