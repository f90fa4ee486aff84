"""Bearer Authentication — rejects unauthenticated callers before any pipeline runs.

Invariants:
    - Tokens are compared in constant time (hmac.compare_digest)
    - Missing, malformed, or unknown tokens raise AuthenticationError (401)
    - The caller identity is a stable, non-reversible label derived from the token
"""

import hashlib
import hmac
import logging
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import Settings, get_settings
from app.core.errors import AuthenticationError

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False, description="API bearer token")


@dataclass(frozen=True)
class Caller:
    """Authenticated caller, recorded on audit fields."""
    subject: str


def caller_for_token(token: str, accepted: list[str]) -> Caller | None:
    """Return the caller for a known token, None otherwise."""
    matched = False
    for candidate in accepted:
        if hmac.compare_digest(token.encode(), candidate.encode()):
            matched = True
    if not matched:
        return None
    digest = hashlib.sha256(token.encode()).hexdigest()[:12]
    return Caller(subject=f"token:{digest}")


async def require_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_settings),
) -> Caller:
    """FastAPI dependency — authenticated caller or 401."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError()
    caller = caller_for_token(credentials.credentials, settings.api_tokens)
    if caller is None:
        logger.warning("Rejected unknown bearer token")
        raise AuthenticationError("Invalid bearer token")
    return caller
