"""Shared-token guard for machine clients such as the Siri shortcut."""

import hmac
import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer

from nunu_log.core.config import settings

logger = logging.getLogger(__name__)

api_key_header: APIKeyHeader = APIKeyHeader(name="X-API-Key", auto_error=False)
bearer_scheme: HTTPBearer = HTTPBearer(auto_error=False)


def token_matches(candidate: str | None, expected: str) -> bool:
    """Constant-time comparison of a presented token with the configured one."""
    if not candidate:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def require_api_token(
    api_key: str | None = Depends(api_key_header),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> None:
    """Reject the request unless it carries the configured API token.

    When ``NUNU_LOG_API_TOKEN`` is unset the endpoint stays open.
    """
    expected = settings.api_token
    if not expected:
        return

    candidate = api_key or (credentials.credentials if credentials is not None else None)
    if not token_matches(candidate, expected):
        logger.warning("[AUTH] Rejected webhook call with %s token", "invalid" if candidate else "missing")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
