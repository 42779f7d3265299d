"""Bearer-token dependencies for the HTTP layer.

``require_authenticated`` accepts any valid token, ``require_admin`` also
needs ``ROLE_ADMIN``. An expired token is answered with 401 and
``X-Token-Expired: true`` so the client knows to refresh instead of logging in
again.
"""

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from pos.errors import AuthenticationError, TokenExpired
from pos.identity.auth import get_verifier
from pos.identity.auth.port import Claims
from pos.identity.roles import Role
from pos.utils.logging import get_logger

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def require_authenticated(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Claims:
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Authentication required")

    try:
        return get_verifier().verify(credentials.credentials)
    except TokenExpired as exc:
        logger.info("token_expired", **exc.context)
        raise HTTPException(
            status_code=401,
            detail="Token has expired",
            headers={"X-Token-Expired": "true"},
        ) from exc
    except AuthenticationError as exc:
        raise HTTPException(status_code=401, detail=exc.message) from exc


def require_admin(claims: Claims = Depends(require_authenticated)) -> Claims:
    if not claims.has_role(Role.ADMIN):
        logger.warning("admin_access_denied", subject=claims.subject)
        raise HTTPException(status_code=403, detail="Admin role required")
    return claims
