"""In-memory token verifier for development and tests.

Tokens are opaque random strings issued by ``issue()`` and remembered with
their subject, role and expiry.
"""

import secrets
from datetime import UTC, datetime, timedelta

from pos.errors import TokenExpired, TokenInvalid
from pos.identity.auth.port import Claims, TokenVerifier
from pos.identity.roles import normalize_role


class StaticTokenVerifier(TokenVerifier):
    def __init__(self) -> None:
        self._tokens: dict[str, tuple[str, frozenset, datetime]] = {}

    def issue(self, subject: str, role="USER", ttl: timedelta = timedelta(hours=1)) -> str:
        token = secrets.token_urlsafe(24)
        self._tokens[token] = (subject, frozenset({normalize_role(role)}), datetime.now(UTC) + ttl)
        return token

    def verify(self, token: str) -> Claims:
        entry = self._tokens.get(token)
        if entry is None:
            raise TokenInvalid("Invalid token")

        subject, roles, expires_at = entry
        if datetime.now(UTC) >= expires_at:
            raise TokenExpired("Token has expired", subject=subject)
        return Claims(subject=subject, roles=roles)
