"""Token verifier factory.

Provides get_verifier() / set_verifier() so a JWT-backed verifier can be
plugged in for production.
"""

from pos.identity.auth.fake_adapter import StaticTokenVerifier
from pos.identity.auth.port import TokenVerifier

_current_verifier: TokenVerifier | None = None


def get_verifier() -> TokenVerifier:
    """Return the current token verifier. Defaults to StaticTokenVerifier."""
    global _current_verifier
    if _current_verifier is None:
        _current_verifier = StaticTokenVerifier()
    return _current_verifier


def set_verifier(verifier: TokenVerifier) -> None:
    """Override the active token verifier (useful for tests)."""
    global _current_verifier
    _current_verifier = verifier


def reset_verifier() -> None:
    global _current_verifier
    _current_verifier = None
