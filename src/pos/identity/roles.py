"""Role names and their normalization.

Roles arrive from tokens and user records in several spellings
(``admin``, ``ADMIN``, ``ROLE_ADMIN``). Everything past this module uses the
prefixed, upper-case form.
"""

from enum import Enum

from pos.errors import InvalidRequest

ROLE_PREFIX = "ROLE_"


class Role(Enum):
    ADMIN = "ROLE_ADMIN"
    USER = "ROLE_USER"


def normalize_role(raw) -> Role:
    if raw is None or not str(raw).strip():
        raise InvalidRequest("role", "Role is required")

    name = str(raw).strip().upper()
    if not name.startswith(ROLE_PREFIX):
        name = ROLE_PREFIX + name
    try:
        return Role(name)
    except ValueError:
        raise InvalidRequest("role", f"Unknown role: {raw}") from None
