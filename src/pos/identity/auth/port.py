"""Token verification port.

Token issuance and password hashing belong to the identity provider. The POS
only needs to turn a bearer token into the caller's subject and roles.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pos.identity.roles import Role


@dataclass(frozen=True)
class Claims:
    subject: str
    roles: frozenset[Role] = field(default_factory=frozenset)

    def has_role(self, role: Role) -> bool:
        return role in self.roles


class TokenVerifier(ABC):
    @abstractmethod
    def verify(self, token: str) -> Claims:
        """Return the token's claims.

        Raises ``TokenExpired`` for an expired token and
        ``TokenInvalid`` for anything else that cannot be trusted.
        """
        ...
