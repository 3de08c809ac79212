"""The authenticated identity performing a request."""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional

from .roles import Role, parse_roles, role_names


@dataclass(frozen=True)
class Actor:
    """Identifier plus held roles; immutable for the duration of a request.

    Ownership predicates compare ``id`` against a resource's owner reference.
    """

    id: int
    roles: FrozenSet[Role] = field(default_factory=frozenset)
    username: Optional[str] = None

    @classmethod
    def create(cls, id: int, roles: Iterable = (), username: Optional[str] = None) -> "Actor":
        """Build an actor from raw role values (strings or Role members)."""
        return cls(id=id, roles=parse_roles(roles), username=username)

    def has_role(self, role: Role) -> bool:
        return role in self.roles

    def to_claims(self) -> Dict[str, Any]:
        """Token claims describing this actor."""
        return {
            "sub": str(self.id),
            "roles": role_names(self.roles),
            "username": self.username,
        }
