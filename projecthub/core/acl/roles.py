"""Role definitions for ProjectHub.

Roles are coarse-grained groups an actor belongs to. Token claims and
database rows carry them as plain strings; ``Role.parse`` is the single place
where such strings become enum members.
"""

from enum import Enum
from typing import FrozenSet, Iterable, List


class Role(str, Enum):
    """Roles recognized by the access control layer."""

    ADMIN = "ADMIN"
    USER = "USER"

    @classmethod
    def parse(cls, value: "str | Role") -> "Role":
        """Parse a role string like 'ADMIN' (case-insensitive).

        Raises:
            ValueError: If the role is unknown
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unknown role: {value}") from None


def parse_roles(values: Iterable) -> FrozenSet[Role]:
    """Parse a collection of role strings, rejecting unknown ones."""
    return frozenset(Role.parse(v) for v in values)


def role_names(roles: Iterable[Role]) -> List[str]:
    """Serialize roles to a sorted list of strings for storage or claims."""
    return sorted(r.value for r in roles)


DEFAULT_USER_ROLES = frozenset([Role.USER])
