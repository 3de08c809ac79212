"""Action model for ProjectHub access control.

Actions are resource-type agnostic: every protected resource reuses the same
enum and its registry decides which subset is meaningful.

MANAGE is a wildcard. A rule whose action set contains the MANAGE tag grants
every action for its role. No other implication between actions exists.
"""

from enum import Enum
from typing import FrozenSet, Iterable


class Action(str, Enum):
    """Actions that can be performed on a protected resource."""

    # Standard CRUD actions
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    LIST = "list"

    # Wildcard
    MANAGE = "manage"


def to_action_set(actions: Iterable) -> FrozenSet[Action]:
    """Normalize an iterable of actions or action strings into a frozenset.

    Raises:
        ValueError: If an element is not a known action
    """
    return frozenset(Action(a) for a in actions)


def grants(actions: FrozenSet[Action], action: Action) -> bool:
    """Check if an action set covers ``action``, honouring the MANAGE wildcard."""
    return action in actions or Action.MANAGE in actions
