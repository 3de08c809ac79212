"""Access control for ProjectHub.

Defines actions, roles and actors, and the per-resource policy registry that
combines role grants with ownership predicates.
"""

from .actions import Action
from .actor import Actor
from .roles import Role, parse_roles
from .service import AclQuery, AclService, Rule

__all__ = [
    "Action",
    "Actor",
    "Role",
    "parse_roles",
    "AclQuery",
    "AclService",
    "Rule",
]
