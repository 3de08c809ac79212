"""Per-resource-type policy registry.

An ``AclService`` owns the rule table for one resource type. Rules map a role
to a set of actions, optionally guarded by a predicate over
``(resource, actor)``. The table is built once when the owning registry is
constructed and only read afterwards.

Usage::

    acl: AclService[Project] = AclService("project")
    acl.can_do(Role.ADMIN, [Action.MANAGE])
    acl.can_do(Role.USER, [Action.CREATE, Action.LIST, Action.READ])
    acl.can_do(Role.USER, [Action.UPDATE, Action.DELETE], is_project_owner)

    if not acl.for_actor(actor).can_do_action(Action.UPDATE, project):
        raise AuthorizationDeniedError(Action.UPDATE, "project")

Evaluation is an OR across every rule of every role the actor holds. A rule
applies when its action set contains the requested action or MANAGE. A rule
without a predicate allows outright; a rule with a predicate allows only when
a resource is given and the predicate returns true. Nothing matching means
deny.
"""

import threading
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

from projecthub.core.exceptions import AclMisconfigurationError, AuthorizationDeniedError
from projecthub.core.logger import get_logger

from .actions import Action, grants, to_action_set
from .actor import Actor
from .roles import Role

ResourceT = TypeVar("ResourceT")

# Predicates must be total and side-effect free; exceptions propagate.
Predicate = Callable[[ResourceT, Actor], bool]

logger = get_logger(__name__)


@dataclass(frozen=True)
class Rule(Generic[ResourceT]):
    """A single grant: role, action set and optional guard."""

    role: Role
    actions: frozenset
    predicate: Optional[Predicate] = None

    @property
    def is_conditional(self) -> bool:
        return self.predicate is not None

    def applies_to(self, action: Action) -> bool:
        return grants(self.actions, action)

    def allows(self, action: Action, actor: Actor, resource: Optional[ResourceT] = None) -> bool:
        """Check whether this rule alone allows ``action``."""
        if not self.applies_to(action):
            return False
        if self.predicate is None:
            return True
        # Guarded rules are unreachable without a resource instance
        if resource is None:
            return False
        return bool(self.predicate(resource, actor))


class AclQuery(Generic[ResourceT]):
    """A registry bound to one actor; safe to discard after a request."""

    __slots__ = ("_service", "_actor")

    def __init__(self, service: "AclService[ResourceT]", actor: Actor):
        self._service = service
        self._actor = actor

    def can_do_action(self, action: Action, resource: Optional[ResourceT] = None) -> bool:
        """Check if the bound actor may perform ``action`` on ``resource``.

        Args:
            action: Requested action
            resource: Resource instance, or None for checks made before one
                exists (create, list)

        Returns:
            True if any rule of any held role allows the action
        """
        for role in self._actor.roles:
            for rule in self._service.rules_for(role):
                if rule.allows(action, self._actor, resource):
                    return True
        return False

    def ensure_can_do_action(self, action: Action, resource: Optional[ResourceT] = None) -> None:
        """Like ``can_do_action`` but raises on deny.

        Raises:
            AuthorizationDeniedError: If the action is not allowed
        """
        if not self.can_do_action(action, resource):
            raise AuthorizationDeniedError(action, self._service.resource_type)


class AclService(Generic[ResourceT]):
    """Declarative rule table for one protected resource type."""

    def __init__(self, resource_type: Optional[str] = None):
        """
        Initialize an empty rule table.

        Args:
            resource_type: Name of the protected resource, used in error messages
        """
        self.resource_type = resource_type
        self._rules: Dict[Role, List[Rule[ResourceT]]] = {}
        self._lock = threading.Lock()

    def can_do(
        self,
        role: Role,
        actions: Iterable[Action],
        predicate: Optional[Predicate] = None,
    ) -> None:
        """Register a rule for ``role``.

        Args:
            role: Role receiving the grant
            actions: Non-empty collection of actions granted
            predicate: Optional guard taking (resource, actor)

        Raises:
            AclMisconfigurationError: On an unknown role or action, an empty
                action set, a non-callable predicate or a duplicate rule
        """
        try:
            role = Role.parse(role)
            action_set = to_action_set(actions)
        except ValueError as e:
            raise AclMisconfigurationError(str(e)) from e

        if not action_set:
            raise AclMisconfigurationError(f"Empty action set for role {role.value}")
        if predicate is not None and not callable(predicate):
            raise AclMisconfigurationError(f"Predicate for role {role.value} is not callable")

        rule = Rule(role=role, actions=action_set, predicate=predicate)

        with self._lock:
            existing = self._rules.get(role, [])
            if rule in existing:
                raise AclMisconfigurationError(
                    f"Duplicate rule for role {role.value}: {sorted(a.value for a in action_set)}"
                )
            # Replace rather than append; readers never take the lock
            self._rules[role] = existing + [rule]

        logger.debug(
            "Registered %s rule on %s: %s -> %s",
            "guarded" if predicate else "unconditional",
            self.resource_type or "resource",
            role.value,
            ",".join(sorted(a.value for a in action_set)),
        )

    def for_actor(self, actor: Actor) -> AclQuery[ResourceT]:
        """Bind this registry to ``actor``."""
        return AclQuery(self, actor)

    def rules_for(self, role: Role) -> Tuple[Rule[ResourceT], ...]:
        """Rules registered for ``role``; empty for roles with no rules."""
        return tuple(self._rules.get(role, ()))

    @property
    def roles(self) -> List[Role]:
        """Roles with at least one rule, in registration order."""
        return list(self._rules)
