"""Access policy for projects.

- ADMIN may do anything.
- USER may create, list and read any project.
- USER may update and delete only the projects they own.
"""

from functools import lru_cache

from projecthub.core.acl import AclQuery, AclService, Action, Actor, Role
from projecthub.db.models import Project


def is_project_owner(project: Project, actor: Actor) -> bool:
    """Check if ``actor`` owns ``project``.

    The project must have its owner loaded; an ownerless project is a caller
    error and raises AttributeError.
    """
    return project.owner.id == actor.id


class ProjectAclService:
    """Rule table for the project resource."""

    def __init__(self):
        self.acl: AclService[Project] = AclService("project")
        self.acl.can_do(Role.ADMIN, [Action.MANAGE])
        self.acl.can_do(Role.USER, [Action.CREATE, Action.LIST, Action.READ])
        self.acl.can_do(Role.USER, [Action.UPDATE, Action.DELETE], is_project_owner)

    def for_actor(self, actor: Actor) -> AclQuery[Project]:
        return self.acl.for_actor(actor)


@lru_cache
def get_project_acl() -> ProjectAclService:
    """Process-wide project policy, built on first use."""
    return ProjectAclService()
