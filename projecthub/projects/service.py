"""Project service.

Every operation asks the project policy before touching storage. Reads and
writes of an existing project fetch it first so the ownership rule can see
it; a denied caller never receives the fetched data.
"""

from typing import List, Optional, Tuple

from projecthub.api.schemas.project import ProjectCreate, ProjectUpdate
from projecthub.core.acl import Action
from projecthub.core.context import RequestContext
from projecthub.core.exceptions import AuthorizationDeniedError
from projecthub.core.logger import bind_context, get_logger
from projecthub.db.models import Project

from .acl import ProjectAclService
from .repository import ProjectRepository, UserRepository

logger = get_logger(__name__)


class ProjectService:
    """
    High-level service for managing projects.

    Handles:
    - Creating projects owned by the acting user
    - Listing and reading projects
    - Updating and deleting projects, subject to ownership
    """

    def __init__(
        self,
        repository: ProjectRepository,
        user_repository: UserRepository,
        acl: ProjectAclService,
    ):
        self.repository = repository
        self.user_repository = user_repository
        self.acl = acl

    def _authorize(self, ctx: RequestContext, action: Action, project: Optional[Project] = None) -> None:
        try:
            self.acl.for_actor(ctx.actor).ensure_can_do_action(action, project)
        except AuthorizationDeniedError:
            bind_context(logger, ctx).warning("denied %s on project", action.value)
            raise

    def create_project(self, ctx: RequestContext, data: ProjectCreate) -> Project:
        log = bind_context(logger, ctx)
        log.info("create_project was called")

        project = Project(**data.model_dump())

        user = self.user_repository.get_by_id(ctx.actor.id)

        self._authorize(ctx, Action.CREATE, project)

        project.owner = user

        log.info("calling ProjectRepository.save")
        return self.repository.save(project)

    def get_projects(self, ctx: RequestContext, limit: int, offset: int) -> Tuple[List[Project], int]:
        log = bind_context(logger, ctx)
        log.info("get_projects was called")

        self._authorize(ctx, Action.LIST)

        log.info("calling ProjectRepository.find_and_count")
        return self.repository.find_and_count(limit=limit, offset=offset)

    def get_project_by_id(self, ctx: RequestContext, project_id: int) -> Project:
        log = bind_context(logger, ctx)
        log.info("get_project_by_id was called")

        log.info("calling ProjectRepository.get_by_id")
        project = self.repository.get_by_id(project_id)

        self._authorize(ctx, Action.READ, project)

        return project

    def update_project(self, ctx: RequestContext, project_id: int, data: ProjectUpdate) -> Project:
        log = bind_context(logger, ctx)
        log.info("update_project was called")

        log.info("calling ProjectRepository.get_by_id")
        project = self.repository.get_by_id(project_id)

        self._authorize(ctx, Action.UPDATE, project)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(project, field, value)

        log.info("calling ProjectRepository.save")
        return self.repository.save(project)

    def delete_project(self, ctx: RequestContext, project_id: int) -> None:
        log = bind_context(logger, ctx)
        log.info("delete_project was called")

        log.info("calling ProjectRepository.get_by_id")
        project = self.repository.get_by_id(project_id)

        self._authorize(ctx, Action.DELETE, project)

        log.info("calling ProjectRepository.remove")
        self.repository.remove(project)
