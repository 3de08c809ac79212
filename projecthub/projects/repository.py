"""Persistence helpers for projects and their owners."""

from typing import List, Tuple

from sqlalchemy.orm import Session

from projecthub.core.exceptions import ProjectNotFoundError, UserNotFoundError
from projecthub.db.models import Project, User


class ProjectRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, project_id: int) -> Project:
        """Fetch a project with its owner.

        Raises:
            ProjectNotFoundError: If no project has this id
        """
        project = self.db.query(Project).filter(Project.id == project_id).first()
        if not project:
            raise ProjectNotFoundError(project_id)
        return project

    def find_and_count(self, limit: int, offset: int) -> Tuple[List[Project], int]:
        """Return one page of projects and the total number of projects."""
        query = self.db.query(Project)
        total = query.count()
        projects = query.order_by(Project.id).offset(offset).limit(limit).all()
        return projects, total

    def save(self, project: Project) -> Project:
        self.db.add(project)
        self.db.commit()
        self.db.refresh(project)
        return project

    def remove(self, project: Project) -> None:
        self.db.delete(project)
        self.db.commit()


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> User:
        """
        Raises:
            UserNotFoundError: If no user has this id
        """
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise UserNotFoundError(user_id)
        return user
