"""Database models for ProjectHub."""

from projecthub.db.models.user import User
from projecthub.db.models.project import Project

__all__ = [
    "User",
    "Project",
]
