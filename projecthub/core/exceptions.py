"""Domain exceptions for ProjectHub.

The API layer maps these onto HTTP responses in ``projecthub.api.main``.
"""

from typing import Any, Optional


class ProjectHubError(Exception):
    """Base class for all ProjectHub errors."""


class AuthorizationDeniedError(ProjectHubError):
    """Raised when an actor is not allowed to perform an action."""

    def __init__(self, action: Any, resource_type: Optional[str] = None):
        action_name = getattr(action, "value", action)
        if resource_type:
            message = f"Permission denied: cannot {action_name} {resource_type}"
        else:
            message = f"Permission denied: cannot {action_name}"
        super().__init__(message)
        self.action = action
        self.resource_type = resource_type


class AclMisconfigurationError(ProjectHubError):
    """Raised at startup when a registry is given a malformed rule."""


class NotFoundError(ProjectHubError):
    """Raised when a requested record does not exist."""

    entity = "Record"

    def __init__(self, record_id: Any):
        super().__init__(f"{self.entity} not found: {record_id}")
        self.record_id = record_id


class ProjectNotFoundError(NotFoundError):
    entity = "Project"


class UserNotFoundError(NotFoundError):
    entity = "User"
