import uuid
from typing import Generator, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from projecthub.core.acl import Actor
from projecthub.core.context import RequestContext
from projecthub.core.security import decode_access_token
from projecthub.db.models import User
from projecthub.db.session import SessionLocal
from projecthub.projects.acl import ProjectAclService, get_project_acl
from projecthub.projects.repository import ProjectRepository, UserRepository
from projecthub.projects.service import ProjectService

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator:
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_actor(
    db: Session = Depends(get_db),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Actor:
    """Resolve the acting identity from the bearer token.

    The token must belong to an existing, active user. Roles come from the
    user record so a role change takes effect without reissuing tokens.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not credentials:
        raise credentials_exception

    actor = decode_access_token(credentials.credentials)
    if actor is None:
        raise credentials_exception

    user = db.query(User).filter(User.id == actor.id).first()
    if not user or not user.is_active:
        raise credentials_exception

    try:
        return user.to_actor()
    except ValueError:
        # Stored role this deployment does not know
        raise credentials_exception from None


def get_request_context(
    request: Request,
    actor: Actor = Depends(get_current_actor),
) -> RequestContext:
    return RequestContext(
        actor=actor,
        request_id=request.headers.get("X-Request-ID") or str(uuid.uuid4()),
        url=str(request.url),
        ip=request.client.host if request.client else None,
    )


def get_project_service(
    db: Session = Depends(get_db),
    acl: ProjectAclService = Depends(get_project_acl),
) -> ProjectService:
    return ProjectService(ProjectRepository(db), UserRepository(db), acl)
