"""Project API endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Query, Response, status

from projecthub.api.deps import get_project_service, get_request_context
from projecthub.api.schemas.common import BaseApiResponse, ErrorResponse, PaginationParams
from projecthub.api.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from projecthub.core.context import RequestContext
from projecthub.projects.service import ProjectService

router = APIRouter(
    prefix="/projects",
    tags=["projects"],
    responses={
        401: {"description": "Missing or invalid bearer token"},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)


@router.post("", response_model=BaseApiResponse[ProjectResponse], status_code=status.HTTP_201_CREATED)
def create_project(
    project_data: ProjectCreate,
    ctx: RequestContext = Depends(get_request_context),
    service: ProjectService = Depends(get_project_service),
):
    """Create a project owned by the current user."""
    project = service.create_project(ctx, project_data)
    return BaseApiResponse(data=ProjectResponse.model_validate(project))


@router.get("", response_model=BaseApiResponse[List[ProjectResponse]])
def list_projects(
    pagination: Annotated[PaginationParams, Query()],
    ctx: RequestContext = Depends(get_request_context),
    service: ProjectService = Depends(get_project_service),
):
    """List projects ordered by id."""
    projects, count = service.get_projects(ctx, limit=pagination.limit, offset=pagination.offset)
    return BaseApiResponse(
        data=[ProjectResponse.model_validate(p) for p in projects],
        meta={"count": count},
    )


@router.get("/{project_id}", response_model=BaseApiResponse[ProjectResponse])
def get_project(
    project_id: int,
    ctx: RequestContext = Depends(get_request_context),
    service: ProjectService = Depends(get_project_service),
):
    project = service.get_project_by_id(ctx, project_id)
    return BaseApiResponse(data=ProjectResponse.model_validate(project))


@router.patch("/{project_id}", response_model=BaseApiResponse[ProjectResponse])
def update_project(
    project_id: int,
    project_data: ProjectUpdate,
    ctx: RequestContext = Depends(get_request_context),
    service: ProjectService = Depends(get_project_service),
):
    """Update a project. Only its owner or an admin may do this."""
    project = service.update_project(ctx, project_id, project_data)
    return BaseApiResponse(data=ProjectResponse.model_validate(project))


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: int,
    ctx: RequestContext = Depends(get_request_context),
    service: ProjectService = Depends(get_project_service),
):
    """Delete a project. Only its owner or an admin may do this."""
    service.delete_project(ctx, project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
