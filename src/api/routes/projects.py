"""Project portfolio routes.

Listing and reading projects is public; changes require an admin token.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from api.routes.auth import require_admin
from core.dependencies import ProjectManagerDep
from models.project import ProjectModel
from schemas.common import MessageResponse
from schemas.project import (
    ProjectCreateRequest,
    ProjectImageInfo,
    ProjectInfo,
    ProjectListResponse,
    ProjectResponse,
    ProjectUpdateRequest,
)

router = APIRouter(prefix="/api/projects", tags=["Projects"])


def _project_to_info(project: ProjectModel) -> ProjectInfo:
    return ProjectInfo(
        id=project.id,
        title=project.title,
        description=project.description,
        category=project.category,
        completion_date=project.completion_date,
        location=project.location,
        images=[
            ProjectImageInfo(
                id=image.id, src=image.src, alt=image.alt, thumbnail=image.thumbnail
            )
            for image in project.images
        ],
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


@router.get("", response_model=ProjectListResponse, summary="List projects")
def list_projects(project_manager: ProjectManagerDep) -> ProjectListResponse:
    projects = project_manager.list_projects()
    return ProjectListResponse(
        count=len(projects), data=[_project_to_info(p) for p in projects]
    )


@router.get("/{project_id}", response_model=ProjectResponse, summary="Get a project")
def get_project(project_id: int, project_manager: ProjectManagerDep) -> ProjectResponse:
    return ProjectResponse(data=_project_to_info(project_manager.get_project(project_id)))


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
)
def create_project(
    req: ProjectCreateRequest,
    project_manager: ProjectManagerDep,
    claims: Dict[str, Any] = Depends(require_admin),
) -> ProjectResponse:
    project = project_manager.create_project(
        title=req.title,
        description=req.description,
        category=req.category,
        completion_date=req.completion_date,
        location=req.location,
        images=req.images,
    )
    return ProjectResponse(
        message="Project created successfully", data=_project_to_info(project)
    )


@router.put("/{project_id}", response_model=ProjectResponse, summary="Update a project")
def update_project(
    project_id: int,
    req: ProjectUpdateRequest,
    project_manager: ProjectManagerDep,
    claims: Dict[str, Any] = Depends(require_admin),
) -> ProjectResponse:
    project = project_manager.update_project(
        project_id,
        images=req.images,
        title=req.title,
        description=req.description,
        category=req.category,
        completion_date=req.completion_date,
        location=req.location,
    )
    return ProjectResponse(
        message="Project updated successfully", data=_project_to_info(project)
    )


@router.delete("/{project_id}", response_model=MessageResponse, summary="Delete a project")
def delete_project(
    project_id: int,
    project_manager: ProjectManagerDep,
    claims: Dict[str, Any] = Depends(require_admin),
) -> MessageResponse:
    # Images cascade with the project, releasing their media references
    project_manager.delete_project(project_id)
    return MessageResponse(message="Project deleted successfully")
