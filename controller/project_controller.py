# controller/project_controller.py
from typing import Any, Optional
from fastapi import APIRouter, Depends, Query, status
from controller.controller_dependencies import get_project_service, json_body, require_admin
from model.api import ProjectResponse, ProjectsResponse, SuccessResponse
from service.project_service import ProjectService
from util.constants import InternalURIs

project_router = APIRouter(tags=["admin-projects"])


@project_router.get(InternalURIs.ADMIN_PROJECTS, response_model=ProjectsResponse)
async def list_projects(
    service: ProjectService = Depends(get_project_service),
) -> ProjectsResponse:
    return ProjectsResponse(projects=await service.list_projects())


@project_router.post(
    InternalURIs.ADMIN_PROJECTS,
    response_model=ProjectResponse,
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_admin)],
)
async def add_project(
    payload: Any = Depends(json_body),
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    return ProjectResponse(success=True, project=await service.create(payload))


@project_router.put(
    InternalURIs.ADMIN_PROJECTS,
    response_model=ProjectResponse,
    dependencies=[Depends(require_admin)],
)
async def update_project(
    payload: Any = Depends(json_body),
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    return ProjectResponse(success=True, project=await service.update(payload))


@project_router.delete(
    InternalURIs.ADMIN_PROJECTS,
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_project(
    id: Optional[str] = Query(default=None),
    service: ProjectService = Depends(get_project_service),
) -> SuccessResponse:
    await service.delete(id or "")
    return SuccessResponse(success=True)
