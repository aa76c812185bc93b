# controller/resume_controller.py
from typing import Any, Dict
from fastapi import APIRouter, Depends
from controller.controller_dependencies import (
    get_site_config_service,
    json_body,
    require_admin,
)
from model.api import ResumeResponse, ResumeUpdateResponse
from service.site_config_service import SiteConfigService
from util.constants import InternalURIs

resume_router = APIRouter(tags=["admin-resume"])


@resume_router.get(InternalURIs.ADMIN_RESUME, response_model=ResumeResponse)
async def get_resume(
    service: SiteConfigService = Depends(get_site_config_service),
) -> ResumeResponse:
    return ResumeResponse(resume=await service.get_resume())


@resume_router.put(
    InternalURIs.ADMIN_RESUME,
    response_model=ResumeUpdateResponse,
    dependencies=[Depends(require_admin)],
)
async def update_resume(
    payload: Any = Depends(json_body),
    service: SiteConfigService = Depends(get_site_config_service),
) -> ResumeUpdateResponse:
    return ResumeUpdateResponse(success=True, resume=await service.update_resume(payload))


@resume_router.get(InternalURIs.SITE_CONFIG)
async def get_site_config(
    service: SiteConfigService = Depends(get_site_config_service),
) -> Dict[str, Any]:
    return await service.get_site_config()
