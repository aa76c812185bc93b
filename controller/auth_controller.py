# controller/auth_controller.py
from typing import Any
from fastapi import APIRouter, Depends, status
from controller.controller_dependencies import (
    get_admin_auth_service,
    json_body,
    login_rate_limit,
    require_admin,
)
from model.api import LoginResponse, VerifyResponse
from service.admin_auth_service import AdminAuthService
from util.constants import InternalURIs

auth_router = APIRouter(tags=["admin-auth"])


@auth_router.post(
    InternalURIs.ADMIN_AUTH,
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    dependencies=login_rate_limit(),
)
async def login(
    payload: Any = Depends(json_body),
    service: AdminAuthService = Depends(get_admin_auth_service),
) -> LoginResponse:
    return service.login(payload)


@auth_router.get(
    InternalURIs.ADMIN_VERIFY,
    response_model=VerifyResponse,
    dependencies=[Depends(require_admin)],
)
async def verify_token() -> VerifyResponse:
    return VerifyResponse(ok=True)
