# controller/controller_dependencies.py
from functools import lru_cache
from typing import Any, List, Optional
from fastapi import Depends, Header, Request
from fastapi_limiter.depends import RateLimiter
from config.admin_config import AuthConfig, StorageConfig
from config.cache import redis_enabled
from config.settings import settings
from core.credentials import CredentialVerifier
from core.tokens import TokenIssuer, TokenValidator
from repository.document_store import TieredDocumentStore
from service.admin_auth_service import AdminAuthService
from service.project_service import ProjectService
from service.site_config_service import SiteConfigService
from util.enums import ErrorMessage
from util.errors import AppError


@lru_cache
def get_auth_config() -> AuthConfig:
    return AuthConfig.from_settings(settings)


@lru_cache
def get_storage_config() -> StorageConfig:
    return StorageConfig.from_settings(settings)


def get_document_store(
    config: StorageConfig = Depends(get_storage_config),
) -> TieredDocumentStore:
    return TieredDocumentStore.from_config(config)


def get_admin_auth_service(
    config: AuthConfig = Depends(get_auth_config),
) -> AdminAuthService:
    return AdminAuthService(
        CredentialVerifier(config), TokenIssuer(config), TokenValidator(config)
    )


def get_project_service(
    store: TieredDocumentStore = Depends(get_document_store),
) -> ProjectService:
    return ProjectService(store)


def get_site_config_service(
    store: TieredDocumentStore = Depends(get_document_store),
) -> SiteConfigService:
    return SiteConfigService(store)


def require_admin(
    authorization: Optional[str] = Header(default=None),
    auth: AdminAuthService = Depends(get_admin_auth_service),
) -> None:
    auth.require_admin(authorization)


async def json_body(request: Request) -> Any:
    """
    Parsed JSON body, or 400. Declared as a dependency so that it runs after
    require_admin and an unauthenticated caller always sees 401 first.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return await request.json()
    except ValueError:
        raise AppError.of(ErrorMessage.INVALID_BODY)


def login_rate_limit() -> List[Any]:
    # Throttling needs Redis; without it login is unthrottled.
    if not redis_enabled():
        return []
    return [
        Depends(
            RateLimiter(times=settings.RATE_LIMIT_TIMES, seconds=settings.RATE_LIMIT_SECONDS)
        )
    ]
