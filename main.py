# main.py
import logging
from fastapi_limiter import FastAPILimiter
import routes
from contextlib import asynccontextmanager
from util.enums import Color, Environment, ErrorMessage
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from config.cache import close_redis, get_redis, redis_enabled
from controller.controller_dependencies import (
    get_auth_config,
    get_document_store,
    get_storage_config,
)
from fastapi.responses import JSONResponse
from model.api import HealthResponse
from repository.document_store import TieredDocumentStore
from util.constants import InternalURIs
from util.errors import AppError
from util.logger import init_logger

logger = logging.getLogger(__name__)


async def _real_ip(request: Request) -> str:
    if settings.TRUST_PROXY:
        fwd = request.headers.get("x-forwarded-for")
        if fwd:
            return fwd.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    init_logger()
    print(f"{Color.GREEN}Initializing...{Color.RESET}")
    # Resolve config once so misconfiguration surfaces at boot.
    get_auth_config()
    storage = get_storage_config()
    logger.info(
        "storage.tiers remote=%s dirs=%s",
        storage.remote_enabled,
        ",".join(str(d) for d in storage.data_dirs),
    )

    if redis_enabled():
        try:
            redis = await get_redis()
            await FastAPILimiter.init(redis, identifier=_real_ip)
        except Exception as e:
            print("Failed to connect to Redis:", e)
            raise
    print(f"{Color.BLUE}Server Started{Color.RESET}")

    try:
        yield
    finally:
        try:
            await close_redis()
        except Exception as e:
            print("Error closing Redis:", e)

        print(f"{Color.RED}Server Shutdown{Color.RESET}")


app: FastAPI = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type", "Accept"],
)


@app.get(InternalURIs.HEALTHZ, response_model=HealthResponse)
async def healthz(
    store: TieredDocumentStore = Depends(get_document_store),
) -> HealthResponse:
    return HealthResponse(ok=True, storage=store.tiers)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    content = {"ok": False, "error": exc.message}
    if exc.details is not None:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=ErrorMessage.INVALID_BODY.value.http_status,
        content={"ok": False, "error": ErrorMessage.INVALID_BODY.value.message},
    )


@app.exception_handler(429)
async def ratelimit_handler(request: Request, exc):
    return JSONResponse(
        status_code=429,
        content={
            "ok": False,
            "error": "rate_limited",
            "message": f"Too many login attempts. Try again in {settings.RATE_LIMIT_SECONDS}s.",
        },
        headers={"Retry-After": str(settings.RATE_LIMIT_SECONDS)},
    )


routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=reload)
