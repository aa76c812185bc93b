# config/settings.py
import os
import sys
from typing import Optional
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from util.enums import Environment
import logging


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()

_log = logging.getLogger("config.settings")

# SHA-256 hex of the password shipped with the site; override in every deployment.
DEFAULT_ADMIN_PASSWORD_HASH = (
    "581837f0466067924f7e702edfae38844fc40c85e3c1bae9cb82cdca6e86e2fa"
)


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(default=Environment.DEV.value, validation_alias="APP_ENV")
    HOST: str = Field(default="127.0.0.1", validation_alias="HOST")
    PORT: int = Field(default=8000, validation_alias="PORT")

    # CORS & Limits
    ALLOWED_ORIGIN: str = Field(
        default="http://localhost:3000", validation_alias="ALLOWED_ORIGIN"
    )
    TRUST_PROXY: bool = Field(default=False, validation_alias="TRUST_PROXY")
    # Login throttling is only active when Redis is reachable.
    REDIS_URL: Optional[str] = Field(default=None, validation_alias="REDIS_URL")
    RATE_LIMIT_TIMES: int = Field(default=5, validation_alias="RATE_LIMIT_TIMES")
    RATE_LIMIT_SECONDS: int = Field(default=60, validation_alias="RATE_LIMIT_SECONDS")

    # Admin auth
    ADMIN_PASSWORD_HASH: str = Field(
        default=DEFAULT_ADMIN_PASSWORD_HASH, validation_alias="ADMIN_PASSWORD_HASH"
    )
    ADMIN_TOKEN_SECRET: Optional[str] = Field(
        default=None, validation_alias="ADMIN_TOKEN_SECRET"
    )
    ADMIN_TOKEN_TTL_SECONDS: int = Field(
        default=12 * 60 * 60, ge=0, validation_alias="ADMIN_TOKEN_TTL_SECONDS"
    )

    # Admin storage
    ADMIN_DATA_DIR: Optional[str] = Field(default=None, validation_alias="ADMIN_DATA_DIR")
    ADMIN_TMP_DIR_NAME: str = Field(
        default="portfolio-admin-data", validation_alias="ADMIN_TMP_DIR_NAME"
    )
    KV_REST_API_URL: Optional[str] = Field(default=None, validation_alias="KV_REST_API_URL")
    KV_REST_API_TOKEN: Optional[str] = Field(
        default=None, validation_alias="KV_REST_API_TOKEN"
    )
    ADMIN_KV_PREFIX: str = Field(default="portfolio:admin", validation_alias="ADMIN_KV_PREFIX")
    ADMIN_KV_TIMEOUT_SECONDS: float = Field(
        default=10.0, gt=0, validation_alias="ADMIN_KV_TIMEOUT_SECONDS"
    )

    # Logging knobs
    LOGGER_NAME: str = "portfolio-admin"
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_TO_FILE: bool = Field(default=False, validation_alias="LOG_TO_FILE")
    LOG_DIR: str = Field(default="logs", validation_alias="LOG_DIR")
    LOG_FILE_NAME: str = Field(default="app.log", validation_alias="LOG_FILE_NAME")
    LOG_MAX_BYTES: int = Field(
        default=10 * 1024 * 1024, validation_alias="LOG_MAX_BYTES"
    )
    LOG_BACKUP_COUNT: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
