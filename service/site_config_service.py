# service/site_config_service.py
import copy
import json
import logging
from typing import Any, Dict
from pydantic import ValidationError
from config.defaults import DEFAULT_SITE_CONFIG
from model.api import ResumeRequest
from repository.document_store import TieredDocumentStore
from util.constants import DocumentNames
from util.enums import ErrorMessage
from util.errors import AppError, StorageError

logger = logging.getLogger(__name__)


class SiteConfigService:
    """Resume link and other site-wide settings kept in config.json."""

    def __init__(self, store: TieredDocumentStore) -> None:
        self._store = store

    async def _stored(self) -> Dict[str, Any]:
        raw = await self._store.read(
            DocumentNames.CONFIG, {"resume": DEFAULT_SITE_CONFIG["resume"]}
        )
        if not isinstance(raw, dict):
            logger.warning("config.read.bad_shape type=%s", type(raw).__name__)
            return {}
        return raw

    async def get_resume(self) -> str:
        resume = (await self._stored()).get("resume")
        return resume if isinstance(resume, str) else DEFAULT_SITE_CONFIG["resume"]

    async def update_resume(self, payload: Any) -> str:
        try:
            resume = ResumeRequest.model_validate(payload).resume
        except ValidationError as e:
            raise AppError.of(
                ErrorMessage.INVALID_RESUME, json.loads(e.json(include_url=False))
            )

        doc = await self._stored()
        doc["resume"] = resume
        try:
            await self._store.write(DocumentNames.CONFIG, doc)
        except StorageError as e:
            logger.error("config.save.error err=%s", e)
            raise AppError.of(ErrorMessage.STORAGE_FAILED)
        logger.info("config.resume.updated")
        return resume

    async def get_site_config(self) -> Dict[str, Any]:
        """Defaults overlaid with whatever config.json holds; stored keys win."""
        return {**copy.deepcopy(DEFAULT_SITE_CONFIG), **(await self._stored())}
