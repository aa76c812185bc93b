# service/project_service.py
import json
import logging
from typing import Any, Dict, List
from pydantic import ValidationError
from config.defaults import DEFAULT_PROJECTS
from model.project import Project, ProjectUpdate, fill_stored_defaults
from repository.document_store import TieredDocumentStore
from util.constants import DocumentNames
from util.enums import ErrorMessage
from util.errors import AppError, StorageError

logger = logging.getLogger(__name__)


def _error_details(e: ValidationError) -> List[Dict[str, Any]]:
    return json.loads(e.json(include_url=False))


class ProjectService:
    """
    CRUD over the single projects.json document.
    Every mutation is read-modify-write of the whole list; concurrent writers
    race and the last one wins.
    """

    def __init__(self, store: TieredDocumentStore) -> None:
        self._store = store

    async def list_projects(self) -> List[Project]:
        raw = await self._store.read(DocumentNames.PROJECTS, DEFAULT_PROJECTS)
        if not isinstance(raw, list):
            logger.warning("projects.read.bad_shape type=%s", type(raw).__name__)
            raw = [dict(p) for p in DEFAULT_PROJECTS]

        out: List[Project] = []
        for entry in raw:
            if not isinstance(entry, dict):
                continue
            try:
                out.append(Project.model_validate(fill_stored_defaults(entry)))
            except ValidationError:
                # Skip malformed entries instead of failing the whole list
                logger.warning("projects.read.skip_invalid id=%s", entry.get("id"))
        return out

    async def create(self, payload: Any) -> Project:
        try:
            project = Project.model_validate(payload)
        except ValidationError as e:
            raise AppError.of(ErrorMessage.INVALID_PROJECT, _error_details(e))

        projects = await self.list_projects()
        if any(p.id == project.id for p in projects):
            raise AppError.of(ErrorMessage.PROJECT_EXISTS)

        projects.append(project)
        await self._save(projects)
        logger.info("projects.created id=%s", project.id)
        return project

    async def update(self, payload: Any) -> Project:
        if not isinstance(payload, dict) or not payload.get("id"):
            raise AppError.of(ErrorMessage.PROJECT_ID_REQUIRED)

        project_id = payload["id"]
        changes_in = {k: v for k, v in payload.items() if k != "id"}
        try:
            changes = ProjectUpdate.model_validate(changes_in).model_dump(
                exclude_unset=True
            )
        except ValidationError as e:
            raise AppError.of(ErrorMessage.INVALID_PROJECT, _error_details(e))

        projects = await self.list_projects()
        idx = next((i for i, p in enumerate(projects) if p.id == project_id), -1)
        if idx == -1:
            raise AppError.of(ErrorMessage.PROJECT_NOT_FOUND)

        if changes.get("skills") is None:
            changes.pop("skills", None)
        merged = {**projects[idx].model_dump(), **changes}
        try:
            projects[idx] = Project.model_validate(merged)
        except ValidationError as e:
            raise AppError.of(ErrorMessage.INVALID_PROJECT, _error_details(e))

        await self._save(projects)
        logger.info("projects.updated id=%s fields=%s", project_id, ",".join(sorted(changes)))
        return projects[idx]

    async def delete(self, project_id: str) -> None:
        if not project_id:
            raise AppError.of(ErrorMessage.PROJECT_ID_REQUIRED)

        projects = await self.list_projects()
        remaining = [p for p in projects if p.id != project_id]
        if len(remaining) == len(projects):
            raise AppError.of(ErrorMessage.PROJECT_NOT_FOUND)

        await self._save(remaining)
        logger.info("projects.deleted id=%s", project_id)

    async def _save(self, projects: List[Project]) -> None:
        doc = [p.model_dump(exclude_none=True) for p in projects]
        try:
            await self._store.write(DocumentNames.PROJECTS, doc)
        except StorageError as e:
            logger.error("projects.save.error err=%s", e)
            raise AppError.of(ErrorMessage.STORAGE_FAILED)
