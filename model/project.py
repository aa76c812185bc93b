# model/project.py
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator
from config.defaults import DEFAULT_PROJECT_IMAGE


def normalize_src(src: str) -> str:
    return src if src.startswith("/") else f"/{src}"


class ProjectSkills(BaseModel):
    frontend: List[Any] = Field(default_factory=list)
    backend: List[Any] = Field(default_factory=list)


class Project(BaseModel):
    id: str = Field(min_length=1)
    category: str
    title: str
    src: str
    screenshots: List[str]
    skills: ProjectSkills
    github: Optional[str] = None
    live: str
    content: str

    @field_validator("src")
    @classmethod
    def _src_is_rooted(cls, v: str) -> str:
        return normalize_src(v)


class ProjectUpdate(BaseModel):
    """Partial project for PUT; only fields present in the body are applied."""

    category: Optional[str] = None
    title: Optional[str] = None
    src: Optional[str] = None
    screenshots: Optional[List[str]] = None
    skills: Optional[ProjectSkills] = None
    github: Optional[str] = None
    live: Optional[str] = None
    content: Optional[str] = None

    @field_validator("src")
    @classmethod
    def _src_is_rooted(cls, v: Optional[str]) -> Optional[str]:
        return normalize_src(v) if v is not None else v


def fill_stored_defaults(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Older stored entries may lack image, skills, screenshots or content."""
    return {
        **raw,
        "src": raw.get("src") or DEFAULT_PROJECT_IMAGE,
        "skills": raw.get("skills") or {"frontend": [], "backend": []},
        "screenshots": raw.get("screenshots") or [],
        "content": raw.get("content") or "",
    }
