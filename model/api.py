# model/api.py
from typing import List, Optional
from pydantic import BaseModel, HttpUrl, TypeAdapter, ValidationError, field_validator
from model.project import Project

_HTTP_URL = TypeAdapter(HttpUrl)


class LoginRequest(BaseModel):
    password: Optional[str] = None


class LoginResponse(BaseModel):
    success: bool
    token: str


class VerifyResponse(BaseModel):
    ok: bool


class SuccessResponse(BaseModel):
    success: bool


class ProjectsResponse(BaseModel):
    projects: List[Project]


class ProjectResponse(BaseModel):
    success: bool
    project: Project


class ResumeRequest(BaseModel):
    resume: str

    @field_validator("resume")
    @classmethod
    def _must_be_url(cls, v: str) -> str:
        v = v.strip()
        # Validate as http(s) URL but keep the caller's exact spelling.
        try:
            _HTTP_URL.validate_python(v)
        except ValidationError:
            raise ValueError("Resume link must be a valid URL") from None
        return v


class ResumeResponse(BaseModel):
    resume: str


class ResumeUpdateResponse(BaseModel):
    success: bool
    resume: str


class HealthResponse(BaseModel):
    ok: bool
    storage: List[str]
