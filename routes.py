# routes.py
from fastapi import FastAPI
from controller.auth_controller import auth_router
from controller.project_controller import project_router
from controller.resume_controller import resume_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(auth_router)
    app.include_router(project_router)
    app.include_router(resume_router)
