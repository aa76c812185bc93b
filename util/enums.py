# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    BLUE = "\033[34m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    UNAUTHORIZED = ErrorInfo("Unauthorized", status.HTTP_401_UNAUTHORIZED)
    INVALID_PASSWORD = ErrorInfo("Invalid password", status.HTTP_401_UNAUTHORIZED)
    INVALID_BODY = ErrorInfo("Invalid request body", status.HTTP_400_BAD_REQUEST)
    INVALID_PROJECT = ErrorInfo("Invalid project data", status.HTTP_400_BAD_REQUEST)
    PROJECT_ID_REQUIRED = ErrorInfo("Project ID is required", status.HTTP_400_BAD_REQUEST)
    PROJECT_EXISTS = ErrorInfo(
        "Project with this ID already exists", status.HTTP_400_BAD_REQUEST
    )
    PROJECT_NOT_FOUND = ErrorInfo("Project not found", status.HTTP_404_NOT_FOUND)
    INVALID_RESUME = ErrorInfo("Invalid resume link", status.HTTP_400_BAD_REQUEST)
    STORAGE_FAILED = ErrorInfo(
        "Failed to save data", status.HTTP_500_INTERNAL_SERVER_ERROR
    )
