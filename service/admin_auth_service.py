# service/admin_auth_service.py
import logging
from typing import Any, Optional
from pydantic import ValidationError
from core.credentials import CredentialVerifier
from core.tokens import TokenIssuer, TokenValidator
from model.api import LoginRequest, LoginResponse
from util.enums import ErrorMessage
from util.errors import AppError

logger = logging.getLogger(__name__)


class AdminAuthService:
    """
    Password login -> signed token; token check for every admin mutation.
    Nothing here logs the password, its hash or the token.
    """

    def __init__(
        self,
        verifier: CredentialVerifier,
        issuer: TokenIssuer,
        validator: TokenValidator,
    ) -> None:
        self._verifier = verifier
        self._issuer = issuer
        self._validator = validator

    def login(self, payload: Any) -> LoginResponse:
        try:
            password = LoginRequest.model_validate(payload).password
        except ValidationError:
            password = None

        if not self._verifier.verify(password):
            logger.warning("auth.login.rejected")
            raise AppError.of(ErrorMessage.INVALID_PASSWORD)

        logger.info("auth.login.ok")
        return LoginResponse(success=True, token=self._issuer.issue())

    def require_admin(self, authorization: Optional[str]) -> None:
        if not self._validator.verify_request(authorization):
            logger.info("auth.token.rejected")
            raise AppError.of(ErrorMessage.UNAUTHORIZED)
