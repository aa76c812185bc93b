# core/credentials.py
import hashlib
import hmac
from config.admin_config import AuthConfig


def hash_password(password: str) -> str:
    """Hex SHA-256 of the UTF-8 password; the format ADMIN_PASSWORD_HASH expects."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


class CredentialVerifier:
    """
    Checks a submitted password against the single configured admin hash.

    Never raises and never logs: bad input is just False.
    """

    def __init__(self, config: AuthConfig) -> None:
        self._expected = config.password_hash.encode("utf-8")

    def verify(self, password: object) -> bool:
        if not password or not isinstance(password, str):
            return False

        received = hash_password(password).encode("utf-8")
        # compare_digest wants equal lengths; a mismatch only reveals hash length.
        if len(received) != len(self._expected):
            return False
        return hmac.compare_digest(received, self._expected)
