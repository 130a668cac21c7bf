"""
Validation des tokens - délégué au microservice d'authentification
"""

from typing import Optional
import logging
import requests
from fastapi import Header, Request

from app.core.errors import MissingTokenError, TokenRejectedError, AuthServiceUnavailableError

logger = logging.getLogger(__name__)


class TokenValidator:
    """Forwards the caller's Authorization header to the remote auth service.

    Every call is a fresh round-trip: nothing is cached and nothing is retried.
    """

    def __init__(self, validate_url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.validate_url = validate_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def validate(self, authorization: Optional[str]) -> None:
        if not authorization:
            raise MissingTokenError()

        try:
            response = self.session.post(
                self.validate_url,
                json={},
                headers={"Authorization": authorization},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise AuthServiceUnavailableError(f"Auth service call failed: {e}") from e
        except ValueError as e:
            raise AuthServiceUnavailableError(f"Auth service returned a malformed body: {e}") from e

        if not isinstance(data, dict) or data.get("success") is not True:
            raise TokenRejectedError("Auth service rejected the token")

        logger.debug("Token accepted by %s", self.validate_url)

    def close(self):
        self.session.close()


def require_valid_token(request: Request, authorization: Optional[str] = Header(None)) -> None:
    """Dépendance: bloque la route si le token n'est pas validé par le ms auth"""
    request.app.state.token_validator.validate(authorization)
