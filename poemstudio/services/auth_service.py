import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError

from poemstudio.config import config
from poemstudio.services.errors import Unauthorized

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated caller of a single request."""

    id: str


class AuthService:
    """Identity gate for tokens issued by the external identity provider.

    This service never signs users in; it only verifies the bearer token a
    request carries and extracts the subject.
    """

    @staticmethod
    def decode_token(token: str) -> Dict[str, Any]:
        options = {"verify_aud": config.JWT_AUDIENCE is not None}
        return jwt.decode(
            token,
            config.JWT_SECRET,
            algorithms=[config.JWT_ALG],
            audience=config.JWT_AUDIENCE,
            issuer=config.JWT_ISSUER,
            options=options,
        )

    @classmethod
    def verify_token(cls, token: str) -> CurrentUser:
        try:
            payload = cls.decode_token(token)
        except JWTError as e:
            logger.debug("Rejected bearer token: %s", e)
            raise Unauthorized("Invalid token.") from e

        user_id = payload.get("sub")
        if not user_id:
            raise Unauthorized("Invalid token.")

        return CurrentUser(id=str(user_id))

    @classmethod
    async def get_current_user(
        cls,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> CurrentUser:
        if credentials is None or not credentials.credentials:
            raise Unauthorized()

        return cls.verify_token(credentials.credentials)
