from typing import Dict, Optional

from fastapi import HTTPException, status


class ActionError(HTTPException):
    """An HTTP error carrying a stable, machine-readable code.

    Rendered by FastAPI as ``{"detail": {"code": ..., "message": ...}}``.
    """

    code: str = "INTERNAL_SERVER_ERROR"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(
            status_code=type(self).status_code,
            detail={"code": self.code, "message": message},
            headers=headers
        )
        self.message = message


class Unauthorized(ActionError):
    code = "UNAUTHORIZED"
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "You must be signed in to perform this action."):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class NotFound(ActionError):
    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
