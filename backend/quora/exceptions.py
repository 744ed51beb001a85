"""
Error taxonomy for the question service.

Every error carries a stable code and a human-readable message. The service
layer raises them; quora_error_handler renders them as {"code", "message"}.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class QuoraError(Exception):
    """Base error raised by the service layer"""

    code = "QUORA-000"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class Unauthenticated(QuoraError):
    """No session matches the supplied access token"""

    code = "ATHR-001"
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "User has not signed in"):
        super().__init__(message)


class SessionExpired(QuoraError):
    """The session exists but has been signed out"""

    code = "ATHR-002"
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, action: str = "continue"):
        self.action = action
        super().__init__(f"User is signed out.Sign in first to {action}")


class Forbidden(QuoraError):
    code = "ATHR-003"
    status_code = status.HTTP_403_FORBIDDEN


class QuestionNotFound(QuoraError):
    code = "QUES-001"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Entered question uuid does not exist"):
        super().__init__(message)


class UserNotFound(QuoraError):
    code = "USR-001"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "User with entered uuid whose question details are to be seen does not exist"):
        super().__init__(message)


async def quora_error_handler(request: Request, exc: QuoraError) -> JSONResponse:
    logger.warning("%s %s -> %s %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": exc.code, "message": exc.message},
    )
