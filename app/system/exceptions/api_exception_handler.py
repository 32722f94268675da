from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.exceptions import (
    EmptyQuestionBankError,
    InterviewError,
    InvalidProfileError,
    SessionExistsError,
    SessionNotFoundError,
    SessionStateError,
)
from app.system.exceptions.base_exception import BaseHTTPException
from app.system.exceptions.interview_exceptions import (
    EmptyQuestionBankException,
    InvalidProfileException,
    SessionClosedException,
    SessionExistsException,
    SessionNotFoundException,
)

_INTERVIEW_ERROR_MAP = {
    InvalidProfileError: InvalidProfileException,
    EmptyQuestionBankError: EmptyQuestionBankException,
    SessionStateError: SessionClosedException,
    SessionNotFoundError: SessionNotFoundException,
    SessionExistsError: SessionExistsException,
}


def to_http_exception(exc: InterviewError) -> BaseHTTPException:
    for error_cls, http_cls in _INTERVIEW_ERROR_MAP.items():
        if isinstance(exc, error_cls):
            return http_cls(str(exc))
    return BaseHTTPException(str(exc))


async def common_exception_handler(request: Request, exc: BaseHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "path": str(request.url)}
    )


async def interview_exception_handler(request: Request, exc: InterviewError) -> JSONResponse:
    return await common_exception_handler(request, to_http_exception(exc))
