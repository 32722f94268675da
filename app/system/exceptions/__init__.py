from app.system.exceptions.api_exception_handler import (
    common_exception_handler,
    interview_exception_handler,
    to_http_exception,
)
from app.system.exceptions.base_exception import BaseHTTPException
from app.system.exceptions.interview_exceptions import (
    EmptyQuestionBankException,
    InvalidProfileException,
    SessionClosedException,
    SessionExistsException,
    SessionNotFoundException,
)

__all__ = [
    "BaseHTTPException",
    "EmptyQuestionBankException",
    "InvalidProfileException",
    "SessionClosedException",
    "SessionExistsException",
    "SessionNotFoundException",
    "common_exception_handler",
    "interview_exception_handler",
    "to_http_exception",
]
