from fastapi import status

from app.system.exceptions.base_exception import BaseHTTPException


class SessionNotFoundException(BaseHTTPException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Session not found"


class InvalidProfileException(BaseHTTPException):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    detail = "Profile is incomplete"


class EmptyQuestionBankException(BaseHTTPException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    detail = "No interview questions are available for this profile"


class SessionClosedException(BaseHTTPException):
    status_code = status.HTTP_409_CONFLICT
    detail = "Session does not accept answers"


class SessionExistsException(BaseHTTPException):
    status_code = status.HTTP_409_CONFLICT
    detail = "Session id is already in use"
