from app.api.schemas.interview import (
    AnswerResponse,
    AnswerSubmissionResponse,
    FinalReportResponse,
    InterviewAnswerRequest,
    InterviewOptionsResponse,
    InterviewStartRequest,
    InterviewStateResponse,
    QuestionResponse,
)

__all__ = [
    "AnswerResponse",
    "AnswerSubmissionResponse",
    "FinalReportResponse",
    "InterviewAnswerRequest",
    "InterviewOptionsResponse",
    "InterviewStartRequest",
    "InterviewStateResponse",
    "QuestionResponse",
]
