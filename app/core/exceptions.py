class InterviewError(Exception):
    """Base class for errors raised by the interview core."""


class InvalidProfileError(InterviewError):
    def __init__(self, missing_fields: list[str]):
        self.missing_fields = missing_fields
        super().__init__(f"Profile is missing required fields: {', '.join(missing_fields)}")


class EmptyQuestionBankError(InterviewError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"No questions available for session {session_id}")


class SessionStateError(InterviewError):
    def __init__(self, session_id: str, status: str):
        self.session_id = session_id
        self.status = status
        super().__init__(f"Session {session_id} does not accept answers in state '{status}'")


class SessionNotFoundError(InterviewError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session {session_id} not found")


class SessionExistsError(InterviewError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session {session_id} already exists")
