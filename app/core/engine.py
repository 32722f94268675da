import uuid
from typing import Tuple

from app.core.exceptions import InvalidProfileError, SessionStateError
from app.core.models import (
    AnswerRecord,
    InterviewSession,
    QuestionRecord,
    SessionStatus,
    UserProfile,
)
from app.core.providers import EvaluationProvider, HeuristicProvider


class InterviewEngine:
    """Drives interview sessions through Loading -> InProgress -> Completed.

    The engine keeps no per-session state of its own; everything lives on the
    ``InterviewSession`` it is handed, so one engine can serve many sessions.
    """

    def __init__(self, provider: EvaluationProvider | None = None):
        self.provider = provider or HeuristicProvider()

    def create_session(self, profile: UserProfile, session_id: str | None = None) -> InterviewSession:
        """Validate the profile and load questions.

        Raises ``InvalidProfileError`` when name, role or experience level is
        missing. A session whose question list comes back empty is returned in
        the ``UNUSABLE`` state.
        """
        self.validate_profile(profile)
        session = InterviewSession(session_id=session_id or f"session_{uuid.uuid4().hex[:8]}", profile=profile)

        questions = tuple(self.provider.select_questions(profile))
        if not questions:
            session.status = SessionStatus.UNUSABLE
            return session

        session.questions = questions
        session.current_index = 0
        session.status = SessionStatus.IN_PROGRESS
        return session

    @staticmethod
    def validate_profile(profile: UserProfile) -> None:
        required = {
            "name": profile.name,
            "role": profile.role,
            "experience_level": profile.experience_level,
        }
        missing = [field for field, value in required.items() if not isinstance(value, str) or not value.strip()]
        if missing:
            raise InvalidProfileError(missing)

    @staticmethod
    def get_current_question(session: InterviewSession) -> QuestionRecord | None:
        if session.status is not SessionStatus.IN_PROGRESS:
            return None
        return session.questions[session.current_index]

    def submit_answer(self, session: InterviewSession, text: str) -> InterviewSession:
        """Score the answer to the current question and advance.

        Blank input leaves the session untouched. Raises ``SessionStateError``
        if the session is not in progress.
        """
        if session.status is not SessionStatus.IN_PROGRESS:
            raise SessionStateError(session.session_id, session.status.value)
        if not isinstance(text, str) or not text.strip():
            return session

        question = session.questions[session.current_index]
        evaluation = self.provider.evaluate(text, question, session.profile)
        session.answers.append(
            AnswerRecord(
                question_id=question.id,
                answer_text=text,
                score=evaluation.score,
                feedback=evaluation.feedback,
                strengths=evaluation.strengths,
                improvements=evaluation.improvements,
            )
        )
        session.current_index += 1
        if session.current_index == len(session.questions):
            session.status = SessionStatus.COMPLETED
        return session

    @staticmethod
    def is_completed(session: InterviewSession) -> bool:
        return session.completed

    @staticmethod
    def get_answers(session: InterviewSession) -> Tuple[AnswerRecord, ...]:
        return tuple(session.answers)
