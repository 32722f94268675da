import asyncio
import uuid
from typing import Dict, Tuple

from app.core.engine import InterviewEngine
from app.core.exceptions import EmptyQuestionBankError, SessionExistsError, SessionNotFoundError
from app.core.models import AnswerRecord, InterviewSession, InterviewSummary, SessionStatus, UserProfile
from app.core.summary import summarize
from app.storages.session_storage import SessionStorage
from app.utils.logger import InterviewLogger


class InterviewUseCase:
    def __init__(self, engine: InterviewEngine, storage: SessionStorage, logger: InterviewLogger | None = None):
        self.engine = engine
        self.storage = storage
        self.logger = logger or InterviewLogger()
        # answers to one session are scored one at a time
        self._locks: Dict[str, asyncio.Lock] = {}

    @staticmethod
    def new_session_id() -> str:
        return f"session_{uuid.uuid4().hex[:8]}"

    async def start_interview(self, profile: UserProfile, session_id: str | None = None) -> InterviewSession:
        if session_id and self.storage.exists(session_id):
            raise SessionExistsError(session_id)
        session_id = session_id or self.new_session_id()
        self.logger.log("Session", f"Starting interview for role '{profile.role}'", {
            "session_id": session_id,
            "experience_level": profile.experience_level,
            "provider": self.engine.provider.name,
        })

        session = await asyncio.to_thread(self.engine.create_session, profile, session_id)
        if self.storage.exists(session_id):
            raise SessionExistsError(session_id)
        self.storage.save(session_id, session)

        if session.status is SessionStatus.UNUSABLE:
            self.logger.log_state_transition(session_id, SessionStatus.LOADING.value, session.status.value, "no questions")
            raise EmptyQuestionBankError(session_id)

        self.logger.log("QuestionBank", f"Loaded {len(session.questions)} questions", {"session_id": session_id})
        self.logger.log_state_transition(session_id, SessionStatus.LOADING.value, session.status.value)
        return session

    async def submit_answer(self, session_id: str, text: str) -> Tuple[InterviewSession, AnswerRecord | None]:
        self._require_session(session_id)
        async with self._lock_for(session_id):
            return await self._submit_answer(session_id, text)

    async def _submit_answer(self, session_id: str, text: str) -> Tuple[InterviewSession, AnswerRecord | None]:
        session = self._require_session(session_id)
        answered_before = len(session.answers)
        status_before = session.status

        await asyncio.to_thread(self.engine.submit_answer, session, text)

        if len(session.answers) == answered_before:
            self.logger.log("Session", "Blank answer ignored", {"session_id": session_id})
            return session, None

        answer = session.answers[-1]
        self.logger.log("Evaluator", f"Question {answer.question_id} scored {answer.score}/10", {
            "session_id": session_id,
            "question_id": answer.question_id,
            "score": answer.score,
        })
        if session.status is not status_before:
            self.logger.log_state_transition(session_id, status_before.value, session.status.value, "last question answered")
        return session, answer

    def summarize(self, session_id: str) -> Tuple[InterviewSession, InterviewSummary]:
        session = self._require_session(session_id)
        summary = summarize(session)
        self.logger.log("Summary", f"Summary requested: {summary.overall_rating}", {
            "session_id": session_id,
            "average_score": summary.average_score,
        })
        return session, summary

    def get_session(self, session_id: str) -> InterviewSession | None:
        return self.storage.get(session_id)

    def delete_session(self, session_id: str) -> None:
        self.storage.delete(session_id)
        self._locks.pop(session_id, None)
        self.logger.log("Session", "Session discarded", {"session_id": session_id})

    def _lock_for(self, session_id: str) -> asyncio.Lock:
        lock = self._locks.get(session_id)
        if lock is None:
            lock = self._locks[session_id] = asyncio.Lock()
        return lock

    def _require_session(self, session_id: str) -> InterviewSession:
        session = self.storage.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session
