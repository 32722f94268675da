import asyncio
import time

import pytest

from app.core.engine import InterviewEngine
from app.core.exceptions import EmptyQuestionBankError, SessionExistsError, SessionNotFoundError, SessionStateError
from app.core.models import SessionStatus
from app.core.providers import HeuristicProvider
from app.core.use_case import InterviewUseCase
from app.storages.session_storage import SessionStorage
from app.utils.logger import InterviewLogger


class EmptyProvider(HeuristicProvider):
    def select_questions(self, profile):
        return []


class SlowProvider(HeuristicProvider):
    def evaluate(self, answer_text, question, profile):
        time.sleep(0.05)
        return super().evaluate(answer_text, question, profile)


def test_start_and_answer_are_logged(use_case, asha):
    session = asyncio.run(use_case.start_interview(asha, "session_test"))
    _, answer = asyncio.run(use_case.submit_answer("session_test", "I built a caching layer that reduced latency"))

    assert session.session_id == "session_test"
    assert use_case.storage.get("session_test") is session
    assert answer is not None
    messages = [event["message"] for event in use_case.logger.events_for("session_test")]
    assert "State transition: loading -> in_progress" in messages
    assert any("scored" in message for message in messages)


def test_generated_session_ids(use_case, asha):
    session = asyncio.run(use_case.start_interview(asha))

    assert session.session_id.startswith("session_")


def test_blank_answer_returns_no_record(use_case, asha):
    asyncio.run(use_case.start_interview(asha, "s1"))

    session, answer = asyncio.run(use_case.submit_answer("s1", "   "))

    assert answer is None
    assert session.current_index == 0


def test_unknown_session(use_case):
    with pytest.raises(SessionNotFoundError):
        asyncio.run(use_case.submit_answer("missing", "hello there"))
    with pytest.raises(SessionNotFoundError):
        use_case.summarize("missing")


def test_unusable_session_raises(asha):
    use_case = InterviewUseCase(InterviewEngine(EmptyProvider()), SessionStorage(), InterviewLogger())

    with pytest.raises(EmptyQuestionBankError):
        asyncio.run(use_case.start_interview(asha, "empty"))

    assert use_case.get_session("empty").status is SessionStatus.UNUSABLE


def test_delete_session(use_case, asha):
    asyncio.run(use_case.start_interview(asha, "s1"))

    use_case.delete_session("s1")

    assert use_case.get_session("s1") is None


def test_reused_session_id_is_rejected(use_case, asha):
    original = asyncio.run(use_case.start_interview(asha, "s1"))
    asyncio.run(use_case.submit_answer("s1", "I built a caching layer that reduced latency"))

    with pytest.raises(SessionExistsError):
        asyncio.run(use_case.start_interview(asha, "s1"))

    assert use_case.get_session("s1") is original
    assert original.current_index == 1


def test_concurrent_answers_to_the_last_question(asha):
    use_case = InterviewUseCase(InterviewEngine(SlowProvider()), SessionStorage(), InterviewLogger())
    session = asyncio.run(use_case.start_interview(asha, "s1"))
    for _ in range(len(session.questions) - 1):
        asyncio.run(use_case.submit_answer("s1", "I built a caching layer that reduced latency"))

    async def answer_twice():
        return await asyncio.gather(
            use_case.submit_answer("s1", "We added an index to the slow query"),
            use_case.submit_answer("s1", "We added an index to the slow query"),
            return_exceptions=True,
        )

    results = asyncio.run(answer_twice())

    assert len(session.answers) == len(session.questions) == session.current_index
    assert session.status is SessionStatus.COMPLETED
    assert sum(isinstance(result, SessionStateError) for result in results) == 1


def test_concurrent_answers_advance_one_question_each(asha):
    use_case = InterviewUseCase(InterviewEngine(SlowProvider()), SessionStorage(), InterviewLogger())
    session = asyncio.run(use_case.start_interview(asha, "s1"))

    async def answer_three():
        return await asyncio.gather(*(
            use_case.submit_answer("s1", f"Answer number {n} with some real detail") for n in range(3)
        ))

    results = asyncio.run(answer_three())

    assert [answer.question_id for _, answer in results] == [1, 2, 3]
    assert session.current_index == 3
