import pytest

from app.core.engine import InterviewEngine
from app.core.exceptions import InvalidProfileError, SessionStateError
from app.core.models import (
    Evaluation,
    QuestionType,
    SessionStatus,
    UserProfile,
)
from app.core.providers import HeuristicProvider
from app.core.scorer import BASELINE_SCORE, technical_bonus

GOOD_ANSWER = "At the time I had to fix a slow service, so I added an index and the result was a faster API"


class EmptyProvider(HeuristicProvider):
    def select_questions(self, profile):
        return []


class ExplodingProvider(HeuristicProvider):
    def evaluate(self, answer_text, question, profile):
        raise RuntimeError("evaluator down")


def test_create_session_starts_in_progress(engine, asha):
    session = engine.create_session(asha)

    assert session.status is SessionStatus.IN_PROGRESS
    assert session.current_index == 0
    assert session.questions
    assert session.answers == []
    assert not engine.is_completed(session)
    assert engine.get_current_question(session) == session.questions[0]


def test_first_technical_answer_scenario(engine, asha):
    session = engine.create_session(asha)
    question = engine.get_current_question(session)
    answer = "I built a caching layer that reduced latency"

    engine.submit_answer(session, answer)

    assert question.type is QuestionType.TECHNICAL
    record = engine.get_answers(session)[0]
    assert record.question_id == question.id
    assert record.answer_text == answer
    assert record.score >= BASELINE_SCORE + technical_bonus(answer)
    assert record.feedback.strip()
    assert session.current_index == 1


@pytest.mark.parametrize("blank", ["", "   ", "\n\t  ", None, 42, ["an answer"]])
def test_blank_answer_is_a_no_op(engine, asha, blank):
    session = engine.create_session(asha)

    result = engine.submit_answer(session, blank)

    assert result is session
    assert session.current_index == 0
    assert session.answers == []
    assert session.status is SessionStatus.IN_PROGRESS


def test_answering_everything_completes_the_session(engine, asha):
    session = engine.create_session(asha)
    total = len(session.questions)

    for submitted in range(1, total + 1):
        engine.submit_answer(session, GOOD_ANSWER)
        assert len(session.answers) == submitted == session.current_index
        assert engine.is_completed(session) == (submitted == total)

    assert session.status is SessionStatus.COMPLETED
    assert engine.get_current_question(session) is None
    assert [answer.question_id for answer in engine.get_answers(session)] == [q.id for q in session.questions]


def test_completed_session_rejects_answers_without_mutation(engine, asha):
    session = engine.create_session(asha)
    for _ in session.questions:
        engine.submit_answer(session, GOOD_ANSWER)

    with pytest.raises(SessionStateError):
        engine.submit_answer(session, "one more")

    assert len(session.answers) == len(session.questions)
    assert session.current_index == len(session.questions)


@pytest.mark.parametrize(
    "profile,missing",
    [
        (UserProfile(name="", role="QA Engineer", experience_level="Senior (5+ years)"), ["name"]),
        (UserProfile(name="Asha", role="  ", experience_level="Senior (5+ years)"), ["role"]),
        (UserProfile(name=" ", role="", experience_level=""), ["name", "role", "experience_level"]),
    ],
)
def test_invalid_profile_is_rejected(engine, profile, missing):
    with pytest.raises(InvalidProfileError) as exc_info:
        engine.create_session(profile)

    assert exc_info.value.missing_fields == missing


def test_education_is_optional(engine):
    session = engine.create_session(UserProfile(name="Ravi", role="Data Analyst", experience_level="Fresher (0-1 years)"))

    assert session.status is SessionStatus.IN_PROGRESS


def test_unknown_role_still_gives_a_usable_session(engine):
    session = engine.create_session(UserProfile(name="Li", role="Chef", experience_level="Senior (5+ years)"))

    assert session.status is SessionStatus.IN_PROGRESS
    assert len(session.questions) == 3


def test_empty_question_list_makes_session_unusable(asha):
    engine = InterviewEngine(EmptyProvider())

    session = engine.create_session(asha)

    assert session.status is SessionStatus.UNUSABLE
    assert not engine.is_completed(session)
    assert engine.get_current_question(session) is None
    with pytest.raises(SessionStateError):
        engine.submit_answer(session, GOOD_ANSWER)


def test_evaluation_failure_leaves_session_untouched(asha):
    engine = InterviewEngine(ExplodingProvider())
    session = engine.create_session(asha)

    with pytest.raises(RuntimeError):
        engine.submit_answer(session, GOOD_ANSWER)

    assert session.answers == []
    assert session.current_index == 0


def test_get_answers_returns_a_copy(engine, asha):
    session = engine.create_session(asha)
    engine.submit_answer(session, GOOD_ANSWER)

    answers = engine.get_answers(session)

    assert isinstance(answers, tuple)
    assert len(answers) == 1
    session.answers.append(answers[0])
    assert len(answers) == 1


def test_sessions_are_independent(engine, asha):
    first = engine.create_session(asha)
    second = engine.create_session(asha)

    engine.submit_answer(first, GOOD_ANSWER)

    assert first.current_index == 1
    assert second.current_index == 0
    assert second.answers == []


def test_provider_is_swappable(asha):
    class FixedProvider(HeuristicProvider):
        name = "fixed"

        def evaluate(self, answer_text, question, profile):
            return Evaluation(score=7, feedback="Recorded.")

    engine = InterviewEngine(FixedProvider())
    session = engine.create_session(asha)
    engine.submit_answer(session, GOOD_ANSWER)

    assert session.answers[0].score == 7
    assert session.answers[0].feedback == "Recorded."
