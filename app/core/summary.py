from typing import Dict, Iterable, Optional

from app.core.models import AnswerRecord, InterviewSession, InterviewSummary, QuestionType

RATING_BANDS = (
    (8.0, "Excellent"),
    (6.0, "Good"),
    (4.0, "Fair"),
    (0.0, "Needs Improvement"),
)


def _average(scores: Iterable[int]) -> Optional[float]:
    values = list(scores)
    if not values:
        return None
    return round(sum(values) / len(values), 1)


def rating_for(average: float) -> str:
    for threshold, label in RATING_BANDS:
        if average >= threshold:
            return label
    return RATING_BANDS[-1][1]


def summarize(session: InterviewSession) -> InterviewSummary:
    """Aggregate the answers recorded so far; partial sessions are allowed."""
    answers = list(session.answers)
    types: Dict[int, QuestionType] = {question.id: question.type for question in session.questions}

    if not answers:
        return InterviewSummary(
            answered=0,
            total_questions=len(session.questions),
            average_score=0.0,
            behavioral_average=None,
            technical_average=None,
            overall_rating="Not Started",
        )

    average = _average(answer.score for answer in answers)
    # first occurrence wins on ties
    strongest: AnswerRecord = max(answers, key=lambda answer: answer.score)
    weakest: AnswerRecord = min(answers, key=lambda answer: answer.score)

    return InterviewSummary(
        answered=len(answers),
        total_questions=len(session.questions),
        average_score=average,
        behavioral_average=_average(
            answer.score for answer in answers if types.get(answer.question_id) is QuestionType.BEHAVIORAL
        ),
        technical_average=_average(
            answer.score for answer in answers if types.get(answer.question_id) is QuestionType.TECHNICAL
        ),
        overall_rating=rating_for(average),
        strongest_question_id=strongest.question_id,
        weakest_question_id=weakest.question_id,
    )
