from typing import List, Tuple

from app.core.models import QuestionRecord, QuestionType
from app.core.scorer import (
    LENGTH_BONUS_STEPS,
    SHORT_ANSWER_WORDS,
    STAR_MARKERS,
    star_components,
    technical_signals,
    word_count,
)

STRONG_BAND_MIN = 8
MIXED_BAND_MIN = 5

_STRONG = {
    QuestionType.BEHAVIORAL: (
        "Excellent answer on {category}. Your story was clear and well structured, "
        "and it shows the impact of what you did."
    ),
    QuestionType.TECHNICAL: (
        "Excellent answer on {category}. You explained the technical details with confidence "
        "and backed them with concrete tools and concepts."
    ),
}

_MIXED = {
    QuestionType.BEHAVIORAL: (
        "Good start on {category}. To make it stronger, walk through the situation, "
        "what you had to do, the actions you took and the result you achieved."
    ),
    QuestionType.TECHNICAL: (
        "Good start on {category}. Go a step deeper: name the specific technologies, "
        "trade-offs and measurable outcomes involved."
    ),
}

_WEAK = {
    QuestionType.BEHAVIORAL: (
        "Your answer on {category} needs more detail. Pick one real example and describe it "
        "using the STAR method: Situation, Task, Action, Result."
    ),
    QuestionType.TECHNICAL: (
        "Your answer on {category} needs more depth. Explain how you would approach the problem, "
        "which tools you would use and why."
    ),
}


def compose_feedback(answer_text: str, question: QuestionRecord, score: int) -> str:
    if score >= STRONG_BAND_MIN:
        templates = _STRONG
    elif score >= MIXED_BAND_MIN:
        templates = _MIXED
    else:
        templates = _WEAK
    category = question.category.strip() or question.type.value
    message = templates[QuestionType(question.type)].format(category=category.lower())
    if word_count(answer_text) < SHORT_ANSWER_WORDS:
        message += " Aim for at least a few full sentences."
    return message


def compose_highlights(answer_text: str, question: QuestionRecord, score: int) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Return (strengths, improvements) observations about an answer."""
    strengths: List[str] = []
    improvements: List[str] = []

    words = word_count(answer_text)
    substantial_words = LENGTH_BONUS_STEPS[0][0]
    if words >= substantial_words:
        strengths.append("Gave a detailed, substantial answer")
    elif words < SHORT_ANSWER_WORDS:
        improvements.append("Expand the answer into a few complete sentences")
    else:
        improvements.append("Add more detail and a concrete example")

    if any(character.isdigit() for character in answer_text):
        strengths.append("Used concrete numbers to quantify the work")
    elif score < STRONG_BAND_MIN:
        improvements.append("Quantify the outcome with numbers where possible")

    if QuestionType(question.type) is QuestionType.BEHAVIORAL:
        found = star_components(answer_text)
        if len(found) == len(STAR_MARKERS):
            strengths.append("Followed the STAR structure end to end")
        elif found:
            strengths.append(f"Covered the {', '.join(found)} of the story")
        missing = [component for component in STAR_MARKERS if component not in found]
        if missing:
            improvements.append(f"Describe the {', '.join(missing)} more explicitly")
    else:
        signals = technical_signals(answer_text)
        if signals:
            strengths.append("Referenced relevant technical concepts")
        else:
            improvements.append("Name the specific tools, technologies or techniques involved")

    return tuple(strengths), tuple(improvements)
