import math
import re
from typing import Dict, Tuple

from app.core.models import QuestionType

MIN_SCORE = 1
MAX_SCORE = 10
BASELINE_SCORE = 4

SHORT_ANSWER_WORDS = 6
SHORT_ANSWER_PENALTY = 2
# (minimum words, bonus); the last step is the cap for long answers
LENGTH_BONUS_STEPS: Tuple[Tuple[int, int], ...] = ((25, 1), (60, 2))

STAR_CUE_WEIGHT = 0.75
TECHNICAL_SIGNAL_WEIGHT = 0.75
TECHNICAL_SIGNAL_CAP = 4
SPECIFICITY_BONUS = 0.5

STAR_MARKERS: Dict[str, Tuple[str, ...]] = {
    "situation": (
        "situation", "context", "background", "at the time", "when i was", "we were", "in my previous",
    ),
    "task": (
        "task", "goal", "objective", "responsib", "my role", "needed to", "had to", "challenge",
    ),
    "action": (
        "action", "i decided", "i implemented", "i built", "i led", "i created", "i organized",
        "i designed", "i worked", "i took", "i started", "so i",
    ),
    "result": (
        "result", "outcome", "reduced", "increased", "improved", "saved", "learned", "led to",
        "in the end", "achiev",
    ),
}

TECHNICAL_MARKERS: Tuple[str, ...] = (
    "api", "rest", "graphql", "http", "database", "sql", "nosql", "postgres", "mysql", "mongo",
    "redis", "cach", "latency", "throughput", "index", "query", "queue", "kafka", "microservice",
    "architecture", "scalab", "load balanc", "docker", "kubernetes", "container", "terraform",
    "aws", "azure", "gcp", "cloud", "ci/cd", "pipeline", "deploy", "monitor", "logging",
    "python", "java", "javascript", "typescript", "react", "angular", "vue", "node", "css", "html",
    "algorithm", "complexity", "data structure", "hash", "thread", "async", "concurren",
    "unit test", "integration test", "test coverage", "automat", "selenium", "regression",
    "git", "refactor", "framework", "model", "feature engineering", "pandas",
    "dashboard", "tableau", "excel", "metric", "a/b test", "kpi", "wireframe", "prototype",
    "figma", "usability", "accessib", "seo", "conversion", "funnel", "segment",
)

# Word stems that also match longer inflections (caching, deployed, monitoring).
# Every other marker must match whole words; single words may take a plural ending.
STEM_MARKERS = frozenset({
    "responsib", "achiev",
    "cach", "index", "scalab", "load balanc", "deploy", "monitor", "thread", "hash", "concurren",
    "unit test", "integration test", "a/b test", "automat", "refactor", "accessib", "segment",
})

_WORD_PATTERN = re.compile(r"\S+")
_DIGIT_PATTERN = re.compile(r"\d")


def _compile(markers):
    compiled = []
    for marker in dict.fromkeys(markers):
        if marker in STEM_MARKERS:
            suffix = ""
        elif marker.isalpha():
            suffix = r"(?:s|es)?\b"
        else:
            suffix = r"\b"
        compiled.append((marker, re.compile(r"\b" + re.escape(marker) + suffix)))
    return tuple(compiled)


_STAR_PATTERNS = {component: _compile(markers) for component, markers in STAR_MARKERS.items()}
_TECHNICAL_PATTERNS = _compile(TECHNICAL_MARKERS)


def word_count(answer_text: str) -> int:
    return len(_WORD_PATTERN.findall(answer_text))


def star_components(answer_text: str) -> Tuple[str, ...]:
    """STAR components (situation, task, action, result) with at least one cue in the text."""
    lowered = answer_text.lower()
    return tuple(
        component
        for component, patterns in _STAR_PATTERNS.items()
        if any(pattern.search(lowered) for _, pattern in patterns)
    )


def technical_signals(answer_text: str) -> Tuple[str, ...]:
    """Distinct technical markers found in the text, in table order."""
    lowered = answer_text.lower()
    return tuple(marker for marker, pattern in _TECHNICAL_PATTERNS if pattern.search(lowered))


def length_adjustment(answer_text: str) -> int:
    words = word_count(answer_text)
    if words < SHORT_ANSWER_WORDS:
        return -SHORT_ANSWER_PENALTY
    bonus = 0
    for min_words, step_bonus in LENGTH_BONUS_STEPS:
        if words >= min_words:
            bonus = step_bonus
    return bonus


def star_bonus(answer_text: str) -> float:
    return STAR_CUE_WEIGHT * len(star_components(answer_text))


def technical_bonus(answer_text: str) -> float:
    return TECHNICAL_SIGNAL_WEIGHT * min(len(technical_signals(answer_text)), TECHNICAL_SIGNAL_CAP)


def specificity_bonus(answer_text: str) -> float:
    return SPECIFICITY_BONUS if _DIGIT_PATTERN.search(answer_text) else 0.0


def score_answer(answer_text: str, question_type: QuestionType | str) -> int:
    """Score a free-text answer on the closed 1-10 scale.

    Callers are expected to reject blank answers first. Anything of one word or
    less gets ``MIN_SCORE``.
    """
    if word_count(answer_text) <= 1:
        return MIN_SCORE

    raw = BASELINE_SCORE + length_adjustment(answer_text) + specificity_bonus(answer_text)
    if QuestionType(question_type) is QuestionType.BEHAVIORAL:
        raw += star_bonus(answer_text)
    else:
        raw += technical_bonus(answer_text)

    rounded = math.floor(raw + 0.5)
    return max(MIN_SCORE, min(MAX_SCORE, rounded))
