from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Role(str, Enum):
    FRONTEND_DEVELOPER = "Frontend Developer"
    BACKEND_DEVELOPER = "Backend Developer"
    FULL_STACK_DEVELOPER = "Full Stack Developer"
    DATA_ANALYST = "Data Analyst"
    DATA_SCIENTIST = "Data Scientist"
    PRODUCT_MANAGER = "Product Manager"
    UI_UX_DESIGNER = "UI/UX Designer"
    MARKETING_ASSOCIATE = "Marketing Associate"
    BUSINESS_ANALYST = "Business Analyst"
    SOFTWARE_ENGINEER = "Software Engineer"
    DEVOPS_ENGINEER = "DevOps Engineer"
    QA_ENGINEER = "QA Engineer"

    @classmethod
    def parse(cls, value: str | None) -> Optional["Role"]:
        return _parse_enum(cls, value)


class ExperienceLevel(str, Enum):
    FRESHER = "Fresher (0-1 years)"
    JUNIOR = "Junior (1-3 years)"
    MID_LEVEL = "Mid-level (3-5 years)"
    SENIOR = "Senior (5+ years)"

    @classmethod
    def parse(cls, value: str | None) -> Optional["ExperienceLevel"]:
        return _parse_enum(cls, value)


class QuestionType(str, Enum):
    BEHAVIORAL = "behavioral"
    TECHNICAL = "technical"


class SessionStatus(str, Enum):
    LOADING = "loading"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    UNUSABLE = "unusable"


def _parse_enum(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    normalized = value.strip().lower()
    for member in enum_cls:
        if member.value.lower() == normalized:
            return member
    return None


@dataclass(frozen=True)
class UserProfile:
    name: str
    role: str
    experience_level: str
    education: str = ""


@dataclass(frozen=True)
class QuestionRecord:
    id: int
    text: str
    type: QuestionType
    category: str


@dataclass(frozen=True)
class Evaluation:
    score: int
    feedback: str
    strengths: Tuple[str, ...] = ()
    improvements: Tuple[str, ...] = ()


@dataclass(frozen=True)
class AnswerRecord:
    question_id: int
    answer_text: str
    score: int
    feedback: str
    strengths: Tuple[str, ...] = ()
    improvements: Tuple[str, ...] = ()


@dataclass
class InterviewSession:
    session_id: str
    profile: UserProfile
    questions: Tuple[QuestionRecord, ...] = ()
    current_index: int = 0
    answers: List[AnswerRecord] = field(default_factory=list)
    status: SessionStatus = SessionStatus.LOADING

    @property
    def completed(self) -> bool:
        return self.status is SessionStatus.COMPLETED


@dataclass(frozen=True)
class InterviewSummary:
    answered: int
    total_questions: int
    average_score: float
    behavioral_average: Optional[float]
    technical_average: Optional[float]
    overall_rating: str
    strongest_question_id: Optional[int] = None
    weakest_question_id: Optional[int] = None
