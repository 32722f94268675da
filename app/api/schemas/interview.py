from typing import List

from pydantic import BaseModel, Field

from app.core.models import AnswerRecord, InterviewSession, InterviewSummary, QuestionRecord, UserProfile


class InterviewStartRequest(BaseModel):
    name: str = ""
    role: str = ""
    experience_level: str = ""
    education: str = ""
    session_id: str | None = None

    def to_profile(self) -> UserProfile:
        return UserProfile(
            name=self.name.strip(),
            role=self.role.strip(),
            experience_level=self.experience_level.strip(),
            education=self.education.strip(),
        )


class InterviewAnswerRequest(BaseModel):
    answer: str


class QuestionResponse(BaseModel):
    id: int
    text: str
    type: str
    category: str

    @classmethod
    def from_record(cls, question: QuestionRecord) -> "QuestionResponse":
        return cls(id=question.id, text=question.text, type=question.type.value, category=question.category)


class AnswerResponse(BaseModel):
    question_id: int
    answer: str
    score: int
    feedback: str
    strengths: List[str] = []
    improvements: List[str] = []

    @classmethod
    def from_record(cls, answer: AnswerRecord) -> "AnswerResponse":
        return cls(
            question_id=answer.question_id,
            answer=answer.answer_text,
            score=answer.score,
            feedback=answer.feedback,
            strengths=list(answer.strengths),
            improvements=list(answer.improvements),
        )


class ProfileResponse(BaseModel):
    name: str
    role: str
    experience_level: str
    education: str = ""


class InterviewStateResponse(BaseModel):
    session_id: str
    status: str
    profile: ProfileResponse
    questions: List[QuestionResponse] = []
    current_index: int = 0
    current_question: QuestionResponse | None = None
    answers: List[AnswerResponse] = []
    is_complete: bool = False

    @classmethod
    def from_session(cls, session: InterviewSession) -> "InterviewStateResponse":
        current = None
        if not session.completed and session.current_index < len(session.questions):
            current = QuestionResponse.from_record(session.questions[session.current_index])
        return cls(
            session_id=session.session_id,
            status=session.status.value,
            profile=ProfileResponse(
                name=session.profile.name,
                role=session.profile.role,
                experience_level=session.profile.experience_level,
                education=session.profile.education,
            ),
            questions=[QuestionResponse.from_record(question) for question in session.questions],
            current_index=session.current_index,
            current_question=current,
            answers=[AnswerResponse.from_record(answer) for answer in session.answers],
            is_complete=session.completed,
        )


class AnswerSubmissionResponse(BaseModel):
    accepted: bool
    answer: AnswerResponse | None = None
    state: InterviewStateResponse


class FinalReportResponse(BaseModel):
    session_id: str
    answered: int
    total_questions: int
    average_score: float
    behavioral_average: float | None = None
    technical_average: float | None = None
    overall_rating: str
    strongest_question_id: int | None = None
    weakest_question_id: int | None = None
    answers: List[AnswerResponse] = []

    @classmethod
    def from_summary(cls, session: InterviewSession, summary: InterviewSummary) -> "FinalReportResponse":
        return cls(
            session_id=session.session_id,
            answered=summary.answered,
            total_questions=summary.total_questions,
            average_score=summary.average_score,
            behavioral_average=summary.behavioral_average,
            technical_average=summary.technical_average,
            overall_rating=summary.overall_rating,
            strongest_question_id=summary.strongest_question_id,
            weakest_question_id=summary.weakest_question_id,
            answers=[AnswerResponse.from_record(answer) for answer in session.answers],
        )


class InterviewOptionsResponse(BaseModel):
    roles: List[str] = Field(default_factory=list)
    experience_levels: List[str] = Field(default_factory=list)
