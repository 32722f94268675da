import json
import logging
import re
import time
from typing import Any, List, Protocol

from app.core.feedback import compose_feedback, compose_highlights
from app.core.models import Evaluation, QuestionRecord, QuestionType, UserProfile
from app.core.prompts import EVALUATION_PROMPT, INTERVIEWER_SYSTEM_PROMPT, QUESTION_GENERATION_PROMPT
from app.core.question_bank import select_questions
from app.core.scorer import MAX_SCORE, MIN_SCORE, score_answer
from app.utils.logger import InterviewLogger

logger = logging.getLogger(__name__)


class EvaluationProvider(Protocol):
    name: str

    def select_questions(self, profile: UserProfile) -> List[QuestionRecord]: ...

    def evaluate(self, answer_text: str, question: QuestionRecord, profile: UserProfile) -> Evaluation: ...


class HeuristicProvider:
    """Question bank lookup plus rule-based scoring and feedback. No I/O."""

    name = "heuristic"

    def select_questions(self, profile: UserProfile) -> List[QuestionRecord]:
        return select_questions(profile.role, profile.experience_level)

    def evaluate(self, answer_text: str, question: QuestionRecord, profile: UserProfile) -> Evaluation:
        score = score_answer(answer_text, question.type)
        feedback = compose_feedback(answer_text, question, score)
        strengths, improvements = compose_highlights(answer_text, question, score)
        return Evaluation(score=score, feedback=feedback, strengths=strengths, improvements=improvements)


class RemoteResponseError(ValueError):
    pass


class MistralProvider:
    """Delegates question generation and evaluation to a Mistral chat model.

    Every failure (transport, parsing, unexpected shape) is logged and answered
    by the heuristic fallback, so callers always get a usable result.
    """

    name = "mistral"

    def __init__(
        self,
        client: Any,
        model: str,
        temperature: float = 0.7,
        question_count: int = 7,
        fallback: EvaluationProvider | None = None,
        event_logger: InterviewLogger | None = None,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.question_count = question_count
        self.fallback = fallback or HeuristicProvider()
        self.event_logger = event_logger

    def select_questions(self, profile: UserProfile) -> List[QuestionRecord]:
        prompt = QUESTION_GENERATION_PROMPT.format(
            count=self.question_count,
            role=profile.role,
            experience=profile.experience_level,
            education=profile.education or "unspecified",
        )
        try:
            payload = self._call_llm(prompt)
            return self._parse_questions(payload)
        except Exception as e:
            self._log_fallback("question generation", e)
            return self.fallback.select_questions(profile)

    def evaluate(self, answer_text: str, question: QuestionRecord, profile: UserProfile) -> Evaluation:
        prompt = EVALUATION_PROMPT.format(
            question=question.text,
            question_type=question.type.value,
            category=question.category,
            role=profile.role,
            experience=profile.experience_level,
            answer=answer_text,
        )
        try:
            payload = self._call_llm(prompt)
            return self._parse_evaluation(payload)
        except Exception as e:
            self._log_fallback("answer evaluation", e)
            return self.fallback.evaluate(answer_text, question, profile)

    def _call_llm(self, prompt: str) -> Any:
        start_time = time.time()
        messages = [
            {"role": "system", "content": INTERVIEWER_SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]
        response = self.client.chat.complete(model=self.model, messages=messages, temperature=self.temperature)
        latency = (time.time() - start_time) * 1000
        if self.event_logger:
            self.event_logger.log_latency(latency)

        content = response.choices[0].message.content
        return json.loads(extract_json(content))

    def _log_fallback(self, operation: str, error: Exception) -> None:
        logger.warning(f"Mistral {operation} failed, using heuristic fallback: {error}")
        if self.event_logger:
            self.event_logger.log("Evaluator", f"Fallback to heuristic {operation}", {"error": str(error)})

    @staticmethod
    def _parse_questions(payload: Any) -> List[QuestionRecord]:
        if isinstance(payload, dict):
            payload = payload.get("questions")
        if not isinstance(payload, list) or not payload:
            raise RemoteResponseError("expected a non-empty JSON array of questions")

        questions = []
        for index, item in enumerate(payload, start=1):
            if not isinstance(item, dict):
                raise RemoteResponseError(f"question #{index} is not an object")
            text = str(item.get("text") or "").strip()
            if not text:
                raise RemoteResponseError(f"question #{index} has no text")
            try:
                question_type = QuestionType(str(item.get("type", "")).strip().lower())
            except ValueError:
                raise RemoteResponseError(f"question #{index} has unknown type {item.get('type')!r}")
            category = str(item.get("category") or "General").strip()
            questions.append(QuestionRecord(id=index, text=text, type=question_type, category=category))
        return questions

    @staticmethod
    def _parse_evaluation(payload: Any) -> Evaluation:
        if not isinstance(payload, dict):
            raise RemoteResponseError("expected a JSON object evaluation")
        try:
            raw_score = float(payload["score"])
        except (KeyError, TypeError, ValueError):
            raise RemoteResponseError(f"invalid score {payload.get('score')!r}")
        feedback = str(payload.get("feedback") or "").strip()
        if not feedback:
            raise RemoteResponseError("evaluation has no feedback")

        score = max(MIN_SCORE, min(MAX_SCORE, int(raw_score + 0.5)))
        return Evaluation(
            score=score,
            feedback=feedback,
            strengths=_string_tuple(payload.get("strengths")),
            improvements=_string_tuple(payload.get("improvements")),
        )


def _string_tuple(value: Any) -> tuple:
    if not isinstance(value, list):
        return ()
    return tuple(str(item).strip() for item in value if str(item).strip())


def extract_json(content: str) -> str:
    """Pull the JSON document out of a model reply, fenced or not."""
    if "```json" in content:
        json_str = content.split("```json")[1].split("```")[0]
    elif "```" in content:
        json_str = content.split("```")[1].split("```")[0]
    else:
        json_str = content
    json_str = json_str.strip()

    if not json_str.startswith(("{", "[")):
        starts = [idx for idx in (content.find("{"), content.find("[")) if idx != -1]
        if not starts:
            raise RemoteResponseError("no JSON found in model reply")
        start_idx = min(starts)
        closing = "}" if content[start_idx] == "{" else "]"
        end_idx = content.rfind(closing)
        if end_idx <= start_idx:
            raise RemoteResponseError("unterminated JSON in model reply")
        json_str = content[start_idx:end_idx + 1]

    # trailing commas are a common model slip
    json_str = re.sub(r",\s*}", "}", json_str)
    json_str = re.sub(r",\s*]", "]", json_str)
    return json_str
