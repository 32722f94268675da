import logging

from mistralai import Mistral

from app.config.settings import settings
from app.core.engine import InterviewEngine
from app.core.providers import EvaluationProvider, HeuristicProvider, MistralProvider
from app.core.use_case import InterviewUseCase
from app.storages.session_storage import SessionStorage
from app.utils.logger import InterviewLogger

logger = logging.getLogger(__name__)

_event_logger: InterviewLogger | None = None
_engine: InterviewEngine | None = None
_storage: SessionStorage | None = None
_use_case: InterviewUseCase | None = None


def get_event_logger() -> InterviewLogger:
    global _event_logger
    if _event_logger is None:
        _event_logger = InterviewLogger()
    return _event_logger


def build_provider() -> EvaluationProvider:
    if settings.EVALUATION_PROVIDER == "mistral":
        if settings.MISTRAL_API_KEY:
            return MistralProvider(
                client=Mistral(api_key=settings.MISTRAL_API_KEY),
                model=settings.MISTRAL_MODEL,
                temperature=settings.MISTRAL_TEMPERATURE,
                question_count=settings.QUESTION_COUNT,
                event_logger=get_event_logger(),
            )
        logger.warning("EVALUATION_PROVIDER=mistral but MISTRAL_API_KEY is not set; using heuristic provider")
    return HeuristicProvider()


def get_engine() -> InterviewEngine:
    global _engine
    if _engine is None:
        _engine = InterviewEngine(build_provider())
    return _engine


def get_storage() -> SessionStorage:
    global _storage
    if _storage is None:
        _storage = SessionStorage()
    return _storage


def get_use_case() -> InterviewUseCase:
    global _use_case
    if _use_case is None:
        _use_case = InterviewUseCase(get_engine(), get_storage(), get_event_logger())
    return _use_case
