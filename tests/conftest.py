from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.api import deps
from app.core.engine import InterviewEngine
from app.core.models import ExperienceLevel, Role, UserProfile
from app.core.providers import HeuristicProvider
from app.core.use_case import InterviewUseCase
from app.storages.session_storage import SessionStorage
from app.utils.logger import InterviewLogger


@pytest.fixture
def asha() -> UserProfile:
    return UserProfile(
        name="Asha",
        role=Role.BACKEND_DEVELOPER.value,
        experience_level=ExperienceLevel.JUNIOR.value,
    )


@pytest.fixture
def engine() -> InterviewEngine:
    return InterviewEngine(HeuristicProvider())


@pytest.fixture
def use_case(engine) -> InterviewUseCase:
    return InterviewUseCase(engine, SessionStorage(), InterviewLogger())


@pytest.fixture
def client(monkeypatch, use_case):
    monkeypatch.setattr(deps, "_engine", use_case.engine)
    monkeypatch.setattr(deps, "_storage", use_case.storage)
    monkeypatch.setattr(deps, "_use_case", use_case)
    monkeypatch.setattr(deps, "_event_logger", use_case.logger)

    from app.main import prepare_app

    with TestClient(prepare_app()) as test_client:
        yield test_client


class FakeChat:
    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def complete(self, **kwargs):
        self.calls.append(kwargs)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        message = SimpleNamespace(content=reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeMistral:
    def __init__(self, *replies):
        self.chat = FakeChat(replies)


@pytest.fixture
def fake_mistral():
    return FakeMistral
