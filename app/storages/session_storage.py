from typing import Dict, List

from app.core.models import InterviewSession


class SessionStorage:
    def __init__(self):
        self._sessions: Dict[str, InterviewSession] = {}

    def save(self, session_id: str, session: InterviewSession) -> None:
        self._sessions[session_id] = session

    def get(self, session_id: str) -> InterviewSession | None:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> None:
        if session_id in self._sessions:
            del self._sessions[session_id]

    def exists(self, session_id: str) -> bool:
        return session_id in self._sessions

    def session_ids(self) -> List[str]:
        return list(self._sessions.keys())
