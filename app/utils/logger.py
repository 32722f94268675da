import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List

from colorama import Fore, Style, init

init(autoreset=True)

AGENT_COLORS = {
    "Session": Fore.CYAN,
    "QuestionBank": Fore.GREEN,
    "Evaluator": Fore.YELLOW,
    "Summary": Fore.MAGENTA,
    "System": Fore.WHITE,
}

AGENT_PREFIXES = {
    "Session": "[LOG :: SESSION]",
    "QuestionBank": "[LOG :: QUESTION_BANK]",
    "Evaluator": "[LOG :: EVALUATOR]",
    "Summary": "[LOG :: SUMMARY]",
    "System": "[LOG :: SYSTEM]",
}


class InterviewLogger:
    """Colored, agent-tagged console log that also keeps the events in memory."""

    def __init__(self, max_events: int = 1000):
        self.max_events = max_events
        self.events: List[Dict[str, Any]] = []
        self.latencies_ms: List[float] = []
        self._setup_logger()

    def _setup_logger(self):
        logger = logging.getLogger("mockinterview")
        logger.setLevel(logging.INFO)
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter('%(message)s')
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            logger.propagate = False
        self.logger = logger

    def log(self, agent: str, message: str, data: Dict[str, Any] | None = None):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "agent": agent,
            "message": message,
            "data": data or {}
        }
        self.events.append(log_entry)
        if len(self.events) > self.max_events:
            del self.events[0]

        color = AGENT_COLORS.get(agent, Fore.WHITE)
        agent_prefix = AGENT_PREFIXES.get(agent, f"[LOG :: {agent.upper()}]")
        formatted_msg = f"{color}{agent_prefix}{Style.RESET_ALL} {message}"
        if data:
            formatted_msg += f" | Data: {json.dumps(data, ensure_ascii=False, default=str)}"

        self.logger.info(formatted_msg)

    def log_state_transition(self, session_id: str, from_state: str, to_state: str, reason: str = ""):
        self.log("Session", f"State transition: {from_state} -> {to_state}", {"session_id": session_id, "reason": reason})

    def log_latency(self, latency_ms: float):
        self.latencies_ms.append(latency_ms)
        if len(self.latencies_ms) > self.max_events:
            del self.latencies_ms[0]
        self.log("System", f"[METRIC :: LATENCY] {latency_ms:.2f}ms")

    def events_for(self, session_id: str) -> List[Dict[str, Any]]:
        return [event for event in self.events if event["data"].get("session_id") == session_id]
