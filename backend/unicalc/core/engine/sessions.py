"""Registry of calculator engines, one per client session.

Usage:
    sessions = CalculatorSessions(max_sessions=100)
    session_id, engine = sessions.create()
    sessions.get(session_id).input_digit("7")
    sessions.discard(session_id)
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from uuid import uuid4

from unicalc.core.engine.calculator import CalculatorEngine

logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    """Raised when a session id is unknown or has been evicted."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(session_id)

    def __str__(self) -> str:
        return f"No calculator session '{self.session_id}'"


class CalculatorSessions:
    """Owns the engines; evicts the least recently used one when full."""

    def __init__(self, max_sessions: int = 1000) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.max_sessions = max_sessions
        self._engines: OrderedDict[str, CalculatorEngine] = OrderedDict()

    def __len__(self) -> int:
        return len(self._engines)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._engines

    def create(self) -> tuple[str, CalculatorEngine]:
        session_id = uuid4().hex
        engine = CalculatorEngine()
        self._engines[session_id] = engine
        while len(self._engines) > self.max_sessions:
            evicted, _ = self._engines.popitem(last=False)
            logger.info("Evicted calculator session %s", evicted)
        logger.debug("Created calculator session %s", session_id)
        return session_id, engine

    def get(self, session_id: str) -> CalculatorEngine:
        try:
            engine = self._engines[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None
        self._engines.move_to_end(session_id)
        return engine

    def discard(self, session_id: str) -> None:
        if self._engines.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.debug("Discarded calculator session %s", session_id)
