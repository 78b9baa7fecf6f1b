"""In-memory registry of editing sessions, keyed by a generated id."""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict

from svgcode.engine.pipeline import NormalizerSession
from svgcode.engine.state import DEFAULT_COLOR, NormalizationConfig

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 1000


class SessionStore:
    """Holds at most ``max_sessions`` sessions; creating one past the cap evicts the oldest."""

    def __init__(
        self,
        config: NormalizationConfig | None = None,
        default_color: str = DEFAULT_COLOR,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError(f"max_sessions must be at least 1, got {max_sessions}")
        self._config = config or NormalizationConfig()
        self._default_color = default_color
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, NormalizerSession] = OrderedDict()

    def create(self) -> tuple[str, NormalizerSession]:
        while len(self._sessions) >= self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted session %s (store full at %d)", evicted, self._max_sessions)

        session_id = uuid.uuid4().hex
        session = NormalizerSession(config=self._config, default_color=self._default_color)
        self._sessions[session_id] = session
        logger.info("Created session %s", session_id)
        return session_id, session

    def get(self, session_id: str) -> NormalizerSession | None:
        session = self._sessions.get(session_id)
        if session is not None:
            # Recently used sessions are the last to be evicted
            self._sessions.move_to_end(session_id)
        return session

    def delete(self, session_id: str) -> bool:
        removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.info("Deleted session %s", session_id)
        return removed

    def __len__(self) -> int:
        return len(self._sessions)
