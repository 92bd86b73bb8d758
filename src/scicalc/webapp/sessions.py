"""
In-memory session store for calculator engines.

Each browser session owns one engine. All access goes through the module
lock so an engine only ever sees one event at a time.
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, TypedDict

from ..calc_types import CalculatorState
from ..config import CalculatorSettings
from ..engine import CalculatorEngine

logger = logging.getLogger(__name__)


class SessionInfo(TypedDict):
    """Session metadata returned by list_sessions()."""
    session_id: str
    created_at: str
    last_used_at: str
    events: int


class _Session:
    def __init__(self, session_id: str, engine: CalculatorEngine):
        self.session_id = session_id
        self.engine = engine
        self.created_at = datetime.now(timezone.utc).isoformat()
        self.last_used_at = self.created_at
        self.events = 0

    def info(self) -> SessionInfo:
        return SessionInfo(
            session_id=self.session_id,
            created_at=self.created_at,
            last_used_at=self.last_used_at,
            events=self.events,
        )


_sessions: Dict[str, _Session] = {}
_sessions_lock = threading.Lock()


def create_session(settings: Optional[CalculatorSettings] = None) -> str:
    """
    Create a new calculator session.

    Args:
        settings: Engine settings (defaults when omitted)

    Returns:
        Session ID string
    """
    session_id = str(uuid.uuid4())
    session = _Session(session_id, CalculatorEngine(settings))

    with _sessions_lock:
        _sessions[session_id] = session

    logger.info("Created calculator session %s", session_id)
    return session_id


def with_engine(
    session_id: str, fn: Callable[[CalculatorEngine], CalculatorState]
) -> Optional[CalculatorState]:
    """
    Run ``fn`` against a session's engine under the store lock.

    Returns:
        Whatever ``fn`` returns, or None if the session does not exist

    Raises:
        ValueError: Propagated from ``fn`` for invalid actions
    """
    with _sessions_lock:
        session = _sessions.get(session_id)
        if session is None:
            return None
        state = fn(session.engine)
        session.events += 1
        session.last_used_at = datetime.now(timezone.utc).isoformat()
        return state


def get_state(session_id: str) -> Optional[CalculatorState]:
    with _sessions_lock:
        session = _sessions.get(session_id)
        return session.engine.state() if session else None


def delete_session(session_id: str) -> bool:
    with _sessions_lock:
        removed = _sessions.pop(session_id, None) is not None
    if removed:
        logger.info("Deleted calculator session %s", session_id)
    return removed


def list_sessions() -> List[SessionInfo]:
    with _sessions_lock:
        return [s.info() for s in _sessions.values()]
