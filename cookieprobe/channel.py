"""Messages exchanged on an established connection.

Each connection owns one session id. ``set_cookie`` only echoes it back;
``clear_cookie`` invalidates it, after which presenting the id on a new
handshake reads as unknown rather than stale.
"""

import json
import logging
from enum import Enum

from .sessions import SessionStore

logger = logging.getLogger(__name__)

SET_MESSAGE = "Cookie would be set via HTTP response"
CLEARED_MESSAGE = "Cookie cleared with Max-Age=0 (browser should delete it)"


class ChannelState(str, Enum):
    OPEN = "open"
    CLEARED = "cleared"


class SessionChannel:
    def __init__(self, session_id: str, store: SessionStore):
        self.session_id = session_id
        self.state = ChannelState.OPEN
        self._store = store

    def handle(self, raw: str | bytes) -> dict | None:
        """Process one text frame and return the reply, or None to stay silent."""
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError, RecursionError):
            logger.warning("Ignoring malformed message on session %s", self.session_id)
            return None

        if not isinstance(data, dict):
            logger.warning("Ignoring non-object message on session %s", self.session_id)
            return None

        kind = data.get("type")
        logger.info("Received message on session %s: %s", self.session_id, data)

        if kind == "set_cookie":
            return self._mark_issued()
        if kind == "clear_cookie":
            return self._mark_cleared()

        logger.debug("No handler for message type %r", kind)
        return None

    def _mark_issued(self) -> dict:
        logger.info("Would set cookie: test-session-id=%s", self.session_id)
        return {
            "type": "cookie_set",
            "sessionId": self.session_id,
            "message": SET_MESSAGE,
        }

    def _mark_cleared(self) -> dict:
        logger.info("Would clear cookie: test-session-id=; Max-Age=0")
        self._store.invalidate(self.session_id)
        self.state = ChannelState.CLEARED
        return {"type": "cookie_cleared", "message": CLEARED_MESSAGE}
