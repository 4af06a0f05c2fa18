"""Validation of the session credential presented on a WebSocket handshake.

Outcomes, checked in order:

1. no credential      -> accepted, a new session is created
2. credential active  -> stale: the client kept a cookie it was told to drop
3. credential absent  -> unknown: never issued or already invalidated

Rejections never touch the store.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .cookies import get_session_cookie
from .sessions import SessionStore, generate_session_id

logger = logging.getLogger(__name__)

# RFC 6455 "policy violation"
POLICY_VIOLATION = 1008

STALE_REASON = "Session already used - cookie should have been cleared"
UNKNOWN_REASON = "Unknown session"
CONNECTED_MESSAGE = "Connected successfully - no stale cookie detected"


class HandshakeOutcome(str, Enum):
    ACCEPTED = "accepted"
    STALE = "stale"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class HandshakeResult:
    outcome: HandshakeOutcome
    session_id: str | None = None
    presented: str | None = None
    close_code: int | None = None
    reason: str | None = None

    @property
    def accepted(self) -> bool:
        return self.outcome is HandshakeOutcome.ACCEPTED

    def connected_message(self) -> dict:
        if not self.accepted:
            raise ValueError(f"handshake was rejected ({self.outcome.value})")
        return {
            "type": "connected",
            "sessionId": self.session_id,
            "message": CONNECTED_MESSAGE,
        }


def validate_handshake(
    cookie_header: str | None,
    store: SessionStore,
    generate: Callable[[], str] = generate_session_id,
) -> HandshakeResult:
    presented = get_session_cookie(cookie_header)

    if presented is None:
        session_id = generate()
        store.create(session_id)
        logger.info("Handshake accepted without cookie, new session %s", session_id)
        return HandshakeResult(HandshakeOutcome.ACCEPTED, session_id=session_id)

    if store.exists(presented):
        logger.warning(
            "Handshake rejected: stale cookie %s was already used and should have been cleared",
            presented,
        )
        return HandshakeResult(
            HandshakeOutcome.STALE,
            presented=presented,
            close_code=POLICY_VIOLATION,
            reason=STALE_REASON,
        )

    logger.warning("Handshake rejected: unknown session cookie %s", presented)
    return HandshakeResult(
        HandshakeOutcome.UNKNOWN,
        presented=presented,
        close_code=POLICY_VIOLATION,
        reason=UNKNOWN_REASON,
    )
