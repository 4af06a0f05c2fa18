"""In-memory session store and identifier generation.

A session is active exactly while its identifier is a key in the store.
The store cannot tell a never-issued identifier from an invalidated one;
both simply read as absent.
"""

import secrets
import string
import threading
import time
from dataclasses import dataclass, field

SESSION_ID_PREFIX = "session-"
SESSION_ID_LENGTH = 9
_ALPHABET = string.digits + string.ascii_lowercase


def generate_session_id() -> str:
    """Return a fresh identifier like ``session-k3x9a0qzp``."""
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(SESSION_ID_LENGTH))
    return SESSION_ID_PREFIX + suffix


@dataclass
class SessionRecord:
    identifier: str
    created_at: float = field(default_factory=time.time)


class SessionStore:
    # Sync routes run on the thread pool, so every operation takes the lock.
    def __init__(self):
        self._lock = threading.Lock()
        self._sessions: dict[str, SessionRecord] = {}

    def create(self, identifier: str) -> SessionRecord:
        # Identifiers are generated, never caller-supplied; an existing key is overwritten.
        record = SessionRecord(identifier=identifier)
        with self._lock:
            self._sessions[identifier] = record
        return record

    def exists(self, identifier: str) -> bool:
        with self._lock:
            return identifier in self._sessions

    def get(self, identifier: str) -> SessionRecord | None:
        with self._lock:
            return self._sessions.get(identifier)

    def invalidate(self, identifier: str) -> bool:
        """Remove the session if present. Returns whether anything was removed."""
        with self._lock:
            return self._sessions.pop(identifier, None) is not None

    def list_active(self) -> list[str]:
        with self._lock:
            return list(self._sessions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
