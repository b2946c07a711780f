import logging
import threading
from enum import Enum

from .tokens import TokenService

logger = logging.getLogger(__name__)


class RevocationOutcome(str, Enum):
    REVOKED = "REVOKED"
    ALREADY_REVOKED = "ALREADY_REVOKED"
    INVALID_TOKEN = "INVALID_TOKEN"


class RevocationList:
    """
    Process-wide set of revoked token strings.

    Entries map token -> expiry timestamp so they can be pruned once the
    token could no longer verify anyway. Nothing is persisted across restarts.
    """

    def __init__(self, tokens: TokenService):
        self.tokens = tokens
        self._entries: dict[str, int] = {}
        self._lock = threading.Lock()

    def revoke(self, token: str) -> RevocationOutcome:
        payload = self.tokens.decode(token)
        if payload is None:
            return RevocationOutcome.INVALID_TOKEN

        with self._lock:
            if token in self._entries:
                return RevocationOutcome.ALREADY_REVOKED
            self._entries[token] = payload.exp
        return RevocationOutcome.REVOKED

    def is_revoked(self, token: str) -> bool:
        with self._lock:
            return token in self._entries

    def prune_expired(self) -> int:
        """Remove entries whose token has expired. Returns count removed."""
        now = self.tokens.clock()
        with self._lock:
            expired = [token for token, exp in self._entries.items() if now >= exp]
            for token in expired:
                del self._entries[token]
        if expired:
            logger.debug(f"Pruned {len(expired)} expired revocation entries")
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
