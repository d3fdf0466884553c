"""Per-account scorer registry so no two accounts share history."""

import threading
import time
from collections import OrderedDict
from collections.abc import Callable

import structlog

from .config import FraudConfig, default_config
from .scorer import TransactionRiskScorer

logger = structlog.get_logger()

ANONYMOUS_KEY = "anonymous"


def account_key(user_id: str | None = None, session_id: str | None = None) -> str:
    """Registry key for a caller. Users and sessions never share a namespace."""
    if user_id:
        return f"user:{user_id}"
    if session_id:
        return f"session:{session_id}"
    return ANONYMOUS_KEY


class ScorerRegistry:
    """Lazily creates one TransactionRiskScorer per account key.

    Bounded: scorers idle longer than ``idle_ttl_seconds`` are dropped, and
    once ``max_accounts`` is reached the least recently used one goes.
    """

    def __init__(
        self,
        config: FraudConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config or default_config
        self._clock = clock
        # key -> (scorer, last access), oldest access first
        self._scorers: OrderedDict[str, tuple[TransactionRiskScorer, float]] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def config(self) -> FraudConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._scorers)

    def __contains__(self, key: str) -> bool:
        return key in self._scorers

    def get(self, key: str | None) -> TransactionRiskScorer:
        key = key or ANONYMOUS_KEY
        with self._lock:
            now = self._clock()
            self._expire(now)
            entry = self._scorers.get(key)
            if entry is None:
                scorer = TransactionRiskScorer(config=self._config)
                self._evict_overflow()
                logger.info("scorer_created", account_count=len(self._scorers) + 1)
            else:
                scorer = entry[0]
            self._scorers[key] = (scorer, now)
            self._scorers.move_to_end(key)
            return scorer

    def discard(self, key: str) -> bool:
        with self._lock:
            return self._scorers.pop(key, None) is not None

    def _expire(self, now: float) -> None:
        cutoff = now - self._config.registry.idle_ttl_seconds
        expired = 0
        while self._scorers:
            _, last_seen = next(iter(self._scorers.values()))
            if last_seen > cutoff:
                break
            self._scorers.popitem(last=False)
            expired += 1
        if expired:
            logger.info("scorers_expired", count=expired, account_count=len(self._scorers))

    def _evict_overflow(self) -> None:
        # Leaves room for one new scorer
        limit = max(self._config.registry.max_accounts - 1, 0)
        while len(self._scorers) > limit:
            evicted, _ = self._scorers.popitem(last=False)
            logger.debug("scorer_evicted", key=evicted)
