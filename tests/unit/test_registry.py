"""Unit tests for the per-account scorer registry."""

from src.domains.fraud.config import FraudConfig
from src.domains.fraud.models import Transaction
from src.domains.fraud.registry import ANONYMOUS_KEY, ScorerRegistry, account_key
from tests.conftest import make_transaction_payload


class TestScorerRegistry:
    def test_same_key_same_scorer(self):
        registry = ScorerRegistry()
        assert registry.get("user:a") is registry.get("user:a")
        assert len(registry) == 1

    def test_different_keys_isolated(self):
        registry = ScorerRegistry()
        registry.get("user:a").evaluate(Transaction(**make_transaction_payload()))

        assert len(registry.get("user:a").history) == 1
        assert len(registry.get("user:b").history) == 0

    def test_missing_key_uses_anonymous_scorer(self):
        registry = ScorerRegistry()
        assert registry.get(None) is registry.get("")
        assert ANONYMOUS_KEY in registry

    def test_discard(self):
        registry = ScorerRegistry()
        registry.get("user:a")

        assert registry.discard("user:a") is True
        assert "user:a" not in registry
        assert registry.discard("user:a") is False

    def test_config_shared(self):
        config = FraudConfig()
        config.history.max_entries = 7
        registry = ScorerRegistry(config=config)

        assert registry.config is config
        assert registry.get("user:a").history.max_entries == 7


class _FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _bounded_config(max_accounts: int = 10_000, idle_ttl_seconds: int = 86_400) -> FraudConfig:
    config = FraudConfig()
    config.registry.max_accounts = max_accounts
    config.registry.idle_ttl_seconds = idle_ttl_seconds
    return config


class TestRegistryBounds:
    def test_size_stays_at_cap(self):
        registry = ScorerRegistry(config=_bounded_config(max_accounts=50))
        for i in range(2_000):
            registry.get(f"session:{i}")

        assert len(registry) == 50
        assert "session:1999" in registry
        assert "session:0" not in registry

    def test_least_recently_used_evicted_first(self):
        registry = ScorerRegistry(config=_bounded_config(max_accounts=2))
        first = registry.get("user:a")
        registry.get("user:b")
        assert registry.get("user:a") is first

        registry.get("user:c")

        assert "user:a" in registry
        assert "user:b" not in registry
        assert "user:c" in registry

    def test_idle_scorers_expire(self):
        clock = _FakeClock()
        registry = ScorerRegistry(config=_bounded_config(idle_ttl_seconds=60), clock=clock)
        registry.get("user:idle")
        clock.now = 30.0
        registry.get("user:busy")

        clock.now = 75.0
        registry.get("user:busy")

        assert "user:idle" not in registry
        assert "user:busy" in registry

    def test_access_refreshes_idle_timer(self):
        clock = _FakeClock()
        registry = ScorerRegistry(config=_bounded_config(idle_ttl_seconds=60), clock=clock)
        scorer = registry.get("user:a")
        for step in range(1, 6):
            clock.now = step * 50.0
            assert registry.get("user:a") is scorer

    def test_expired_scorer_starts_with_empty_history(self):
        clock = _FakeClock()
        registry = ScorerRegistry(config=_bounded_config(idle_ttl_seconds=60), clock=clock)
        registry.get("user:a").evaluate(Transaction(**make_transaction_payload()))

        clock.now = 120.0

        assert len(registry.get("user:a").history) == 0


class TestAccountKey:
    def test_user_key(self):
        assert account_key("alice", "sess-1") == "user:alice"

    def test_session_key(self):
        assert account_key(None, "sess-1") == "session:sess-1"

    def test_session_cannot_impersonate_user(self):
        assert account_key(None, "user:alice") != account_key("alice", None)

    def test_no_identity_is_anonymous(self):
        assert account_key(None, None) == ANONYMOUS_KEY
        assert account_key("", "") == ANONYMOUS_KEY
