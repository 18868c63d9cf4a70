import pytest
from pydantic import ValidationError

from config import Settings
from services.analyzers.registry import STRATEGIES


def test_default_strategy_is_local(monkeypatch):
    monkeypatch.delenv("ANALYZER_STRATEGY", raising=False)
    assert Settings().analyzer_strategy == "local"


@pytest.mark.parametrize("strategy", ["local", "gemini"])
def test_known_strategies_accepted(strategy):
    assert Settings(analyzer_strategy=strategy).analyzer_strategy == strategy


def test_unknown_strategy_rejected_at_startup():
    with pytest.raises(ValidationError):
        Settings(analyzer_strategy="oracle")


def test_mistyped_strategy_env_rejected(monkeypatch):
    monkeypatch.setenv("ANALYZER_STRATEGY", "locl")
    with pytest.raises(ValidationError):
        Settings()


def test_registry_strategies_match_settings():
    assert set(STRATEGIES) == {"local", "gemini"}
