"""Analyzer registry: strategy name -> cached analyzer instance.

The strategy comes from ``settings.analyzer_strategy`` unless given.
A remote strategy falls back to the local engine unless
``settings.analyzer_strict`` is set.
"""

import logging
from typing import get_args

from config import AnalyzerStrategy, settings
from services.analyzers.base import BaseAnalyzer

logger = logging.getLogger(__name__)

STRATEGIES = get_args(AnalyzerStrategy)

_registry: dict[str, BaseAnalyzer] = {}


def _create_analyzer(name: str) -> BaseAnalyzer:
    """Factory: create an analyzer by strategy name with deferred imports."""
    from services.analyzers.local import LocalAnalyzer

    if name == "local":
        return LocalAnalyzer()
    elif name == "gemini":
        from services.analyzers.gemini import GeminiAnalyzer

        remote = GeminiAnalyzer()
        if settings.analyzer_strict:
            return remote
        from services.analyzers.fallback import FallbackAnalyzer

        return FallbackAnalyzer(remote, LocalAnalyzer())
    else:
        raise ValueError(f"Unknown analyzer strategy: {name}")


def get_analyzer(name: str | None = None) -> BaseAnalyzer:
    """Get an analyzer by strategy name, creating it on first access."""
    name = name or settings.analyzer_strategy
    if name not in _registry:
        logger.info("Creating analyzer: %s", name)
        _registry[name] = _create_analyzer(name)
    return _registry[name]


def clear() -> None:
    """Drop all cached analyzers. Useful for testing."""
    _registry.clear()
