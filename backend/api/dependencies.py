"""Shared dependencies for API routes."""

from services.analyzers.base import BaseAnalyzer
from services.analyzers.registry import get_analyzer as _get_analyzer


def get_analyzer() -> BaseAnalyzer:
    return _get_analyzer()
