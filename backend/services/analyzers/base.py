"""Analyzer capability: resume text + job description -> AnalysisReport."""

from abc import ABC, abstractmethod

from models.responses import AnalysisReport


class AnalysisUnavailable(Exception):
    """A strategy could not produce a report.

    Raised instead of returning a partial report, so callers can tell
    "analysis failed" apart from "analysis succeeded with a low score".
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class BaseAnalyzer(ABC):
    """Base class for analysis strategies.

    Subclasses must implement:
        - name: identifier used in the analyzer registry
        - analyze(resume_text, job_description): return an AnalysisReport
          or raise AnalysisUnavailable
    """

    name: str = ""

    @abstractmethod
    def analyze(self, resume_text: str, job_description: str) -> AnalysisReport:
        """Score the resume against the job description."""
