"""Primary strategy with a fallback when it is unavailable."""

import logging

from models.responses import AnalysisReport
from services.analyzers.base import AnalysisUnavailable, BaseAnalyzer

logger = logging.getLogger(__name__)


class FallbackAnalyzer(BaseAnalyzer):
    def __init__(self, primary: BaseAnalyzer, fallback: BaseAnalyzer):
        self.primary = primary
        self.fallback = fallback
        self.name = primary.name

    def analyze(self, resume_text: str, job_description: str) -> AnalysisReport:
        try:
            return self.primary.analyze(resume_text, job_description)
        except AnalysisUnavailable as e:
            logger.warning(
                "%s analysis unavailable (%s), falling back to %s",
                self.primary.name, e, self.fallback.name,
            )
            return self.fallback.analyze(resume_text, job_description)
