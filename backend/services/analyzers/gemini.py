"""Remote analyzer backed by Google Gemini.

Same contract as the local engine, plus:
- every request is bounded by ``timeout_s``
- transient failures (network, timeout, 429, 5xx) are retried up to
  ``max_retries`` times with exponential backoff
- no retry is started past the overall deadline of
  ``timeout_s * (max_retries + 1)``
- any failure surfaces as AnalysisUnavailable, never as a partial report
"""

import logging
import math
import time
from collections.abc import Callable

from pydantic import ValidationError

from config import settings
from models.responses import AnalysisReport
from services import gemini_client, prompt_builder
from services.analyzers.base import AnalysisUnavailable, BaseAnalyzer
from services.scoring import round_half_up

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("atsScore", "identifiedSkills", "missingKeywords")


def _lower_all(value):
    if isinstance(value, list):
        return [v.lower() if isinstance(v, str) else v for v in value]
    return value


def parse_report(data: dict) -> AnalysisReport:
    """Validate a Gemini JSON object into an AnalysisReport."""
    missing = [f for f in _REQUIRED_FIELDS if f not in data]
    if missing:
        raise AnalysisUnavailable(f"Analysis response missing fields: {', '.join(missing)}")

    score = data["atsScore"]
    if isinstance(score, float) and not math.isfinite(score):
        raise AnalysisUnavailable(f"Malformed analysis response: non-finite score {score!r}")
    if isinstance(score, float):
        score = round_half_up(score)

    try:
        return AnalysisReport(
            atsScore=score,
            identifiedSkills=_lower_all(data["identifiedSkills"]),
            missingKeywords=_lower_all(data["missingKeywords"]),
        )
    except ValidationError as e:
        raise AnalysisUnavailable("Malformed analysis response", e) from e


class GeminiAnalyzer(BaseAnalyzer):
    name = "gemini"

    def __init__(
        self,
        client=None,
        api_key: str | None = None,
        model: str | None = None,
        timeout_s: float | None = None,
        max_retries: int | None = None,
        retry_backoff_s: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._client = client
        self.api_key = settings.gemini_api_key if api_key is None else api_key
        self.model = model or settings.gemini_model
        self.timeout_s = settings.gemini_timeout_s if timeout_s is None else timeout_s
        self.max_retries = settings.gemini_max_retries if max_retries is None else max_retries
        self.retry_backoff_s = (
            settings.gemini_retry_backoff_s if retry_backoff_s is None else retry_backoff_s
        )
        if self.timeout_s <= 0:
            raise ValueError("timeout_s must be positive")
        if self.max_retries < 0:
            raise ValueError("max_retries must not be negative")
        self._sleep = sleep
        self._clock = clock

    @property
    def configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    def _get_client(self):
        if self._client is None:
            if not self.api_key:
                logger.warning("No GEMINI_API_KEY set - Gemini analysis disabled")
                raise AnalysisUnavailable("Gemini API key not configured")
            self._client = gemini_client.create_client(self.api_key, self.timeout_s)
        return self._client

    def _generate_with_retry(self, prompt: str) -> dict:
        client = self._get_client()
        deadline = self._clock() + self.timeout_s * (self.max_retries + 1)

        for attempt in range(self.max_retries + 1):
            try:
                return gemini_client.generate_json(client, prompt, self.model)
            except gemini_client.GeminiTransientError as e:
                delay = self.retry_backoff_s * (2 ** attempt)
                if attempt == self.max_retries or self._clock() + delay >= deadline:
                    logger.error("Gemini analysis failed after %d attempt(s): %s", attempt + 1, e)
                    raise AnalysisUnavailable("Gemini analysis failed", e) from e
                logger.warning(
                    "Gemini attempt %d failed (%s), retrying in %.1fs", attempt + 1, e, delay
                )
                self._sleep(delay)
            except gemini_client.GeminiError as e:
                logger.error("Gemini analysis failed: %s", e)
                raise AnalysisUnavailable("Gemini analysis failed", e) from e

        # max_retries >= 0 means the loop always returns or raises
        raise AnalysisUnavailable("Gemini analysis failed")

    def analyze(self, resume_text: str, job_description: str) -> AnalysisReport:
        prompt = prompt_builder.build_analysis_prompt(resume_text, job_description)
        data = self._generate_with_retry(prompt)
        return parse_report(data)
