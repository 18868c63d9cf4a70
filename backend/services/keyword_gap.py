"""Job-description keyword gap analysis.

Keywords are raw whitespace tokens of the lower-cased job description
longer than four UTF-16 code units. Trailing punctuation is not stripped, so
"skills," and "skills" are different keywords.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from services.normalizer import text_length

logger = logging.getLogger(__name__)

# Shortest token (in characters) that counts as a keyword
MIN_KEYWORD_LENGTH = 5


@dataclass(frozen=True)
class KeywordGap:
    """Qualifying keyword count and the distinct keywords the resume lacks.

    ``total`` counts every qualifying token including repeats, while
    ``missing`` is de-duplicated. Neither is capped.
    """
    total: int = 0
    missing: list[str] = field(default_factory=list)

    @property
    def matched(self) -> int:
        return self.total - len(self.missing)


def qualifying_tokens(tokens: Sequence[str]) -> list[str]:
    """Keep tokens long enough to be keywords. Order and repeats are kept."""
    return [token for token in tokens if text_length(token) >= MIN_KEYWORD_LENGTH]


def find_missing_keywords(
    keywords: Sequence[str],
    resume_lower: str,
    limit: int | None = None,
) -> list[str]:
    """Distinct keywords absent from the resume, in first-occurrence order."""
    missing: list[str] = []
    seen: set[str] = set()
    for keyword in keywords:
        if limit is not None and len(missing) >= limit:
            break
        if keyword in seen:
            continue
        if keyword not in resume_lower:
            missing.append(keyword)
            seen.add(keyword)
    return missing


def analyze_keyword_gap(jd_tokens: Sequence[str], resume_lower: str) -> KeywordGap:
    keywords = qualifying_tokens(jd_tokens)
    missing = find_missing_keywords(keywords, resume_lower)
    logger.debug("Keyword gap: %d qualifying, %d distinct missing", len(keywords), len(missing))
    return KeywordGap(total=len(keywords), missing=missing)
