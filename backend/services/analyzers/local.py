"""Deterministic local analyzer.

Flow:
    resume_text, job_description
      ├─ normalize(both), tokenize(job description)
      ├─ match_skills(resume)                 → matched skills (uncapped)
      ├─ analyze_keyword_gap(jd tokens)       → KeywordGap (uncapped)
      ├─ compose_score(true counts)           → int 0-100
      └─ assemble_report(capped evidence)     → AnalysisReport

Pure function of its inputs and the vocabulary; no I/O.
"""

import logging
from collections.abc import Iterable

from models.responses import EVIDENCE_LIMIT, AnalysisReport
from services.analyzers.base import BaseAnalyzer
from services.keyword_gap import analyze_keyword_gap
from services.normalizer import normalize, text_length, tokenize
from services.scoring import compose_score
from services.skill_matcher import SKILL_VOCABULARY, match_skills, validate_vocabulary

logger = logging.getLogger(__name__)


def assemble_report(
    score: int,
    matched_skills: list[str],
    missing_keywords: list[str],
    limit: int = EVIDENCE_LIMIT,
) -> AnalysisReport:
    """Package the score with the first ``limit`` entries of each evidence list."""
    return AnalysisReport(
        score=score,
        matched_skills=matched_skills[:limit],
        missing_keywords=missing_keywords[:limit],
    )


class LocalAnalyzer(BaseAnalyzer):
    name = "local"

    def __init__(
        self,
        vocabulary: Iterable[str] = SKILL_VOCABULARY,
        evidence_limit: int = EVIDENCE_LIMIT,
    ):
        if not 0 < evidence_limit <= EVIDENCE_LIMIT:
            raise ValueError(f"evidence_limit must be between 1 and {EVIDENCE_LIMIT}")
        self.vocabulary = validate_vocabulary(vocabulary)
        self.evidence_limit = evidence_limit

    def analyze(self, resume_text: str, job_description: str) -> AnalysisReport:
        resume_lower = normalize(resume_text)
        jd_tokens = tokenize(normalize(job_description))

        matched_skills = match_skills(resume_lower, self.vocabulary)
        gap = analyze_keyword_gap(jd_tokens, resume_lower)

        score = compose_score(
            skill_match=len(matched_skills),
            total_job_keywords=gap.total,
            keyword_match=gap.matched,
            resume_length=text_length(resume_lower),
        )
        logger.debug(
            "Local analysis: score=%d skills=%d keywords=%d missing=%d",
            score, len(matched_skills), gap.total, len(gap.missing),
        )
        return assemble_report(score, matched_skills, gap.missing, self.evidence_limit)
