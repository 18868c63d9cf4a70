"""ATS score composition.

    skills:   min(skill_match / 20 * 40, 40)          (only if any skill matched)
    keywords: keyword_match / total_keywords * 60      (only if any keyword qualifies)
    bonus:    +5 when the resume is over 500 UTF-16 code units, then clamp to 100

The result is rounded half up to an integer.
"""

import math

SKILL_WEIGHT = 40
SKILL_SATURATION = 20  # distinct skills needed for the full skill weight
KEYWORD_WEIGHT = 60
LENGTH_BONUS = 5
LENGTH_BONUS_THRESHOLD = 500
MAX_SCORE = 100


def round_half_up(value: float) -> int:
    """Round to nearest integer, ties up (2.5 -> 3). Inputs here are never negative."""
    return int(math.floor(value + 0.5))


def compose_score(
    skill_match: int,
    total_job_keywords: int,
    keyword_match: int,
    resume_length: int,
) -> int:
    """Combine skill and keyword coverage into a 0-100 score.

    Counts must be the full, uncapped ones: the evidence lists shown to
    users are truncated but the score reflects the whole gap.
    """
    score = 0.0
    if skill_match > 0:
        score += min((skill_match / SKILL_SATURATION) * SKILL_WEIGHT, SKILL_WEIGHT)
    if total_job_keywords > 0:
        score += (keyword_match / total_job_keywords) * KEYWORD_WEIGHT

    # Clamp only applies together with the bonus
    if resume_length > LENGTH_BONUS_THRESHOLD:
        score = min(score + LENGTH_BONUS, MAX_SCORE)

    return round_half_up(score)
