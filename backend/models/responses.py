"""Response schemas.

``AnalysisReport`` is the engine's only output. Attribute names are
snake_case; the wire names (``atsScore``, ``identifiedSkills``,
``missingKeywords``) are the aliases FastAPI serializes with.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Max entries in each evidence list
EVIDENCE_LIMIT = 10


def _dedupe(items: list[str], limit: int = EVIDENCE_LIMIT) -> list[str]:
    """Drop repeats preserving first-occurrence order, then cap."""
    seen: set[str] = set()
    result = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
        if len(result) == limit:
            break
    return result


class AnalysisReport(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: int = Field(0, ge=0, le=100, alias="atsScore")
    matched_skills: list[str] = Field(default_factory=list, alias="identifiedSkills")
    missing_keywords: list[str] = Field(default_factory=list, alias="missingKeywords")

    @field_validator("matched_skills", "missing_keywords")
    @classmethod
    def _distinct_and_capped(cls, value: list[str]) -> list[str]:
        return _dedupe(value)

    @classmethod
    def empty(cls) -> "AnalysisReport":
        return cls(score=0, matched_skills=[], missing_keywords=[])


class HealthResponse(BaseModel):
    status: str = "ok"
    analyzer: str
    gemini_configured: bool = False
