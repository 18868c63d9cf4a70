"""Fixed-vocabulary skill matching against resume text.

Matching is plain substring containment on lower-cased text, so "ai"
also hits inside "maintain" and "java" inside "javascript". Scores
depend on this, so it must not be tightened to word boundaries.
"""

import logging
from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)

# Common technical and soft skills, in reporting order
SKILL_VOCABULARY: tuple[str, ...] = (
    # Languages & frameworks
    "javascript", "python", "java", "c++", "react", "angular", "vue", "node.js",
    # Data & cloud
    "sql", "mongodb", "aws", "azure", "gcp", "docker", "kubernetes", "git",
    # Web
    "html", "css", "typescript", "rest api", "graphql", "microservices",
    # Process & soft skills
    "agile", "scrum", "communication", "leadership", "problem-solving",
    "project management", "data analysis", "machine learning", "ai", "tensorflow",
)


def validate_vocabulary(vocabulary: Iterable[str]) -> tuple[str, ...]:
    """Check a custom vocabulary and freeze it into a tuple.

    Raises ValueError if it is empty or has blank, non lower-case or
    duplicate entries.
    """
    skills = tuple(vocabulary)
    if not skills:
        raise ValueError("Skill vocabulary must not be empty")
    seen: set[str] = set()
    for skill in skills:
        if not isinstance(skill, str) or not skill.strip():
            raise ValueError(f"Invalid skill entry: {skill!r}")
        if skill != skill.lower():
            raise ValueError(f"Skill must be lower-case: {skill!r}")
        if skill in seen:
            raise ValueError(f"Duplicate skill: {skill!r}")
        seen.add(skill)
    return skills


def match_skills(
    resume_lower: str,
    vocabulary: Sequence[str] = SKILL_VOCABULARY,
    limit: int | None = None,
) -> list[str]:
    """Return vocabulary skills found in the resume, in vocabulary order.

    With ``limit`` the walk stops at the limit-th hit, which yields the
    same list as truncating the full result.
    """
    matched: list[str] = []
    seen: set[str] = set()
    for skill in vocabulary:
        if limit is not None and len(matched) >= limit:
            break
        if skill in resume_lower and skill not in seen:
            matched.append(skill)
            seen.add(skill)
    logger.debug("Matched %d/%d vocabulary skills", len(matched), len(vocabulary))
    return matched
