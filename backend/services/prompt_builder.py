"""Prompt template for the Gemini analyzer."""


def build_analysis_prompt(resume_text: str, job_description: str) -> str:
    """Ask for the same three fields the local engine produces."""
    return f"""You are an expert ATS (Applicant Tracking System) analyst.

Analyze the following resume against the job description and provide a JSON response with:
1. "atsScore": an integer from 0-100
2. "identifiedSkills": array of skills found in the resume that match the job description (at most 10)
3. "missingKeywords": array of important keywords from the job description missing in the resume (at most 10)

Use lower-case strings for skills and keywords.

RESUME:
---
{resume_text}
---

JOB DESCRIPTION:
---
{job_description}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "atsScore": <integer 0-100>,
  "identifiedSkills": [<skill>, ...],
  "missingKeywords": [<keyword>, ...]
}}"""
