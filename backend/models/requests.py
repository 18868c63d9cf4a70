from pydantic import BaseModel, Field

# Input caps shared by the JSON and upload endpoints
MAX_RESUME_CHARS = 50000
MAX_JOB_DESCRIPTION_CHARS = 10000


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(
        ..., max_length=MAX_RESUME_CHARS, description="Plain text resume content"
    )
    job_description: str = Field(
        ..., max_length=MAX_JOB_DESCRIPTION_CHARS, description="Job description to match against"
    )
