from pydantic import BaseModel, Field

from config import settings


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., min_length=1, max_length=50000, description="Plain text resume content")
    job_description: str = Field(
        ...,
        min_length=1,
        max_length=settings.max_job_description_chars,
        description="Job description text",
    )
    industry: str = Field("general", max_length=100, description="Industry label echoed in the result")
