# -------------------------------------------------------------------
# schemas/input_schema.py
#
# WHAT THIS FILE IS FOR
# --------------------
# This module defines the **public request schema** for the
# Interview Kit Generator API.
#
# It specifies the exact structure and types of an incoming
# interview kit request: the job description, the candidate
# profile reference, and the optional resume / experience context.
#
# KEY DESIGN DECISION
# -------------------
# This schema supports **both camelCase and snake_case** JSON
# field naming.
#
# Example (both valid):
#   - snake_case: job_description, unstop_profile_link
#   - camelCase:  jobDescription, unstopProfileLink
#
# This is implemented via:
#   - alias=camelCase on each field
#   - populate_by_name=True in model_config
#
# REQUIRED VS OPTIONAL
# --------------------
# - job_description and unstop_profile_link are REQUIRED
# - candidate_resume_data_uri, candidate_resume_file_name and
#   candidate_experience_context are OPTIONAL (absent or null)
#
# All fields are plain strings. The profile link is only a reference
# handed to the model; it is never fetched by this service.
#
# WHAT THIS FILE IS NOT FOR
# ------------------------
# This module does NOT:
# - Render prompts
# - Decode the resume data URI
# - Call the generation service
#
# It strictly defines **input validation and typing**.
# -------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InterviewKitRequest(BaseModel):
    """
    Request payload for interview kit generation.

    Supports both snake_case and camelCase JSON field names.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "jobDescription": "Backend engineer. Go, PostgreSQL, Kubernetes.",
                "unstopProfileLink": "https://unstop.com/u/jane-doe",
                "candidateResumeFileName": "jane_doe_resume.pdf",
                "candidateExperienceContext": "Mid-level, 4 years, payments domain",
            }
        },
    )

    job_description: str = Field(
        ...,
        alias="jobDescription",
        description="The job description to generate an interview kit for.",
    )

    unstop_profile_link: str = Field(
        ...,
        alias="unstopProfileLink",
        description="Candidate profile link. Passed to the model as a reference, never fetched.",
    )

    candidate_resume_data_uri: Optional[str] = Field(
        None,
        alias="candidateResumeDataUri",
        description="Full data URI (base64) of the candidate resume, e.g. data:application/pdf;base64,...",
    )

    candidate_resume_file_name: Optional[str] = Field(
        None,
        alias="candidateResumeFileName",
        description="Filename of the resume, for context.",
    )

    candidate_experience_context: Optional[str] = Field(
        None,
        alias="candidateExperienceContext",
        description=(
            "Optional brief context about the candidate's experience level, "
            "current role or past tech stack."
        ),
    )
