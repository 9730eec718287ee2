# -------------------------------------------------------------------
# schemas/output_schema.py
#
# WHAT THIS FILE IS FOR
# --------------------
# This module defines two families of schemas:
#
# 1) GENERATION SHAPE (what the model must return)
#      GeneratedInterviewKit -> {"questions": [GeneratedQuestion, ...]}
#    Used to parse the raw JSON text returned by the generation
#    service. `id` is NOT part of this shape; identifiers are
#    assigned after generation. Item fields are optional here so
#    missing values can be defaulted instead of failing the call.
#    The model speaks camelCase ("modelAnswer"), so aliases apply.
#
# 2) FINALIZED SHAPE (what this service returns)
#      InterviewKitResponse -> {"questions": [QuestionAnswerPair, ...]}
#      InterviewKitEnvelope -> HTTP response envelope
#
# NAMING CONVENTION (IMPORTANT)
# -----------------------------
# Finalized schemas use **snake_case**. At the API boundary (api.py)
# they are converted to camelCase JSON using:
#     convert_keys_snake_to_camel()
#
# DO NOT rename finalized fields to camelCase here.
# -------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# -------------------------------------------------------------------
# Generation shape
# -------------------------------------------------------------------
class GeneratedQuestion(BaseModel):
    """
    One question/answer item as produced by the model.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    question: Optional[str] = None
    model_answer: Optional[str] = Field(None, alias="modelAnswer")


class GeneratedInterviewKit(BaseModel):
    """
    Raw generation result. `questions` is None when the model omitted it.
    """

    model_config = ConfigDict(extra="ignore")

    questions: Optional[List[GeneratedQuestion]] = None


# -------------------------------------------------------------------
# Finalized shape
# -------------------------------------------------------------------
class QuestionAnswerPair(BaseModel):
    """
    A finalized question/answer pair: identifier assigned, text defaulted.
    """

    id: str = Field(..., min_length=1)
    question: str = Field(..., min_length=1)
    model_answer: str = Field(..., min_length=1)


class InterviewKitResponse(BaseModel):
    questions: List[QuestionAnswerPair] = Field(default_factory=list)


class InterviewKitEnvelope(BaseModel):
    """
    Standard response envelope for the interview kit API.

    NOTE:
    - This schema is INTERNAL and uses snake_case.
    - Keys are converted to camelCase at the API boundary.
    """

    model_config = {"extra": "forbid"}

    status: Literal["success", "error"] = "success"

    data: Optional[InterviewKitResponse] = None

    # Always injected by api.py
    correlation_id: Optional[str] = None

    # Debug-only metadata (question counts), see enable_debug_metadata
    metadata: Optional[Dict[str, Any]] = None
