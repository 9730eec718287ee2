"""
functions/interview_kit/interview_kit_service.py

WHAT THIS FILE IS FOR
---------------------
This module defines the single externally-callable operation of the
Interview Kit Generator:

    InterviewKitService.generate(request) -> InterviewKitResponse

CALL FLOW CONTEXT
-----------------
FastAPI (api.py)
  -> InterviewKitService.generate()
      -> render_interview_kit_prompt()
      -> parse_resume_data_uri()          (optional inline document)
      -> GeminiClient.generate_json()     (structured output)
      -> parse_generated_interview_kit()
      -> finalize_interview_kit()

POST-PROCESSING RULES
---------------------
- No reply, unparseable reply, or reply without `questions`
    -> InterviewKitGenerationError (terminal, never retried)
- Every returned item becomes a QuestionAnswerPair:
    - id            = fresh uuid4
    - question      = model text, or "Missing question text"
    - model_answer  = model text, or "Missing model answer."
- Order is preserved. settings.expected_question_count sets the
  count requested in the prompt and the response schema; the returned
  count is NOT enforced, a mismatch is only logged.

ERROR HANDLING RULES
--------------------
- Errors raised by the generation SDK propagate unchanged.
- No retries, no backoff, no partial-success reporting.

The service holds no per-request state; concurrent calls are independent.
"""

from __future__ import annotations

import uuid
from typing import Any, List, Optional

import structlog
from pydantic import ValidationError

from functions.interview_kit.errors import InterviewKitGenerationError
from functions.interview_kit.gemini_client import GeminiClient
from functions.interview_kit.generation_schema import interview_kit_response_schema
from functions.interview_kit.prompt_renderer import render_interview_kit_prompt
from functions.interview_kit.resume_attachment import ResumeAttachment, parse_resume_data_uri
from functions.utils.settings import Settings
from schemas.input_schema import InterviewKitRequest
from schemas.output_schema import (
    GeneratedInterviewKit,
    InterviewKitResponse,
    QuestionAnswerPair,
)

logger = structlog.get_logger(__name__)

MISSING_QUESTION_TEXT = "Missing question text"
MISSING_MODEL_ANSWER = "Missing model answer."
GENERATION_EMPTY_MESSAGE = "AI failed to generate interview kit content."


def parse_generated_interview_kit(raw_text: Optional[str]) -> Optional[GeneratedInterviewKit]:
    """
    Parse the model's JSON reply into the generation shape.

    Returns None for an empty reply. Raises InterviewKitGenerationError
    when the reply is not valid JSON of the expected shape.
    """
    if raw_text is None or not raw_text.strip():
        return None

    try:
        return GeneratedInterviewKit.model_validate_json(raw_text)
    except ValidationError as exc:
        logger.warning(
            "generated_interview_kit_parse_failed",
            error_count=exc.error_count(),
            reply_length=len(raw_text),
        )
        raise InterviewKitGenerationError(GENERATION_EMPTY_MESSAGE) from exc


def finalize_interview_kit(generated: Optional[GeneratedInterviewKit]) -> InterviewKitResponse:
    """
    Assign identifiers and default missing text.

    Pure apart from uuid generation.
    """
    if generated is None or generated.questions is None:
        raise InterviewKitGenerationError(GENERATION_EMPTY_MESSAGE)

    return InterviewKitResponse(
        questions=[
            QuestionAnswerPair(
                id=str(uuid.uuid4()),
                question=q.question or MISSING_QUESTION_TEXT,
                model_answer=q.model_answer or MISSING_MODEL_ANSWER,
            )
            for q in generated.questions
        ]
    )


class InterviewKitService:
    """
    Orchestrates prompt rendering, the generation call and post-processing.

    `client` is any object exposing an async `generate_json(...)` with the
    GeminiClient signature; tests inject fakes here.
    """

    def __init__(self, settings: Settings, client: Optional[Any] = None):
        self.settings = settings

        if client is None:
            api_key = settings.gemini_api_key.get_secret_value() if settings.gemini_api_key else None
            client = GeminiClient(
                model=settings.gemini_model,
                api_key=api_key,
                timeout_seconds=settings.generation_timeout_seconds,
            )
        self.client = client

    async def generate(
        self,
        request: InterviewKitRequest,
        *,
        correlation_id: Optional[str] = None,
    ) -> InterviewKitResponse:
        correlation_id = correlation_id or str(uuid.uuid4())

        prompt = render_interview_kit_prompt(
            request, question_count=self.settings.expected_question_count
        )
        attachments = self._resume_attachments(request)

        logger.info(
            "interview_kit_generation_started",
            correlation_id=correlation_id,
            model=self.settings.gemini_model,
            prompt_length=len(prompt),
            has_resume_attachment=bool(attachments),
            has_experience_context=bool(request.candidate_experience_context),
        )

        raw_text = await self.client.generate_json(
            prompt,
            response_schema=interview_kit_response_schema(self.settings.expected_question_count),
            temperature=self.settings.temperature,
            top_p=self.settings.top_p,
            attachments=attachments,
        )

        generated = parse_generated_interview_kit(raw_text)
        if generated is None or generated.questions is None:
            logger.error(
                "interview_kit_generation_empty",
                correlation_id=correlation_id,
                has_reply=raw_text is not None and bool(raw_text.strip()),
            )
        result = finalize_interview_kit(generated)

        count = len(result.questions)
        if count != self.settings.expected_question_count:
            logger.warning(
                "generated_question_count_mismatch",
                correlation_id=correlation_id,
                expected=self.settings.expected_question_count,
                actual=count,
            )

        logger.info(
            "interview_kit_generated",
            correlation_id=correlation_id,
            question_count=count,
            missing_question_count=sum(1 for q in result.questions if q.question == MISSING_QUESTION_TEXT),
            missing_answer_count=sum(1 for q in result.questions if q.model_answer == MISSING_MODEL_ANSWER),
        )
        return result

    def _resume_attachments(self, request: InterviewKitRequest) -> List[ResumeAttachment]:
        if not self.settings.attach_resume_media:
            return []

        attachment = parse_resume_data_uri(
            request.candidate_resume_data_uri,
            request.candidate_resume_file_name,
        )
        return [attachment] if attachment else []
