"""
functions/interview_kit/generation_schema.py

Output-shape constraint handed to the generation service.

Mirrors schemas.output_schema.GeneratedInterviewKit, expressed as a
google-genai Schema so the model is forced to reply with:

    {"questions": [{"question": str, "modelAnswer": str}, ...]}

`id` is deliberately absent; identifiers are assigned after generation.
Descriptions are read by the model and carry formatting guidance.
"""

from __future__ import annotations

from functools import lru_cache

from google.genai import types

DEFAULT_QUESTION_COUNT = 30

QUESTION_ANSWER_PAIR_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "question": types.Schema(
            type=types.Type.STRING,
            description="A crisp, direct, and deeply technical interview question.",
        ),
        "modelAnswer": types.Schema(
            type=types.Type.STRING,
            description=(
                "A comprehensive, multi-point answer formatted as a single string with "
                "multiple bullet points (e.g. '- Point one.\\n- Point two.\\n- Point three.'). "
                "For code/queries, the code block MUST come first, wrapped in triple "
                "backticks, followed by the explanatory points."
            ),
        ),
    },
    required=["question", "modelAnswer"],
    property_ordering=["question", "modelAnswer"],
)


@lru_cache(maxsize=8)
def interview_kit_response_schema(question_count: int = DEFAULT_QUESTION_COUNT) -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "questions": types.Schema(
                type=types.Type.ARRAY,
                description=(
                    f"A list of exactly {question_count} technical interview questions "
                    "with concise, multi-point answers."
                ),
                items=QUESTION_ANSWER_PAIR_SCHEMA,
            ),
        },
        required=["questions"],
    )


INTERVIEW_KIT_RESPONSE_SCHEMA = interview_kit_response_schema(DEFAULT_QUESTION_COUNT)
