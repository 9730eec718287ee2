"""
functions/interview_kit/errors.py

Domain errors raised by the interview kit flow.

Only one error kind is defined on purpose: anything raised by the
generation SDK itself (network, quota, API errors) propagates unchanged
and is NOT wrapped here.
"""

from __future__ import annotations


class InterviewKitGenerationError(RuntimeError):
    """
    The generation call produced no usable output.

    Raised when the reply is empty, is not parseable into the
    generation shape, or lacks the top-level `questions` field.
    Terminal: never retried.
    """
