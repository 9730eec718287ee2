"""
functions/interview_kit/gemini_client.py

WHAT THIS FILE IS FOR
---------------------
This module provides a minimal, asynchronous client abstraction over the
google-genai SDK, used by InterviewKitService to call the Gemini model.

It exists to:
- Centralize how the SDK client is created (API key, timeout)
- Build the structured-output generation config
  (JSON mime type + response schema + sampling parameters)
- Attach an optional inline document next to the prompt text
- Avoid scattering raw `client.aio.models.generate_content(...)` calls

This client is intentionally kept *very thin*.

WHAT THIS FILE IS NOT FOR
-------------------------
This module is NOT responsible for:
- Retry logic (the service never retries)
- Logging prompts or replies
- Parsing or validating the returned JSON
- Translating SDK errors (google.genai.errors.* propagate unchanged)

Those responsibilities belong to InterviewKitService.

TIMEOUT SEMANTICS
-----------------
`timeout_seconds` is converted to milliseconds for
`google.genai.types.HttpOptions(timeout=...)`. None keeps the SDK default.
"""

from __future__ import annotations

from typing import Optional, Sequence

from google import genai
from google.genai import types

from functions.interview_kit.resume_attachment import ResumeAttachment


class GeminiClient:
    """
    Thin async wrapper around `google.genai.Client`.

    The SDK client is created lazily on first call so that importing the
    application does not require credentials.
    """

    def __init__(
        self,
        *,
        model: str,
        api_key: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self.model = model
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        if self._client is None:
            http_options = None
            if self._timeout_seconds:
                http_options = types.HttpOptions(timeout=int(self._timeout_seconds * 1000))
            self._client = genai.Client(api_key=self._api_key, http_options=http_options)
        return self._client

    async def generate_json(
        self,
        prompt: str,
        *,
        response_schema: types.Schema,
        temperature: float,
        top_p: float,
        attachments: Sequence[ResumeAttachment] = (),
    ) -> Optional[str]:
        """
        Send one structured-output request and return the raw reply text.

        Returns:
            The JSON text of the reply, or None when the model returned
            no text (e.g. blocked or empty candidate).

        Raises:
            google.genai.errors.APIError and transport errors, unchanged.
        """
        parts = [types.Part.from_text(text=prompt)]
        parts.extend(
            types.Part.from_bytes(data=a.data, mime_type=a.mime_type) for a in attachments
        )

        config = types.GenerateContentConfig(
            temperature=temperature,
            top_p=top_p,
            response_mime_type="application/json",
            response_schema=response_schema,
        )

        response = await self._get_client().aio.models.generate_content(
            model=self.model,
            contents=[types.Content(role="user", parts=parts)],
            config=config,
        )
        return response.text
