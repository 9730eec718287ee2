"""
functions/interview_kit/resume_attachment.py

WHAT THIS FILE IS FOR
---------------------
Turns the optional `candidateResumeDataUri` request field into an
inline document the generation model can read directly.

Accepted form (RFC 2397, base64 only):

    data:<mime-type>[;param=value...];base64,<payload>

The payload may be percent-encoded and may be line-wrapped
(RFC 2045, 76 chars per line); both are normalized before decoding.

Parsing is lenient: an unusable value is NOT a request error. The
attachment is skipped, a warning is logged, and generation proceeds
with the prompt alone (the URI is still interpolated into the prompt).

MIME RESOLUTION
---------------
1) mime type declared in the data URI
2) guessed from the resume file name extension

Only types Gemini accepts as inline data are attached:
    application/pdf, image/*, text/*
Anything else (DOCX, unknown / octet-stream) is skipped.

WHAT THIS FILE IS NOT FOR
-------------------------
This module MUST NOT:
- Log document bytes or the raw URI
- Extract text from the document
- Call the generation service
"""

from __future__ import annotations

import base64
import binascii
import mimetypes
from dataclasses import dataclass
from typing import Optional
from urllib.parse import unquote

import structlog

logger = structlog.get_logger(__name__)

DATA_URI_PREFIX = "data:"

INLINE_MIME_TYPES = {"application/pdf"}
INLINE_MIME_PREFIXES = ("image/", "text/")


@dataclass(frozen=True)
class ResumeAttachment:
    mime_type: str
    data: bytes
    file_name: Optional[str] = None


def is_inline_mime_type(mime_type: Optional[str]) -> bool:
    if not mime_type:
        return False
    return mime_type in INLINE_MIME_TYPES or mime_type.startswith(INLINE_MIME_PREFIXES)


def parse_resume_data_uri(
    data_uri: Optional[str],
    file_name: Optional[str] = None,
) -> Optional[ResumeAttachment]:
    """
    Parse a base64 data URI into a ResumeAttachment.

    Returns None (never raises) when the value is absent, blank,
    not a base64 data URI, decodes to nothing, or has a mime type
    that cannot be sent inline.
    """
    if not isinstance(data_uri, str) or not data_uri.strip():
        return None

    value = data_uri.strip()
    if not value.lower().startswith(DATA_URI_PREFIX) or "," not in value:
        logger.warning("resume_data_uri_not_data_uri", file_name=file_name)
        return None

    header, payload = value[len(DATA_URI_PREFIX):].split(",", 1)
    params = [p.strip() for p in header.split(";")]

    if "base64" not in (p.lower() for p in params[1:]):
        logger.warning("resume_data_uri_not_base64", file_name=file_name)
        return None

    mime_type = params[0].lower() if params[0] else None
    if not mime_type and file_name:
        mime_type, _ = mimetypes.guess_type(file_name)

    if not is_inline_mime_type(mime_type):
        logger.warning("resume_data_uri_unsupported_mime", mime_type=mime_type, file_name=file_name)
        return None

    payload = "".join(unquote(payload).split())
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        logger.warning("resume_data_uri_decode_failed", file_name=file_name, error=str(exc))
        return None

    if not data:
        logger.warning("resume_data_uri_empty", file_name=file_name)
        return None

    attachment = ResumeAttachment(mime_type=mime_type, data=data, file_name=file_name)

    logger.debug(
        "resume_attachment_parsed",
        mime_type=attachment.mime_type,
        size_bytes=len(data),
        file_name=file_name,
    )
    return attachment
