# tests/test_resume_attachment.py
from __future__ import annotations

import base64

from functions.interview_kit.resume_attachment import (
    ResumeAttachment,
    parse_resume_data_uri,
)

PDF_BYTES = b"%PDF-1.7 fake resume"
PDF_B64 = base64.b64encode(PDF_BYTES).decode("ascii")


def test_parse_returns_none_for_absent_or_blank_values() -> None:
    assert parse_resume_data_uri(None) is None
    assert parse_resume_data_uri("") is None
    assert parse_resume_data_uri("   ") is None


def test_parse_decodes_base64_pdf_data_uri() -> None:
    out = parse_resume_data_uri(f"data:application/pdf;base64,{PDF_B64}", "cv.pdf")
    assert out == ResumeAttachment(mime_type="application/pdf", data=PDF_BYTES, file_name="cv.pdf")


def test_parse_accepts_extra_parameters_before_base64() -> None:
    out = parse_resume_data_uri(f"data:application/pdf;name=cv.pdf;base64,{PDF_B64}")
    assert out is not None
    assert out.mime_type == "application/pdf"
    assert out.data == PDF_BYTES


def test_parse_guesses_mime_from_file_name_when_missing() -> None:
    out = parse_resume_data_uri(f"data:;base64,{PDF_B64}", "resume.pdf")
    assert out is not None
    assert out.mime_type == "application/pdf"


def test_parse_rejects_non_data_uri_values() -> None:
    assert parse_resume_data_uri("https://example.com/cv.pdf") is None
    assert parse_resume_data_uri("data:application/pdf") is None


def test_parse_rejects_non_base64_data_uri() -> None:
    assert parse_resume_data_uri("data:text/plain,hello%20world") is None


def test_parse_rejects_invalid_or_empty_payload() -> None:
    assert parse_resume_data_uri("data:application/pdf;base64,***not-base64***") is None
    assert parse_resume_data_uri("data:application/pdf;base64,") is None


def test_parse_skips_when_mime_type_cannot_be_resolved() -> None:
    assert parse_resume_data_uri(f"data:;base64,{PDF_B64}") is None
    assert parse_resume_data_uri(f"data:application/octet-stream;base64,{PDF_B64}") is None


def test_parse_skips_docx_resume_not_supported_inline() -> None:
    docx_mime = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    docx_b64 = base64.b64encode(b"PK\x03\x04 fake docx").decode("ascii")

    assert parse_resume_data_uri(f"data:{docx_mime};base64,{docx_b64}", "cv.docx") is None
    assert parse_resume_data_uri(f"data:;base64,{docx_b64}", "cv.docx") is None


def test_parse_accepts_image_and_text_resumes() -> None:
    png = parse_resume_data_uri(f"data:image/png;base64,{PDF_B64}")
    txt = parse_resume_data_uri(f"data:text/plain;base64,{PDF_B64}")
    assert png is not None and png.mime_type == "image/png"
    assert txt is not None and txt.mime_type == "text/plain"


def test_parse_decodes_line_wrapped_base64() -> None:
    pdf_bytes = b"%PDF-1.7 " + b"x" * 200
    wrapped = base64.encodebytes(pdf_bytes).decode("ascii")
    assert "\n" in wrapped

    out = parse_resume_data_uri(f"data:application/pdf;base64,{wrapped}")
    assert out is not None
    assert out.data == pdf_bytes


def test_parse_decodes_percent_encoded_payload() -> None:
    raw = b"\xfb\xff\xfe resume"
    encoded = base64.b64encode(raw).decode("ascii")
    assert "+" in encoded or "/" in encoded
    quoted = encoded.replace("+", "%2B").replace("/", "%2F").replace("=", "%3D")

    out = parse_resume_data_uri(f"data:application/pdf;base64,{quoted}")
    assert out is not None
    assert out.data == raw
