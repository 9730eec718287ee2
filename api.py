"""
api.py

WHAT THIS FILE IS FOR
---------------------
This module defines the FastAPI application entrypoint for the
Interview Kit Generator.

It is responsible for:
- Creating the FastAPI app instance (title/version/description)
- Registering middleware for:
    - Correlation ID propagation (X-Correlation-Id)
    - API version validation (X-API-Version)
- Defining standard error responses using a consistent schema:
    {code, message, subErrors, timestamp, correlationId}
- Registering exception handlers for:
    - RequestValidationError (400 VALIDATION_FAILED)
    - HTTPException passthrough (with standardized envelope)
- Exposing HTTP endpoints:
    - GET /health and /healthz
    - POST /api/v1/interview-kits (primary public contract)

REQUEST/RESPONSE CONTRACT RULES
-------------------------------
- Request payload accepts both camelCase and snake_case field names
  (handled by the Pydantic input schema).
- Response payload is camelCase across nested objects
  (model_answer -> modelAnswer, correlation_id -> correlationId).

DESIGN INTENT
-------------
This file contains ONLY the HTTP layer:
- routing
- middleware
- exception handling
- response formatting / normalization

Prompt rendering, the generation call and post-processing live in:
- functions/interview_kit/*
"""

from __future__ import annotations

import time
import uuid
from typing import Any, Optional

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from functions.interview_kit.errors import InterviewKitGenerationError
from functions.interview_kit.interview_kit_service import InterviewKitService
from functions.utils.json_naming_converter import convert_keys_snake_to_camel
from functions.utils.settings import get_settings
from schemas.input_schema import InterviewKitRequest
from schemas.output_schema import InterviewKitEnvelope

logger = structlog.get_logger(__name__)

settings = get_settings()
svc = InterviewKitService(settings)

app = FastAPI(
    title="Interview Kit Generator",
    version="1.0.0",
    description="Generates technical interview question/answer kits from a job description and candidate context.",
)

CORRELATION_HEADER = "X-Correlation-Id"
API_VERSION_HEADER = "X-API-Version"
SUPPORTED_API_VERSIONS = {"1"}


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------
def _get_or_create_correlation_id(request: Request) -> str:
    incoming = request.headers.get(CORRELATION_HEADER)
    return incoming.strip() if incoming and incoming.strip() else f"corr_{uuid.uuid4().hex}"


def _get_api_version(request: Request) -> str:
    v = getattr(request.state, "api_version", None)
    return str(v) if v else request.headers.get(API_VERSION_HEADER, "1").strip() or "1"


def _std_error(
    *,
    code: str,
    message: str,
    correlation_id: str,
    http_status: int,
    api_version: str = "1",
    sub_errors: Optional[list[dict[str, Any]]] = None,
) -> JSONResponse:
    payload = {
        "code": code,
        "message": message,
        "subErrors": sub_errors or [],
        "timestamp": int(time.time()),
        "correlationId": correlation_id,
    }
    headers = {
        CORRELATION_HEADER: correlation_id,
        API_VERSION_HEADER: api_version,
    }
    return JSONResponse(status_code=http_status, content=payload, headers=headers)


# -------------------------------------------------------------------
# Middleware
# -------------------------------------------------------------------
# Registration order matters: the last registered middleware runs first,
# so the correlation id is set before the version check can reject.
@app.middleware("http")
async def api_version_middleware(request: Request, call_next):
    correlation_id = getattr(request.state, "correlation_id", f"corr_{uuid.uuid4().hex}")
    version = request.headers.get(API_VERSION_HEADER, "1").strip() or "1"

    if version not in SUPPORTED_API_VERSIONS:
        return _std_error(
            code="INVALID_FIELD_VALUE",
            message="Invalid API version",
            correlation_id=correlation_id,
            http_status=400,
            sub_errors=[
                {
                    "field": API_VERSION_HEADER,
                    "errors": [{"code": "isIn", "message": "Supported versions: 1"}],
                }
            ],
        )

    request.state.api_version = version
    response = await call_next(request)
    response.headers[API_VERSION_HEADER] = version
    return response


@app.middleware("http")
async def correlation_id_middleware(request: Request, call_next):
    correlation_id = _get_or_create_correlation_id(request)
    request.state.correlation_id = correlation_id
    response = await call_next(request)
    response.headers[CORRELATION_HEADER] = correlation_id
    return response


# -------------------------------------------------------------------
# Exception handlers
# -------------------------------------------------------------------
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    correlation_id = getattr(request.state, "correlation_id", f"corr_{uuid.uuid4().hex}")
    api_version = _get_api_version(request)

    sub_errors: list[dict[str, Any]] = []
    for err in exc.errors():
        field = ".".join(str(x) for x in err.get("loc", []) if x != "body") or "body"
        sub_errors.append(
            {
                "field": field,
                "errors": [{"code": err.get("type"), "message": err.get("msg")}],
            }
        )

    logger.info(
        "request_validation_failed",
        correlation_id=correlation_id,
        error_count=len(sub_errors),
    )

    return _std_error(
        code="VALIDATION_FAILED",
        message="Validation failed",
        correlation_id=correlation_id,
        http_status=400,
        api_version=api_version,
        sub_errors=sub_errors,
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    correlation_id = getattr(request.state, "correlation_id", f"corr_{uuid.uuid4().hex}")
    api_version = _get_api_version(request)

    logger.warning(
        "http_exception",
        correlation_id=correlation_id,
        status_code=exc.status_code,
        detail=str(exc.detail),
    )

    message = str(exc.detail.get("message")) if isinstance(exc.detail, dict) else str(exc.detail)
    sub_errors: list[dict[str, Any]] = []

    if isinstance(exc.detail, dict) and exc.detail.get("code"):
        sub_errors.append(
            {
                "field": "generation",
                "errors": [{"code": exc.detail["code"], "message": message}],
            }
        )

    return _std_error(
        code="BAD_GATEWAY" if exc.status_code >= 500 else "HTTP_ERROR",
        message=message,
        correlation_id=correlation_id,
        http_status=exc.status_code,
        api_version=api_version,
        sub_errors=sub_errors,
    )


# -------------------------------------------------------------------
# Endpoints
# -------------------------------------------------------------------
@app.get("/healthz")
@app.get("/health")
async def health():
    return {
        "status": "ok",
        "service": settings.service_name,
        "environment": settings.environment,
    }


@app.post("/api/v1/interview-kits", response_model=InterviewKitEnvelope)
async def generate_interview_kit(payload: InterviewKitRequest, request: Request) -> JSONResponse:
    correlation_id = getattr(request.state, "correlation_id", f"corr_{uuid.uuid4().hex}")

    # ---------------------------------------------------------------
    # 1) Generate
    #
    # Empty / unusable model output and SDK failures both surface as 502;
    # the sub-error code tells them apart.
    # ---------------------------------------------------------------
    try:
        kit = await svc.generate(payload, correlation_id=correlation_id)
    except InterviewKitGenerationError as exc:
        raise HTTPException(
            status_code=502,
            detail={"code": "GENERATION_EMPTY", "message": str(exc)},
        )
    except Exception as exc:
        logger.error(
            "interview_kit_generation_call_failed",
            correlation_id=correlation_id,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        raise HTTPException(
            status_code=502,
            detail={"code": "GENERATION_CALL_FAILED", "message": str(exc)},
        )

    # ---------------------------------------------------------------
    # 2) Build stable response
    # ---------------------------------------------------------------
    metadata: Optional[dict[str, Any]] = None
    if settings.enable_debug_metadata:
        metadata = {
            "question_count": len(kit.questions),
            "expected_question_count": settings.expected_question_count,
        }

    envelope = InterviewKitEnvelope(
        status="success",
        correlation_id=correlation_id,
        data=kit,
        metadata=metadata,
    )

    return JSONResponse(status_code=200, content=convert_keys_snake_to_camel(envelope.model_dump()))
