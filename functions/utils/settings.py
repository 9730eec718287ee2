"""
functions/utils/settings.py

WHAT THIS FILE IS FOR
---------------------
This module defines the *single source of truth* for runtime configuration
of the Interview Kit Generator.

It is responsible for:
- Defining all supported configuration fields (via Pydantic BaseSettings)
- Loading default values from parameters/parameters.yaml
- Overriding defaults with environment variables (INTERVIEW_KIT_*)
- Validating generation parameters (model, temperature, top_p)
- Exposing a cached, fully-validated Settings object to the application

LOAD & PRECEDENCE MODEL
-----------------------
Configuration is loaded in the following order (last wins):

1) YAML defaults from:
       parameters/parameters.yaml
2) Environment variables:
       INTERVIEW_KIT_*

The Gemini API key is optional here. When unset, the google-genai SDK
falls back to GOOGLE_API_KEY / GEMINI_API_KEY from the environment.

WHAT THIS FILE IS NOT FOR
-------------------------
This module is NOT responsible for:
- Creating the generation client
- Prompt rendering
- Request handling

DESIGN INTENT
-------------
- All runtime-configurable behavior MUST be declared here
- Adding a new config option requires:
    1) Adding a field to Settings
    2) Optionally documenting it in parameters/parameters.yaml
- Any invalid setting should fail fast at startup
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml
from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

PARAMETERS_PATH = Path(__file__).resolve().parents[2] / "parameters" / "parameters.yaml"


class Settings(BaseSettings):
    """
    Runtime settings for the Interview Kit Generator.

    Load order / precedence:
        1) YAML defaults (parameters/parameters.yaml)
        2) Environment variables (INTERVIEW_KIT_*), overriding YAML
    """

    model_config = SettingsConfigDict(
        env_prefix="INTERVIEW_KIT_",
        extra="ignore",
    )

    # Service metadata
    service_name: str = "interview_kit_generator"
    environment: str = "local"

    # Generation service
    gemini_api_key: Optional[SecretStr] = None
    gemini_model: str = Field(default="gemini-2.5-flash", min_length=1)

    # Sampling: varied but focused output (non-deterministic)
    temperature: float = Field(default=0.61, ge=0.0, le=2.0)
    top_p: float = Field(default=0.96, gt=0.0, le=1.0)

    # The prompt asks for this many items; only used to flag mismatches
    expected_question_count: int = Field(default=30, ge=1)

    # Passed to the SDK client; None leaves the SDK default in place
    generation_timeout_seconds: Optional[float] = Field(default=None, gt=0)

    # Feature flags
    attach_resume_media: bool = Field(
        default=True,
        description="If true, a valid resume data URI is sent to the model as an inline document.",
    )

    enable_debug_metadata: bool = Field(
        default=False,
        description="If true, responses include question count metadata.",
    )


@lru_cache(maxsize=1)
def _load_yaml_parameters() -> Dict[str, Any]:
    """
    Load base configuration from parameters/parameters.yaml.
    """
    if not PARAMETERS_PATH.exists():
        logger.warning("parameters_yaml_missing", expected=str(PARAMETERS_PATH))
        return {}

    try:
        with PARAMETERS_PATH.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            logger.warning(
                "parameters_yaml_not_dict",
                path=str(PARAMETERS_PATH),
                type=type(data).__name__,
            )
            return {}
        logger.info("parameters_yaml_loaded", path=str(PARAMETERS_PATH))
        return data
    except Exception as exc:  # noqa: BLE001
        logger.error("parameters_yaml_load_error", path=str(PARAMETERS_PATH), error=str(exc))
        return {}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Construct and return the final validated Settings object.

    Cached (singleton per process). Any code needing configuration
    should call this function, not instantiate Settings() directly.
    """
    # 1) YAML defaults
    yaml_data = _load_yaml_parameters()

    # 2) env overrides (partial)
    try:
        env_settings = Settings()
        env_data = env_settings.model_dump(exclude_unset=True)
        logger.info("settings_loaded_env_only_partial", fields=list(env_data.keys()))
    except ValidationError as exc:
        logger.warning("settings_env_validation_error", errors=exc.errors())
        env_data = {}

    # 3) merge
    merged: Dict[str, Any] = {**yaml_data, **env_data}

    # 4) final validation (fail fast)
    try:
        settings = Settings.model_validate(merged)
    except ValidationError as exc:
        logger.error("settings_invalid", errors=exc.errors(), yaml_path=str(PARAMETERS_PATH))
        raise RuntimeError(
            "Invalid interview kit settings. "
            "Check environment variables (INTERVIEW_KIT_*) "
            f"and {PARAMETERS_PATH}."
        ) from exc

    if settings.gemini_api_key is None:
        logger.warning("settings_gemini_api_key_unset", fallback="GOOGLE_API_KEY/GEMINI_API_KEY")

    logger.info(
        "settings_loaded",
        environment=settings.environment,
        service_name=settings.service_name,
        gemini_model=settings.gemini_model,
        temperature=settings.temperature,
        top_p=settings.top_p,
        expected_question_count=settings.expected_question_count,
        generation_timeout_seconds=settings.generation_timeout_seconds,
        attach_resume_media=settings.attach_resume_media,
        enable_debug_metadata=settings.enable_debug_metadata,
    )

    return settings
