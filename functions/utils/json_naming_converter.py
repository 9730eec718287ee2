"""
functions/utils/json_naming_converter.py

WHAT THIS FILE IS FOR
---------------------
Recursive snake_case -> camelCase key conversion, applied once at the API
boundary so internal models stay Pythonic while responses match the
camelCase request contract (e.g. model_answer -> modelAnswer,
correlation_id -> correlationId).

- Walks nested dicts and lists
- Leaves values and non-string keys untouched
- Returns a new object; the input is never mutated

WHAT THIS FILE IS NOT FOR
-------------------------
No validation, no I/O, no logging. Pure transformation only.
"""

from __future__ import annotations

from typing import Any


def snake_to_camel(s: str) -> str:
    """
    Convert a snake_case name to camelCase.

    Names without '_' come back unchanged; leading and trailing
    underscores are kept as-is.
    """
    if "_" not in s:
        return s

    core = s.strip("_")
    if not core:
        return s

    prefix = s[: len(s) - len(s.lstrip("_"))]
    suffix = s[len(s.rstrip("_")):]

    head, *tail = [p for p in core.split("_") if p]
    return prefix + head + "".join(p[:1].upper() + p[1:] for p in tail) + suffix


def convert_keys_snake_to_camel(obj: Any) -> Any:
    """
    Recursively rename dict keys from snake_case to camelCase.
    """
    if isinstance(obj, list):
        return [convert_keys_snake_to_camel(x) for x in obj]

    if isinstance(obj, dict):
        return {
            (snake_to_camel(k) if isinstance(k, str) else k): convert_keys_snake_to_camel(v)
            for k, v in obj.items()
        }

    return obj
