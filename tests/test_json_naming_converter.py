# tests/test_json_naming_converter.py
from __future__ import annotations

from functions.utils.json_naming_converter import convert_keys_snake_to_camel, snake_to_camel


def test_snake_to_camel_basic() -> None:
    assert snake_to_camel("model_answer") == "modelAnswer"
    assert snake_to_camel("correlation_id") == "correlationId"
    assert snake_to_camel("expected_question_count") == "expectedQuestionCount"
    assert snake_to_camel("id") == "id"  # unchanged when no underscore


def test_snake_to_camel_preserves_leading_and_trailing_underscores() -> None:
    assert snake_to_camel("_hello_world") == "_helloWorld"
    assert snake_to_camel("hello_world_") == "helloWorld_"
    assert snake_to_camel("__hello_world__") == "__helloWorld__"
    assert snake_to_camel("___") == "___"


def test_snake_to_camel_collapses_double_underscores_inside() -> None:
    assert snake_to_camel("model__answer") == "modelAnswer"


def test_convert_keys_snake_to_camel_converts_interview_kit_envelope() -> None:
    inp = {
        "status": "success",
        "correlation_id": "corr-1",
        "data": {
            "questions": [
                {"id": "a", "question": "Q?", "model_answer": "- some_snake_text"},
            ]
        },
        "metadata": {"question_count": 1},
    }

    out = convert_keys_snake_to_camel(inp)

    assert out["correlationId"] == "corr-1"
    assert out["data"]["questions"][0]["modelAnswer"] == "- some_snake_text"  # values untouched
    assert out["metadata"]["questionCount"] == 1
    assert "correlation_id" in inp  # input not mutated


def test_convert_keys_snake_to_camel_leaves_primitives_intact() -> None:
    assert convert_keys_snake_to_camel("x_y") == "x_y"
    assert convert_keys_snake_to_camel(123) == 123
    assert convert_keys_snake_to_camel(None) is None
    assert convert_keys_snake_to_camel(True) is True
    assert convert_keys_snake_to_camel({1: "a"}) == {1: "a"}
