# tests/test_gemini_client.py
from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, List

import pytest
from google.genai import types

import functions.interview_kit.gemini_client as gc_mod
from functions.interview_kit.generation_schema import INTERVIEW_KIT_RESPONSE_SCHEMA
from functions.interview_kit.resume_attachment import ResumeAttachment


@pytest.fixture
def anyio_backend():
    return "asyncio"


class _FakeModels:
    def __init__(self, text: Any):
        self.text = text
        self.calls: List[Dict[str, Any]] = []

    async def generate_content(self, *, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        return SimpleNamespace(text=self.text)


class _FakeGenaiClient:
    """
    Mimics google.genai.Client used as:
      client.aio.models.generate_content(model=..., contents=..., config=...)
    """

    instances: List["_FakeGenaiClient"] = []

    def __init__(self, *, api_key=None, http_options=None):
        self.api_key = api_key
        self.http_options = http_options
        self.models = _FakeModels('{"questions": []}')
        self.aio = SimpleNamespace(models=self.models)
        _FakeGenaiClient.instances.append(self)


@pytest.fixture
def fake_genai(monkeypatch: pytest.MonkeyPatch):
    _FakeGenaiClient.instances = []
    monkeypatch.setattr(gc_mod.genai, "Client", _FakeGenaiClient)
    return _FakeGenaiClient


def test_client_is_not_created_until_first_call(fake_genai) -> None:
    gc_mod.GeminiClient(model="gemini-test", api_key="k")
    assert fake_genai.instances == []


@pytest.mark.anyio
async def test_generate_json_builds_structured_output_config(fake_genai) -> None:
    client = gc_mod.GeminiClient(model="gemini-test", api_key="secret")

    text = await client.generate_json(
        "PROMPT",
        response_schema=INTERVIEW_KIT_RESPONSE_SCHEMA,
        temperature=0.61,
        top_p=0.96,
    )

    assert text == '{"questions": []}'
    assert len(fake_genai.instances) == 1
    sdk = fake_genai.instances[0]
    assert sdk.api_key == "secret"
    assert sdk.http_options is None

    call = sdk.models.calls[0]
    assert call["model"] == "gemini-test"

    config: types.GenerateContentConfig = call["config"]
    assert config.temperature == pytest.approx(0.61)
    assert config.top_p == pytest.approx(0.96)
    assert config.response_mime_type == "application/json"
    assert config.response_schema == INTERVIEW_KIT_RESPONSE_SCHEMA

    (content,) = call["contents"]
    assert content.role == "user"
    assert [p.text for p in content.parts] == ["PROMPT"]


@pytest.mark.anyio
async def test_generate_json_attaches_inline_documents(fake_genai) -> None:
    client = gc_mod.GeminiClient(model="gemini-test")
    attachment = ResumeAttachment(mime_type="application/pdf", data=b"%PDF")

    await client.generate_json(
        "PROMPT",
        response_schema=INTERVIEW_KIT_RESPONSE_SCHEMA,
        temperature=0.5,
        top_p=0.9,
        attachments=[attachment],
    )

    (content,) = fake_genai.instances[0].models.calls[0]["contents"]
    assert len(content.parts) == 2
    inline = content.parts[1].inline_data
    assert inline.mime_type == "application/pdf"
    assert inline.data == b"%PDF"


@pytest.mark.anyio
async def test_generate_json_reuses_sdk_client_and_applies_timeout(fake_genai) -> None:
    client = gc_mod.GeminiClient(model="gemini-test", timeout_seconds=2.5)

    for _ in range(2):
        await client.generate_json(
            "PROMPT",
            response_schema=INTERVIEW_KIT_RESPONSE_SCHEMA,
            temperature=0.5,
            top_p=0.9,
        )

    assert len(fake_genai.instances) == 1
    assert fake_genai.instances[0].http_options.timeout == 2500


def test_response_schema_excludes_id_and_requires_question_fields() -> None:
    questions = INTERVIEW_KIT_RESPONSE_SCHEMA.properties["questions"]
    assert questions.type == types.Type.ARRAY

    item = questions.items
    assert set(item.properties) == {"question", "modelAnswer"}
    assert "id" not in item.properties
    assert set(item.required) == {"question", "modelAnswer"}
