"""
Tests for the Gemini SDK adapters, using mocked SDK objects.
"""

import asyncio
import sys
from dataclasses import dataclass, field
from unittest.mock import AsyncMock, MagicMock, Mock, patch

import google
import pytest

from services.errors import ProviderError
from services.gemini_client import (
    DiscoveryResult,
    GenAIClient,
    LegacyGenerativeAIClient,
    build_provider_client,
)


def _genai_model(name):
    model = Mock()
    model.name = name
    model.model_dump.return_value = {"name": name, "display_name": name.split("/")[-1]}
    return model


@pytest.fixture
def sdk_client():
    with patch("services.gemini_client.genai.Client") as client_cls:
        yield client_cls.return_value


def test_build_provider_client_without_key_returns_none():
    assert build_provider_client(None) is None
    assert build_provider_client("") is None


def test_build_provider_client_unknown_sdk_returns_none():
    assert build_provider_client("key", sdk="palm") is None


def test_build_provider_client_selects_genai_adapter(sdk_client):
    client = build_provider_client("key", sdk=" GenAI ")

    assert isinstance(client, GenAIClient)
    assert client.discovery_strategy() is client.modern_listing
    assert client.legacy_listing is None


def test_build_provider_client_absorbs_sdk_errors():
    with patch("services.gemini_client.genai.Client", side_effect=ValueError("bad key")):
        assert build_provider_client("key") is None


def test_genai_listing_returns_descriptors(sdk_client):
    sdk_client.models.list.return_value = [
        _genai_model("models/gemini-1.5-pro"),
        _genai_model("models/gemini-2.5-flash"),
    ]

    result = GenAIClient("key").modern_listing.list_models()

    assert result.ok
    assert [m.identifier for m in result.models] == ["models/gemini-1.5-pro", "models/gemini-2.5-flash"]
    assert result.models[1].raw_metadata == {"name": "models/gemini-2.5-flash", "display_name": "gemini-2.5-flash"}
    sdk_client.models.list.assert_called_once_with(config={"page_size": 50})


def test_genai_listing_failure_is_returned_not_raised(sdk_client):
    sdk_client.models.list.side_effect = RuntimeError("403 PERMISSION_DENIED")

    result = GenAIClient("key").modern_listing.list_models()

    assert result == DiscoveryResult.failure("403 PERMISSION_DENIED")
    assert not result.ok


def test_genai_get_model_and_generate(sdk_client):
    sdk_client.models.get.return_value = _genai_model("models/gemini-2.5-flash")
    sdk_client.aio.models.generate_content = AsyncMock(return_value=Mock(text="[]"))

    handle = GenAIClient("key").get_model("models/gemini-2.5-flash")
    output = asyncio.run(handle.generate_text("prompt"))

    assert handle.identifier == "models/gemini-2.5-flash"
    assert output == "[]"
    sdk_client.aio.models.generate_content.assert_awaited_once_with(
        model="models/gemini-2.5-flash", contents="prompt"
    )


def test_genai_get_model_failure_raises_provider_error(sdk_client):
    sdk_client.models.get.side_effect = RuntimeError("404 NOT_FOUND")

    with pytest.raises(ProviderError):
        GenAIClient("key").get_model("models/gemini-unknown")


@dataclass
class _LegacyModel:
    name: str
    supported_generation_methods: list = field(default_factory=lambda: ["generateContent"])


@pytest.fixture
def legacy_sdk():
    sdk = MagicMock()
    with patch.dict(sys.modules, {"google.generativeai": sdk}), patch.object(google, "generativeai", sdk, create=True):
        yield sdk


def test_legacy_adapter_lists_and_generates(legacy_sdk):
    legacy_sdk.list_models.return_value = [_LegacyModel("models/gemini-2.5-pro")]
    legacy_sdk.GenerativeModel.return_value.generate_content_async = AsyncMock(return_value=Mock(text="{}"))

    client = LegacyGenerativeAIClient("key")
    result = client.discovery_strategy().list_models()
    handle = client.get_model("models/gemini-2.5-pro")

    legacy_sdk.configure.assert_called_once_with(api_key="key")
    assert client.modern_listing is None
    assert result.models[0].identifier == "models/gemini-2.5-pro"
    assert result.models[0].raw_metadata == {
        "name": "models/gemini-2.5-pro",
        "supported_generation_methods": ["generateContent"],
    }
    assert asyncio.run(handle.generate_text("prompt")) == "{}"
    legacy_sdk.GenerativeModel.assert_called_once_with(model_name="models/gemini-2.5-pro")
