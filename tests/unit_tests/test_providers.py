"""Wire-level tests: what each provider puts on the network and how it reads the reply."""

import logging

import pytest

from config.constant import PROVIDER_OPTIONS
from domain.models import ModelRequest, TokenUsage
from infra.providers.anthropic_client import AnthropicClient
from infra.providers.base import ProviderConfig, UnsupportedProviderError
from infra.providers.bedrock_placeholder import BedrockPlaceholderClient
from infra.providers.openai_client import OpenAIClient
from infra.providers.registry import PROVIDER_REGISTRY, build_provider, resolve_provider


@pytest.mark.asyncio
async def test_openai_wire_shape(make_client, hi_request, openai_payload):
    client, transport = make_client(ProviderConfig(provider="openai", api_key="sk-test"), payload=openai_payload)
    await client.send_message(hi_request)

    sent = transport.requests[-1]
    assert sent.method == "POST"
    assert str(sent.url) == "https://api.openai.com/v1/chat/completions"
    assert sent.headers["authorization"] == "Bearer sk-test"
    assert transport.last_body == {
        "model": "gpt-3.5-turbo",
        "messages": [{"role": "user", "content": "hi"}],
        "max_tokens": 2048,
        "temperature": 0.7,
    }


@pytest.mark.asyncio
async def test_azure_wire_shape(make_client, openai_payload):
    cfg = ProviderConfig(provider="azure", api_key="az-key", endpoint="https://res.openai.azure.com")
    client, transport = make_client(cfg, payload=openai_payload)
    await client.send_message(ModelRequest(message="hi", model="my-deploy", max_tokens=256, temperature=0.2))

    sent = transport.requests[-1]
    assert sent.method == "POST"
    assert sent.url.host == "res.openai.azure.com"
    assert sent.url.path == "/openai/deployments/my-deploy/chat/completions"
    assert sent.url.params["api-version"] == "2024-02-01"
    assert sent.headers["api-key"] == "az-key"
    # deployment chỉ nằm trong URL, body không có "model"
    assert transport.last_body == {
        "messages": [{"role": "user", "content": "hi"}],
        "max_tokens": 256,
        "temperature": 0.2,
    }


@pytest.mark.asyncio
async def test_anthropic_wire_shape(make_client, anthropic_payload):
    client, transport = make_client(ProviderConfig(provider="anthropic", api_key="ant-key"), payload=anthropic_payload)
    await client.send_message(ModelRequest(message="hi", model="claude-3-haiku-20240307"))

    sent = transport.requests[-1]
    assert sent.method == "POST"
    assert str(sent.url) == "https://api.anthropic.com/v1/messages"
    assert sent.headers["x-api-key"] == "ant-key"
    assert sent.headers["anthropic-version"] == "2023-06-01"
    assert sent.headers["content-type"] == "application/json"
    assert transport.last_body == {
        "model": "claude-3-haiku-20240307",
        "max_tokens": 2048,
        "messages": [{"role": "user", "content": "hi"}],
        "temperature": 0.7,
    }


def test_zero_temperature_is_sent_as_zero():
    provider = AnthropicClient(ProviderConfig(provider="anthropic", api_key="k"))
    payload = provider.translate_request(ModelRequest(message="hi", model="m", temperature=0.0))
    assert payload["temperature"] == 0.0


def test_anthropic_reply_without_usage():
    provider = AnthropicClient(ProviderConfig(provider="anthropic"))
    response = provider.translate_response({"content": [{"type": "text", "text": "ok"}]})
    assert response.content == "ok"
    assert response.usage is None


def test_placeholder_translation():
    provider = BedrockPlaceholderClient(ProviderConfig(provider="aws"), delay=0)
    assert provider.translate_request(ModelRequest(message="hi", model="m")) == {"model": "m", "message": "hi"}
    response = provider.translate_response({"content": "x", "usage": (1, 2, 3)})
    assert response.usage == TokenUsage(prompt_tokens=1, completion_tokens=2, total_tokens=3)


@pytest.mark.asyncio
async def test_placeholder_logs_a_warning(caplog):
    provider = BedrockPlaceholderClient(ProviderConfig(provider="aws"), delay=0)
    with caplog.at_level(logging.WARNING):
        await provider.complete(ModelRequest(message="hi", model="m"))
    assert "placeholder" in caplog.text


def test_registry_covers_every_provider_option():
    assert set(PROVIDER_REGISTRY) == set(PROVIDER_OPTIONS)
    placeholders = {name for name, cls in PROVIDER_REGISTRY.items() if cls.is_placeholder}
    assert placeholders == {"aws"}


def test_resolve_unknown_provider():
    with pytest.raises(UnsupportedProviderError):
        resolve_provider("bedrock")


def test_build_provider_passes_placeholder_delay():
    provider = build_provider(ProviderConfig(provider="aws"), placeholder_delay=0.25)
    assert isinstance(provider, BedrockPlaceholderClient)
    assert provider.delay == 0.25


def test_build_provider_for_openai():
    provider = build_provider(ProviderConfig(provider="openai", api_key="k"))
    assert isinstance(provider, OpenAIClient)
    assert provider.name == "openai"


WIRE_CONFIGS = {
    "azure": ProviderConfig(provider="azure", api_key="k", endpoint="https://res.openai.azure.com"),
    "openai": ProviderConfig(provider="openai", api_key="k"),
    "anthropic": ProviderConfig(provider="anthropic", api_key="k"),
}


@pytest.mark.asyncio
@pytest.mark.parametrize("timeout", [None, 12.5])
@pytest.mark.parametrize("provider", sorted(WIRE_CONFIGS))
async def test_client_timeout_reaches_the_request(make_client, hi_request, openai_payload, anthropic_payload, provider, timeout):
    payload = anthropic_payload if provider == "anthropic" else openai_payload
    client, transport = make_client(WIRE_CONFIGS[provider], timeout=timeout, payload=payload)
    await client.send_message(hi_request)

    sent = transport.requests[-1]
    assert sent.extensions["timeout"] == {"connect": timeout, "read": timeout, "write": timeout, "pool": timeout}


def test_build_provider_passes_timeout():
    for name in sorted(WIRE_CONFIGS):
        provider = build_provider(WIRE_CONFIGS[name], timeout=3.0)
        assert provider.timeout == 3.0
