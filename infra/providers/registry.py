from typing import Dict, Optional, Type

import httpx

from infra.providers.anthropic_client import AnthropicClient
from infra.providers.azure_client import AzureOpenAIClient
from infra.providers.base import BaseModelProvider, ProviderConfig, UnsupportedProviderError
from infra.providers.bedrock_placeholder import BedrockPlaceholderClient
from infra.providers.openai_client import OpenAIClient

# Thêm provider mới = thêm một dòng ở đây
PROVIDER_REGISTRY: Dict[str, Type[BaseModelProvider]] = {
    AzureOpenAIClient.name: AzureOpenAIClient,
    BedrockPlaceholderClient.name: BedrockPlaceholderClient,
    OpenAIClient.name: OpenAIClient,
    AnthropicClient.name: AnthropicClient,
}


def resolve_provider(provider: str) -> Type[BaseModelProvider]:
    try:
        return PROVIDER_REGISTRY[provider]
    except KeyError:
        raise UnsupportedProviderError(provider) from None


def build_provider(
    cfg: ProviderConfig,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
    placeholder_delay: float = 1.0,
    allow_placeholders: bool = True,
) -> BaseModelProvider:
    provider_cls = resolve_provider(cfg.provider)
    if provider_cls.is_placeholder:
        if not allow_placeholders:
            raise UnsupportedProviderError(cfg.provider, "placeholder providers are disabled")
        return provider_cls(cfg, http_client=http_client, delay=placeholder_delay)
    return provider_cls(cfg, http_client=http_client, timeout=timeout)
