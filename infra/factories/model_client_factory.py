from typing import Optional

import httpx

from application.model_client import ModelClient
from config.env import Settings, settings as default_settings
from domain.models import ModelRequest
from infra.providers.base import ProviderConfig


def _env_api_key(provider: str, s: Settings) -> str:
    return {
        "azure": s.AZURE_OPENAI_API_KEY,
        "openai": s.OPENAI_API_KEY,
        "anthropic": s.ANTHROPIC_API_KEY,
        "aws": s.AWS_API_KEY,
    }.get(provider, "")


def default_model_for(provider: str, s: Optional[Settings] = None) -> str:
    s = s or default_settings
    return {
        "azure": s.AZURE_OPENAI_DEPLOYMENT,
        "openai": s.OPENAI_MODEL,
        "anthropic": s.ANTHROPIC_MODEL,
        "aws": s.AWS_BEDROCK_MODEL,
    }.get(provider, "")


def build_provider_config(
    provider: str,
    api_key: str = "",
    endpoint: str = "",
    region: str = "",
    s: Optional[Settings] = None,
) -> ProviderConfig:
    """Giá trị nhập từ UI được ưu tiên, thiếu thì lấy từ env."""
    s = s or default_settings
    if provider == "azure":
        endpoint = endpoint or s.AZURE_OPENAI_ENDPOINT
    if provider == "aws":
        region = region or s.AWS_REGION
    return ProviderConfig(
        provider=provider,
        api_key=api_key or _env_api_key(provider, s),
        endpoint=endpoint or None,
        region=region or None,
    )


def provider_config_from_settings(s: Optional[Settings] = None) -> ProviderConfig:
    s = s or default_settings
    return build_provider_config(s.PROVIDER, s=s)


def build_model_client(
    cfg: Optional[ProviderConfig] = None,
    *,
    s: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> ModelClient:
    s = s or default_settings
    return ModelClient(
        cfg if cfg is not None else provider_config_from_settings(s),
        http_client=http_client,
        timeout=s.HTTP_TIMEOUT,
        placeholder_delay=s.PLACEHOLDER_DELAY,
        allow_placeholders=s.ALLOW_PLACEHOLDER_PROVIDERS,
    )


def build_model_request(message: str, model: str = "", provider: str = "", s: Optional[Settings] = None) -> ModelRequest:
    s = s or default_settings
    return ModelRequest(
        message=message,
        model=model or default_model_for(provider or s.PROVIDER, s),
        max_tokens=s.MAX_TOKENS,
        temperature=s.TEMPERATURE,
    )
