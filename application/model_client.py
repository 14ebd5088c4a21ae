from __future__ import annotations
from typing import Optional

import httpx

from config.logging import logger
from domain.models import ModelRequest, ModelResponse
from domain.ports import ModelClientPort
from infra.providers.base import NotConfiguredError, ProviderConfig
from infra.providers.registry import build_provider


class ModelClient(ModelClientPort):
    """
    Client duy nhất mà UI gọi tới.
    - Giữ một ProviderConfig (set_config ghi đè toàn bộ).
    - send_message: chọn provider theo config.provider, gửi đúng một request, trả về ModelResponse.
    - Không retry, không lock: các call chạy song song không được sắp thứ tự.
    """

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        placeholder_delay: float = 1.0,
        allow_placeholders: bool = True,
    ):
        self._config = config
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)
        self.timeout = timeout
        self.placeholder_delay = placeholder_delay
        self.allow_placeholders = allow_placeholders

    @property
    def config(self) -> Optional[ProviderConfig]:
        return self._config

    @property
    def is_configured(self) -> bool:
        return self._config is not None

    def set_config(self, config: ProviderConfig) -> None:
        self._config = config
        logger.info(f"[model] Đổi provider sang: {config.provider}")

    async def send_message(self, request: ModelRequest) -> ModelResponse:
        # Chụp config tại thời điểm bắt đầu, set_config sau đó không ảnh hưởng call này
        config = self._config
        if config is None:
            raise NotConfiguredError()

        provider = build_provider(
            config,
            http_client=self._http_client,
            timeout=self.timeout,
            placeholder_delay=self.placeholder_delay,
            allow_placeholders=self.allow_placeholders,
        )
        logger.info(f"[model] Gửi message tới {provider.display_name} (model={request.model})")
        response = await provider.complete(request)
        if response.usage is not None:
            logger.info(f"[model] Usage: {response.usage.total_tokens} tokens")
        return response

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "ModelClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
