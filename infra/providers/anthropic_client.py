from typing import Any, Dict, Optional

import httpx

from config.constant import ANTHROPIC_MESSAGES_URL, ANTHROPIC_VERSION
from config.logging import logger
from domain.models import ModelRequest, ModelResponse, TokenUsage
from infra.providers.base import BaseModelProvider, ProviderConfig
from infra.providers.openai_client import user_messages


class AnthropicClient(BaseModelProvider):
    """
    Gọi thẳng Messages API (https://api.anthropic.com/v1/messages) bằng httpx.
    Response: content[0].text, usage = input_tokens / output_tokens.
    http_client do ModelClient cấp; timeout áp cho từng request (None = không giới hạn).
    """
    name = "anthropic"
    display_name = "Anthropic"

    def __init__(
        self,
        cfg: ProviderConfig,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(cfg, http_client=http_client)
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self.cfg.api_key or "",
            "anthropic-version": ANTHROPIC_VERSION,
        }

    def translate_request(self, request: ModelRequest) -> Dict[str, Any]:
        return {
            "model": request.model,
            "max_tokens": request.max_tokens,
            "messages": user_messages(request),
            "temperature": request.temperature,
        }

    def translate_response(self, raw: Dict[str, Any]) -> ModelResponse:
        content = raw["content"][0]["text"]
        usage = None
        if raw.get("usage"):
            input_tokens = raw["usage"]["input_tokens"]
            output_tokens = raw["usage"]["output_tokens"]
            usage = TokenUsage(
                prompt_tokens=input_tokens,
                completion_tokens=output_tokens,
                total_tokens=input_tokens + output_tokens,
            )
        return ModelResponse(content=content, usage=usage)

    async def _send(self, payload: Dict[str, Any], request: ModelRequest) -> Any:
        try:
            r = await self._http_client.post(
                ANTHROPIC_MESSAGES_URL,
                headers=self._headers(),
                json=payload,
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            logger.exception(f"[model] {self.display_name} API error: {e}")
            raise self._call_failed() from e

        if r.is_error:
            logger.error(f"[model] {self.display_name} API error: {r.status_code} {r.text[:500]}")
            raise self._call_failed(r.status_code)
        try:
            return r.json()
        except ValueError as e:
            logger.exception(f"[model] {self.display_name} trả về body không phải JSON: {e}")
            raise self._call_failed() from e
