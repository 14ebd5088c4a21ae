from typing import Any, Dict, Optional

import httpx
import openai
from openai import AsyncOpenAI

from config.logging import logger
from domain.models import ModelRequest, ModelResponse, TokenUsage
from infra.providers.base import BaseModelProvider, ProviderConfig


def user_messages(request: ModelRequest):
    # Chỉ gửi đúng một message hiện tại, không kèm history
    return [{"role": "user", "content": request.message}]


def chat_completion_to_response(resp: Any) -> ModelResponse:
    """Dùng chung cho OpenAI và Azure OpenAI (cùng schema chat.completions)."""
    content = resp.choices[0].message.content or ""
    usage = None
    if resp.usage is not None:
        usage = TokenUsage(
            prompt_tokens=resp.usage.prompt_tokens,
            completion_tokens=resp.usage.completion_tokens,
            total_tokens=resp.usage.total_tokens,
        )
    return ModelResponse(content=content, usage=usage)


class OpenAIClient(BaseModelProvider):
    """
    Dành cho OpenAI chuẩn (api.openai.com).
    Retry của SDK bị tắt: mỗi lần gọi là đúng một request.
    timeout được truyền thẳng cho SDK (None = không giới hạn), không dùng default 600s của SDK.
    """
    name = "openai"
    display_name = "OpenAI"

    def __init__(
        self,
        cfg: ProviderConfig,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(cfg, http_client=http_client)
        self.timeout = timeout
        self._client = AsyncOpenAI(api_key=cfg.api_key, http_client=http_client, max_retries=0, timeout=timeout)

    def translate_request(self, request: ModelRequest) -> Dict[str, Any]:
        return {
            "model": request.model,
            "messages": user_messages(request),
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
        }

    def translate_response(self, raw: Any) -> ModelResponse:
        return chat_completion_to_response(raw)

    async def _request(self, payload: Dict[str, Any], request: ModelRequest) -> Any:
        return await self._client.chat.completions.create(**payload)

    async def _send(self, payload: Dict[str, Any], request: ModelRequest) -> Any:
        try:
            return await self._request(payload, request)
        except openai.APIStatusError as e:
            logger.exception(f"[model] {self.display_name} API error: {e.status_code}")
            raise self._call_failed(e.status_code) from e
        except openai.OpenAIError as e:
            logger.exception(f"[model] {self.display_name} API error: {e}")
            raise self._call_failed() from e
