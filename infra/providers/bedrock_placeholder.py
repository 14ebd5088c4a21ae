import asyncio
from typing import Any, Dict, Optional

import httpx

from config.constant import PLACEHOLDER_USAGE
from config.logging import logger
from domain.models import ModelRequest, ModelResponse, TokenUsage
from infra.providers.base import BaseModelProvider, ProviderConfig


class BedrockPlaceholderClient(BaseModelProvider):
    """
    PLACEHOLDER cho AWS Bedrock: KHÔNG gọi endpoint thật nào.
    Trả về câu trả lời giả (echo message) sau một khoảng delay, usage cố định 100/150/250.
    Muốn dùng thật cần tích hợp AWS SDK hoặc backend proxy (region sẽ dùng ở đó).
    """
    name = "aws"
    display_name = "AWS Bedrock"
    is_placeholder = True

    def __init__(
        self,
        cfg: ProviderConfig,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        delay: float = 1.0,
    ):
        super().__init__(cfg, http_client=http_client)
        self.delay = delay

    def translate_request(self, request: ModelRequest) -> Dict[str, Any]:
        return {"model": request.model, "message": request.message}

    def translate_response(self, raw: Dict[str, Any]) -> ModelResponse:
        prompt, completion, total = raw["usage"]
        return ModelResponse(
            content=raw["content"],
            usage=TokenUsage(prompt_tokens=prompt, completion_tokens=completion, total_tokens=total),
        )

    async def _send(self, payload: Dict[str, Any], request: ModelRequest) -> Any:
        logger.warning(f"[model] {self.display_name} đang chạy placeholder, không có request thật nào được gửi")
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        return {
            "content": f"AWS Bedrock response to: {payload['message']}",
            "usage": PLACEHOLDER_USAGE,
        }
