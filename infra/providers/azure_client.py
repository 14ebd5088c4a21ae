from typing import Any, Dict, Optional

import httpx
from openai import AsyncAzureOpenAI
from openai.types.chat import ChatCompletion

from config.constant import AZURE_API_VERSION
from domain.models import ModelRequest
from infra.providers.base import BaseModelProvider, MissingEndpointError, ProviderConfig
from infra.providers.openai_client import OpenAIClient, user_messages


class AzureOpenAIClient(OpenAIClient):
    """
    Dành cho Azure OpenAI.
    - endpoint: dạng https://<resource>.openai.azure.com
    - request.model: tên deployment (vd: "gpt-35-turbo"), nằm trong path chứ không nằm trong body
    URL cuối cùng: {endpoint}/openai/deployments/{model}/chat/completions?api-version=2024-02-01
    Body chỉ gồm messages, max_tokens, temperature. Cách đọc response giống hệt OpenAI.
    """
    name = "azure"
    display_name = "Azure OpenAI"

    def __init__(
        self,
        cfg: ProviderConfig,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        if not cfg.endpoint:
            raise MissingEndpointError(self.name)
        BaseModelProvider.__init__(self, cfg, http_client=http_client)
        self.timeout = timeout
        self._client = AsyncAzureOpenAI(
            api_key=cfg.api_key,
            azure_endpoint=cfg.endpoint,
            api_version=AZURE_API_VERSION,
            http_client=http_client,
            max_retries=0,
            timeout=timeout,
        )

    def translate_request(self, request: ModelRequest) -> Dict[str, Any]:
        return {
            "messages": user_messages(request),
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
        }

    async def _request(self, payload: Dict[str, Any], request: ModelRequest) -> Any:
        # Gọi low-level post để body không bị SDK chèn thêm "model"
        return await self._client.post(
            f"/deployments/{request.model}/chat/completions",
            body=payload,
            cast_to=ChatCompletion,
        )
