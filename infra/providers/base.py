from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from config.logging import logger
from domain.models import ModelRequest, ModelResponse


class ModelClientError(RuntimeError):
    pass


class ProviderConfigError(ModelClientError):
    pass


class NotConfiguredError(ProviderConfigError):
    def __init__(self) -> None:
        super().__init__("Model service not configured")


class UnsupportedProviderError(ProviderConfigError):
    def __init__(self, provider: str, reason: str = ""):
        self.provider = provider
        msg = f"Unsupported provider: {provider}"
        super().__init__(f"{msg} ({reason})" if reason else msg)


class MissingEndpointError(ProviderConfigError):
    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"{provider} endpoint is required")


class ProviderCallFailedError(ModelClientError):
    def __init__(self, provider: str, status_code: Optional[int] = None, detail: str = "", label: str = ""):
        self.provider = provider
        self.status_code = status_code
        msg = f"Failed to get response from {label or provider}"
        if status_code is not None:
            msg += f" (HTTP {status_code})"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


@dataclass(frozen=True)
class ProviderConfig:
    provider: str                           # "azure" | "aws" | "openai" | "anthropic"
    api_key: str = field(default="", repr=False)
    endpoint: Optional[str] = None          # chỉ bắt buộc với azure
    region: Optional[str] = None            # nhận vào nhưng chưa provider nào dùng


class BaseModelProvider(ABC):
    """
    Khung chung cho mọi provider.
    - translate_request: ModelRequest -> payload của provider
    - _send: gửi đúng một request ra ngoài (request gốc đi kèm để dựng URL nếu cần), map lỗi transport/HTTP sang ProviderCallFailedError
    - translate_response: payload trả về -> ModelResponse
    """
    name: str = ""
    display_name: str = ""
    is_placeholder: bool = False

    def __init__(self, cfg: ProviderConfig, *, http_client: Optional[httpx.AsyncClient] = None):
        self.cfg = cfg
        self._http_client = http_client

    @abstractmethod
    def translate_request(self, request: ModelRequest) -> Dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def translate_response(self, raw: Any) -> ModelResponse:
        raise NotImplementedError

    @abstractmethod
    async def _send(self, payload: Dict[str, Any], request: ModelRequest) -> Any:
        raise NotImplementedError

    async def complete(self, request: ModelRequest) -> ModelResponse:
        payload = self.translate_request(request)
        raw = await self._send(payload, request)
        try:
            return self.translate_response(raw)
        except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
            logger.exception(f"[model] {self.display_name} trả về response không đọc được: {e}")
            raise ProviderCallFailedError(
                self.name, detail="unexpected response shape", label=self.display_name
            ) from e

    def _call_failed(self, status_code: Optional[int] = None) -> ProviderCallFailedError:
        return ProviderCallFailedError(self.name, status_code=status_code, label=self.display_name)
