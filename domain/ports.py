from __future__ import annotations
from typing import Any, Dict, Protocol

from domain.models import ModelRequest, ModelResponse


class ModelProviderPort(Protocol):
    """Một provider: dịch request chuẩn sang wire format và dịch ngược response."""

    name: str
    is_placeholder: bool

    def translate_request(self, request: ModelRequest) -> Dict[str, Any]: ...

    def translate_response(self, raw: Any) -> ModelResponse: ...

    async def complete(self, request: ModelRequest) -> ModelResponse: ...


class ModelClientPort(Protocol):
    async def send_message(self, request: ModelRequest) -> ModelResponse: ...
