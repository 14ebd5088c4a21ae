from dataclasses import dataclass
from typing import Optional

from config.constant import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE


@dataclass(frozen=True)
class ModelRequest:
    message: str
    model: str                    # model id, hoặc tên deployment với Azure
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE

    def __post_init__(self) -> None:
        if not (self.message or "").strip():
            raise ValueError("message must not be empty")
        if self.max_tokens <= 0:
            raise ValueError("max_tokens must be a positive integer")


@dataclass(frozen=True)
class TokenUsage:
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


@dataclass(frozen=True)
class ModelResponse:
    content: str
    usage: Optional[TokenUsage] = None
