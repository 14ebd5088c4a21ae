from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- Provider ---
    PROVIDER: str = "azure"  # azure | aws | openai | anthropic

    # --- OpenAI ---
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-3.5-turbo"

    # --- Azure OpenAI ---
    AZURE_OPENAI_API_KEY: str = ""
    AZURE_OPENAI_ENDPOINT: str = ""
    AZURE_OPENAI_DEPLOYMENT: str = "gpt-35-turbo"

    # --- Anthropic ---
    ANTHROPIC_API_KEY: str = ""
    ANTHROPIC_MODEL: str = "claude-3-haiku-20240307"

    # --- AWS Bedrock (placeholder, chưa gọi endpoint thật) ---
    AWS_API_KEY: str = ""
    AWS_REGION: str = ""
    AWS_BEDROCK_MODEL: str = "anthropic.claude-3-sonnet-20240229-v1:0"

    # --- Common model parameters ---
    MAX_TOKENS: int = 2048
    TEMPERATURE: float = 0.7

    # --- Client ---
    HTTP_TIMEOUT: Optional[float] = None  # None = không tự đặt timeout
    PLACEHOLDER_DELAY: float = 1.0
    ALLOW_PLACEHOLDER_PROVIDERS: bool = True

    # --- Logging ---
    LOG_DIR: str = "tmp"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
