from typing import Dict


APP_TITLE = "AGrow"
GREETING = "Hello! I'm your AI assistant. How can I help you today?"

# Thứ tự này cũng là thứ tự hiển thị trong selectbox
PROVIDER_OPTIONS = ["azure", "aws", "openai", "anthropic"]
PROVIDER_LABELS: Dict[str, str] = {
    "azure": "Azure OpenAI",
    "aws": "AWS Bedrock",
    "openai": "OpenAI",
    "anthropic": "Anthropic",
}

OPENAI_MODELS = ["gpt-3.5-turbo", "gpt-4o-mini", "gpt-4.1-mini"]

# --- Wire constants ---
AZURE_API_VERSION = "2024-02-01"
ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"

DEFAULT_MAX_TOKENS = 2048
DEFAULT_TEMPERATURE = 0.7

# Số liệu giả của provider placeholder (aws)
PLACEHOLDER_USAGE = (100, 150, 250)

LANGUAGE_OPTIONS: Dict[str, str] = {
    "en": "English",
    "es": "Español",
    "fr": "Français",
    "de": "Deutsch",
    "it": "Italiano",
    "pt": "Português",
    "ru": "Русский",
    "ja": "日本語",
    "ko": "한국어",
    "zh": "中文",
    "ar": "العربية",
    "hi": "हिंदी",
}

MAX_IMAGE_BYTES = 5 * 1024 * 1024
