from config.constant import LANGUAGE_OPTIONS

DEFAULT_LANGUAGE = "en"


def language_label(code: str) -> str:
    return LANGUAGE_OPTIONS.get(code or DEFAULT_LANGUAGE, LANGUAGE_OPTIONS[DEFAULT_LANGUAGE])


def with_language_hint(message: str, code: str) -> str:
    """
    Thêm yêu cầu trả lời bằng ngôn ngữ đã chọn vào cuối message.
    Tiếng Anh (mặc định) hoặc mã lạ thì giữ nguyên message.
    """
    if not code or code == DEFAULT_LANGUAGE or code not in LANGUAGE_OPTIONS:
        return message
    return f"{message}\n\n(Please respond in {LANGUAGE_OPTIONS[code]}.)"
