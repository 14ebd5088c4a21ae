import base64

from config.constant import MAX_IMAGE_BYTES


class ImageTooLargeError(ValueError):
    pass


def to_data_url(raw: bytes, mime_type: str) -> str:
    if len(raw) > MAX_IMAGE_BYTES:
        raise ImageTooLargeError("Image size must be less than 5MB")
    mime = (mime_type or "application/octet-stream").lower()
    encoded = base64.b64encode(raw).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def image_echo_reply(mime_type: str) -> str:
    # Ảnh chỉ hiển thị lại trong chat, không gửi cho provider nào
    kind = "photo" if "image" in (mime_type or "") else "file"
    return (
        f"I can see your image! This appears to be a {kind}. "
        "I can analyze images and provide insights about what I see. "
        "What would you like to know about this image?"
    )
