# app/main.py
import asyncio

import streamlit as st

from application.model_client import ModelClient
from config.constant import APP_TITLE, LANGUAGE_OPTIONS, OPENAI_MODELS, PROVIDER_LABELS, PROVIDER_OPTIONS
from config.env import settings
from config.logging import logger
from domain.models import ModelRequest, ModelResponse
from infra.factories.model_client_factory import (
    build_model_client,
    build_model_request,
    build_provider_config,
    default_model_for,
)
from infra.providers.base import ModelClientError, ProviderConfig
from stores.session_state_store import SessionState, SessionStateStore, make_message
from utils.files import ImageTooLargeError, image_echo_reply, to_data_url
from utils.language import language_label, with_language_hint


async def ask_model(cfg: ProviderConfig, request: ModelRequest) -> ModelResponse:
    # Mỗi lần rerun của streamlit là một event loop mới -> tạo client mới mỗi lần gọi
    client: ModelClient = build_model_client(cfg)
    async with client:
        return await client.send_message(request)


# ============== Page & header ==============
st.set_page_config(page_title=APP_TITLE, page_icon="🤖", layout="centered")
st.title("🤖 " + APP_TITLE)
st.caption("AI Chat Assistant")

store = SessionStateStore()
state: SessionState = store.get()

# ============== Sidebar ==============
with st.sidebar:
    st.subheader("⚙️ Settings")
    provider = st.selectbox(
        "Provider",
        PROVIDER_OPTIONS,
        index=PROVIDER_OPTIONS.index(settings.PROVIDER) if settings.PROVIDER in PROVIDER_OPTIONS else 0,
        format_func=lambda p: PROVIDER_LABELS[p],
    )
    api_key = st.text_input(f"{PROVIDER_LABELS[provider]} API Key", type="password")
    endpoint, region = "", ""
    if provider == "azure":
        endpoint = st.text_input(
            "Azure Endpoint",
            placeholder="https://<resource>.openai.azure.com",
            value=settings.AZURE_OPENAI_ENDPOINT,
        )
        model = st.text_input("Deployment name (Azure)", value=settings.AZURE_OPENAI_DEPLOYMENT)
    elif provider == "openai":
        model = st.selectbox("Model (OpenAI)", OPENAI_MODELS, index=0)
    else:
        if provider == "aws":
            region = st.text_input("AWS Region", value=settings.AWS_REGION)
            st.warning("AWS Bedrock đang là placeholder: câu trả lời là giả lập.", icon="⚠️")
        model = st.text_input("Model", value=default_model_for(provider))

    codes = list(LANGUAGE_OPTIONS)
    language = st.selectbox(
        "Language",
        codes,
        index=codes.index(state.language) if state.language in codes else 0,
        format_func=language_label,
    )
    if language != state.language:
        state.language = language
        store.set(state)

    if st.button("🧹 Clear"):
        state = store.clear()
        st.rerun()

    with st.expander("ℹ️ Notes"):
        st.markdown("- App **không lưu** API key; mọi thứ ở trong **phiên làm việc hiện tại**.")

cfg = build_provider_config(provider, api_key=api_key, endpoint=endpoint, region=region)

# ============== Chat ==============
chat_container = st.container(height=480, border=True)
with chat_container:
    for msg in state.messages:
        with st.chat_message(msg["role"]):
            if msg.get("image"):
                st.image(msg["image"], width=200)
            st.markdown(msg["content"])
            st.caption(msg["timestamp"])

if state.error:
    st.error(state.error)

with st.expander("📸 Photo"):
    camera_photo = st.camera_input("Take photo")
    uploaded_photo = st.file_uploader("Upload image", type=["png", "jpg", "jpeg", "gif", "webp"])
    # Hiển thị cả hai widget; ưu tiên ảnh chụp nếu có cả hai
    photo = camera_photo if camera_photo is not None else uploaded_photo
    if photo is not None and st.button("Send photo"):
        try:
            data_url = to_data_url(photo.getvalue(), photo.type)
        except ImageTooLargeError as e:
            state.error = str(e)
        else:
            state.error = ""
            state.messages.append(make_message("user", "I uploaded an image", image=data_url))
            state.messages.append(make_message("assistant", image_echo_reply(photo.type)))
        store.set(state)
        st.rerun()

st.caption(f"🌐 {language_label(state.language)} • {PROVIDER_LABELS[provider]}")
prompt = st.chat_input("Type your message here...")

if prompt:
    if not prompt.strip():
        state.error = "Please enter a message"
    else:
        state.messages.append(make_message("user", prompt))
        logger.info(f"[chat] User prompt: {prompt}")
        try:
            request = build_model_request(with_language_hint(prompt, state.language), model=model, provider=provider)
            with st.spinner("Thinking..."):
                response = asyncio.run(ask_model(cfg, request))
        except ModelClientError as e:
            logger.exception(f"[chat] Lỗi gọi model: {e}")
            state.error = "Failed to get response from the model"
        else:
            state.error = ""
            state.messages.append(make_message("assistant", response.content))
            logger.info(f"[chat] Reply:\n{response.content}")
    store.set(state)
    st.rerun()
