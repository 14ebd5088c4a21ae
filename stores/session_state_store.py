# stores/session_state_store.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

import streamlit as st

from config.constant import GREETING


SESSION_KEYS = {
    "messages": "messages",
    "language": "language",
    "error": "error",
}


def make_message(role: str, content: str, image: Optional[str] = None) -> Dict[str, str]:
    msg = {"role": role, "content": content, "timestamp": datetime.now().strftime("%H:%M:%S")}
    if image:
        msg["image"] = image
    return msg


def initial_messages() -> List[Dict[str, str]]:
    return [make_message("assistant", GREETING)]


@dataclass
class SessionState:
    messages: List[Dict[str, str]] = field(default_factory=initial_messages)
    language: str = "en"
    error: str = ""


class SessionStateStore:
    def get(self) -> SessionState:
        return SessionState(
            messages=st.session_state.get(SESSION_KEYS["messages"]) or initial_messages(),
            language=st.session_state.get(SESSION_KEYS["language"], "en"),
            error=st.session_state.get(SESSION_KEYS["error"], ""),
        )

    def set(self, state: SessionState) -> None:
        st.session_state[SESSION_KEYS["messages"]] = state.messages
        st.session_state[SESSION_KEYS["language"]] = state.language
        st.session_state[SESSION_KEYS["error"]] = state.error

    def clear(self) -> SessionState:
        state = SessionState()
        self.set(state)
        return state
