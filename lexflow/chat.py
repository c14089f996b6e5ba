# lexflow/chat.py
import streamlit as st

from . import ai_engine, config
from .models import enum_value


@st.cache_resource
def get_advisor():
    return ai_engine.LegalAdvisor(ai_engine.get_generator(), model=config.get_setting("GEMINI_MODEL"))


def render_chat(state, order=None):
    """Assistant panel. `order` is the saved order currently open, if any."""
    st.markdown("### 🤖 Assistente IA")
    if order is not None:
        st.caption(f"Contexto: {order.os_number} - {enum_value(order.legal_area)}")

    box = st.container(height=420)
    with box:
        for m in state.messages:
            role = "user" if m.role == "user" else "assistant"
            with st.chat_message(role):
                st.markdown(m.text)
                st.caption(m.timestamp.strftime("%H:%M"))

    placeholder = "Pergunte sobre esta OS..." if order is not None else "Digite sua dúvida jurídica..."
    if p := st.chat_input(placeholder):
        if not p.strip():
            return
        state.add_message("user", p)
        with box:
            with st.chat_message("user"):
                st.markdown(p)
            with st.spinner("Consultando..."):
                reply = get_advisor().advise(p, order)
        state.add_message("model", reply)
        st.rerun()
