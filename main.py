# main.py
import logging

import streamlit as st

from lexflow import clients, config, dashboard, database, documents, order_detail, reports, state as app_state
from lexflow.chat import render_chat
from lexflow.exceptions import ValidationError
from lexflow.repository import Workspace
from lexflow.utils import get_initials

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# 1. SETUP
st.set_page_config(page_title=config.APP_NAME, layout="wide", page_icon="⚖️")


@st.cache_resource
def get_workspace():
    return Workspace(database.open_store())


workspace = get_workspace()

# 2. SESSION STATE
if "app" not in st.session_state:
    st.session_state.app = app_state.AppState()
if "chat_open" not in st.session_state:
    st.session_state.chat_open = False
state = st.session_state.app

NAV_LABELS = {
    app_state.DASHBOARD: "📋 Dashboard",
    app_state.REPORTS: "📊 Relatórios",
    app_state.DOCUMENTS: "📄 Documentos",
    app_state.CLIENTS: "💼 Clientes",
}

# 3. SIDEBAR
with st.sidebar:
    st.title(f"⚖️ {config.OFFICE_NAME}")
    st.caption(f"{config.APP_NAME} · Ver: {config.APP_VER}")
    st.write(f"**{get_initials(workspace.display_name)}** · {workspace.display_name}")

    for view, label in NAV_LABELS.items():
        active = state.view == view or (view == app_state.DASHBOARD and state.view == app_state.ORDER)
        if st.button(label, key=f"nav_{view}", type="primary" if active else "secondary",
                     use_container_width=True):
            state.navigate(view)
            st.rerun()

    st.divider()
    with st.expander("👤 Configurar Perfil"):
        with st.form("profile_form"):
            new_name = st.text_input("Nome de Exibição", workspace.display_name)
            st.caption("Este nome será usado no histórico das ordens de serviço.")
            if st.form_submit_button("Salvar Alterações"):
                try:
                    workspace.rename_user(new_name)
                except ValidationError as e:
                    st.warning(e.message)
                else:
                    st.rerun()

    st.session_state.chat_open = st.toggle("🤖 Assistente IA", value=st.session_state.chat_open)

# 4. ROUTING
if st.session_state.chat_open:
    main_col, chat_col = st.columns([2.2, 1])
else:
    main_col, chat_col = st.container(), None

with main_col:
    if state.view == app_state.ORDER and state.editor is not None:
        order_detail.render_order_detail(workspace, state)
    elif state.view == app_state.REPORTS:
        reports.render_reports(workspace)
    elif state.view == app_state.DOCUMENTS:
        documents.render_documents(workspace)
    elif state.view == app_state.CLIENTS:
        clients.render_clients(workspace, state)
    else:
        dashboard.render_dashboard(workspace, state)

selected = workspace.orders.get(state.selected_order_id)
state.sync_chat_context(selected)
if chat_col is not None:
    with chat_col:
        render_chat(state, selected)
