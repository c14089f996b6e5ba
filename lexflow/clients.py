# lexflow/clients.py
import dataclasses

import streamlit as st

from .exceptions import ValidationError
from .models import Client, ClientType, enum_value
from .utils import new_id

CLIENT_TYPES = [t.value for t in ClientType]


def _client_form(workspace, state, client, is_new):
    with st.form(f"client_form_{client.id}"):
        st.subheader("Novo Cliente" if is_new else "Editar Cliente")
        name = st.text_input("Nome / Razão Social", client.name)
        c1, c2 = st.columns(2)
        ctype = c1.selectbox(
            "Tipo", CLIENT_TYPES,
            index=CLIENT_TYPES.index(enum_value(client.type)) if enum_value(client.type) in CLIENT_TYPES else 0,
        )
        document = c2.text_input("CPF / CNPJ", client.document)
        email = c1.text_input("Email", client.email)
        phone = c2.text_input("Telefone", client.phone)

        s1, s2 = st.columns(2)
        submitted = s1.form_submit_button("Salvar", type="primary")
        cancelled = s2.form_submit_button("Cancelar")

    if cancelled:
        state.editing_client = None
        st.rerun()
    if submitted:
        updated = dataclasses.replace(
            client, name=name.strip(), type=ClientType(ctype), document=document, email=email, phone=phone,
        )
        try:
            workspace.save_client(updated)
        except ValidationError as e:
            st.warning(e.message)
            return
        state.editing_client = None
        st.toast(f"Cliente {updated.name} salvo")
        st.rerun()


def render_clients(workspace, state):
    head, action = st.columns([4, 1])
    head.markdown("## 💼 Clientes")
    if action.button("➕ Novo Cliente", type="primary", use_container_width=True):
        state.editing_client = Client(id=new_id())
        st.rerun()

    editing = state.editing_client
    if editing is not None:
        _client_form(workspace, state, editing, workspace.clients.get(editing.id) is None)
        st.divider()

    clients = workspace.clients.all()
    if not clients:
        st.info("Nenhum cliente cadastrado.")
        return

    cols = st.columns(3)
    for i, client in enumerate(clients):
        with cols[i % 3].container(border=True):
            icon = "🏢" if client.type == ClientType.PESSOA_JURIDICA else "👤"
            st.markdown(f"{icon} **{client.name}**")
            st.caption(f"{enum_value(client.type)} · {client.document or '-'}")
            st.write(f"✉️ {client.email or '-'}")
            st.write(f"📞 {client.phone or '-'}")
            if st.button("Editar", key=f"edit_cli_{client.id}"):
                state.editing_client = client
                st.rerun()
