# lexflow/order_detail.py
import streamlit as st

from .dashboard import render_delete_confirmation
from .exceptions import ValidationError
from .models import LegalArea, OSStatus, coerce_enum, enum_value
from .utils import format_date_br

NO_CLIENT = "— digitar manualmente —"


def _index_of(options, value, fallback=0):
    value = enum_value(value)
    return options.index(value) if value in options else fallback


def render_order_detail(workspace, state):
    editor = state.editor
    draft = editor.draft
    k = draft.id  # widget keys scoped to the draft

    c_back, c_title, c_del = st.columns([1.5, 4, 1])
    if c_back.button("⬅️ Voltar para Dashboard"):
        state.back_to_list()
        st.rerun()
    c_title.markdown("## 📝 Nova Ordem de Serviço" if editor.is_new else f"## 📂 {draft.os_number}")
    if not editor.is_new and c_del.button("🗑️ Excluir", key=f"del_{k}"):
        state.request_delete(draft.id)
        st.rerun()
    render_delete_confirmation(workspace, state)

    areas = [a.value for a in LegalArea]
    statuses = [s.value for s in OSStatus]
    # Legacy values not in the enum stay selectable
    if enum_value(draft.legal_area) not in areas:
        areas.append(enum_value(draft.legal_area))
    if enum_value(draft.status) not in statuses:
        statuses.append(enum_value(draft.status))
    client_names = [NO_CLIENT] + [c.name for c in workspace.clients.all()]

    col_main, col_side = st.columns([2, 1])
    with col_main:
        with st.form(f"order_form_{k}"):
            st.subheader("Dados Gerais")
            c1, c2 = st.columns(2)
            c1.text_input("Número da OS", draft.os_number, disabled=True,
                          help="O número da OS é gerado automaticamente")
            status = c2.selectbox("Status", statuses, index=_index_of(statuses, draft.status), key=f"st_{k}")

            picked = c1.selectbox("Cliente cadastrado", client_names,
                                  index=_index_of(client_names, draft.client_name), key=f"cl_{k}")
            typed = c2.text_input("Nome do cliente", draft.client_name,
                                  placeholder="Selecione ou digite o nome...", key=f"cn_{k}")
            area = c1.selectbox("Área Jurídica", areas, index=_index_of(areas, draft.legal_area), key=f"ar_{k}")
            responsible = c2.text_input("Responsável", draft.responsible,
                                        placeholder="Nome do Advogado", key=f"rs_{k}")
            value = c1.number_input("Valor (R$)", min_value=0.0, step=0.01,
                                    value=float(draft.value or 0), format="%.2f", key=f"vl_{k}")

            st.subheader("Detalhes do Caso")
            description = st.text_area("Descrição", draft.description, height=120,
                                       placeholder="Descreva os fatos principais...", key=f"ds_{k}")
            strategy = st.text_area("Estratégia", draft.strategy, height=90,
                                    placeholder="Qual a tese de defesa/ataque?", key=f"sg_{k}")
            methods = st.text_area("Métodos", draft.methods, height=70,
                                   placeholder="Ex: Reunião pericial, coleta de provas...", key=f"mt_{k}")
            deadlines = st.text_input("Prazos", draft.deadlines, placeholder="Ex: 15/10/2024", key=f"dl_{k}")
            notes = st.text_area("Notas Internas", draft.internal_notes, height=90,
                                 placeholder="Informações sensíveis apenas para o escritório...", key=f"nt_{k}")

            if st.form_submit_button("💾 Salvar OS", type="primary"):
                client_name = picked if picked != NO_CLIENT and picked != draft.client_name else typed
                try:
                    editor.update(
                        client_name=client_name,
                        legal_area=coerce_enum(LegalArea, area, LegalArea.CIVEL),
                        status=coerce_enum(OSStatus, status, OSStatus.ABERTA),
                        responsible=responsible,
                        value=float(value or 0),
                        description=description,
                        strategy=strategy,
                        methods=methods,
                        deadlines=deadlines,
                        internal_notes=notes,
                    )
                    saved = state.save_order(workspace.orders)
                except ValidationError as e:
                    st.warning(e.message)
                else:
                    st.toast(f"{saved.os_number} salva")
                    st.rerun()

    with col_side:
        st.subheader("Histórico")
        if not draft.history:
            st.caption("Nenhum registro ainda.")
        for entry in draft.history:
            st.markdown(f"**{entry.action}**")
            st.caption(f"{format_date_br(entry.date)} · {entry.user}")
