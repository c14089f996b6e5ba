# lexflow/dashboard.py
import streamlit as st

from . import config, projections
from .models import LegalArea, OSStatus, enum_value

STATUS_BADGES = {
    OSStatus.ABERTA: "🔵",
    OSStatus.EM_ANDAMENTO: "🟡",
    OSStatus.AGUARDANDO_DOCS: "🟠",
    OSStatus.CONCLUIDA: "🟢",
    OSStatus.ARQUIVADA: "⚪",
}


def render_delete_confirmation(workspace, state):
    """Explicit confirmation before an order leaves the repository."""
    if not state.pending_delete_id:
        return
    order = workspace.orders.get(state.pending_delete_id)
    if order is None:
        state.cancel_delete()
        return
    st.warning(f"Tem certeza que deseja excluir a {order.os_number} permanentemente?")
    c1, c2 = st.columns(2)
    if c1.button("Sim, excluir", key="confirm_delete", type="primary"):
        state.confirm_delete(workspace.orders)
        st.toast("OS excluída")
        st.rerun()
    if c2.button("Cancelar", key="cancel_delete"):
        state.cancel_delete()
        st.rerun()


def render_dashboard(workspace, state):
    head, action = st.columns([4, 1])
    head.markdown("## ⚖️ Painel de Controle")
    if action.button("➕ Abrir Nova OS", type="primary", use_container_width=True):
        state.open_new_order(workspace.display_name)
        st.rerun()

    orders = workspace.orders.all()

    # 1. STATS
    stats = projections.dashboard_stats(orders)
    cols = st.columns(4)
    cols[0].metric("Total de OS", stats["total"])
    cols[1].metric("Abertas", stats["open"])
    cols[2].metric("Em Andamento", stats["in_progress"])
    cols[3].metric("Concluídas", stats["completed"])

    # 2. FILTERS
    f1, f2, f3 = st.columns([3, 1.5, 1.5])
    text = f1.text_input("Buscar", placeholder="Buscar por cliente, OS ou responsável...")
    area = f2.selectbox(
        "Área", [config.FILTER_ALL] + [a.value for a in LegalArea],
        format_func=lambda x: "Todas as Áreas" if x == config.FILTER_ALL else x,
    )
    status = f3.selectbox(
        "Status", [config.FILTER_ALL] + [s.value for s in OSStatus],
        format_func=lambda x: "Todos os Status" if x == config.FILTER_ALL else x,
    )

    render_delete_confirmation(workspace, state)
    st.divider()

    # 3. LIST
    filtered = projections.filter_orders(orders, text, status, area)
    if not filtered:
        st.info("Nenhuma Ordem de Serviço encontrada.")
        return

    for os_ in filtered:
        with st.container():
            col_info, col_status, col_act = st.columns([4, 1.5, 1.5])
            with col_info:
                st.markdown(f"**{os_.os_number}** · {os_.client_name}")
                st.caption(f"{enum_value(os_.legal_area)} | Responsável: {os_.responsible or '-'}")
            with col_status:
                st.write(f"{STATUS_BADGES.get(os_.status, '⚫')} {enum_value(os_.status)}")
            with col_act:
                if st.button("Abrir", key=f"open_{os_.id}", type="primary", use_container_width=True):
                    state.open_order(os_, workspace.display_name)
                    st.rerun()
                if st.button("Excluir", key=f"del_{os_.id}", use_container_width=True):
                    state.request_delete(os_.id)
                    st.rerun()
        st.markdown("---")
