# lexflow/reports.py
from datetime import date

import streamlit as st

from . import config, doc_renderer, projections
from .models import LegalArea, OSStatus, enum_value
from .utils import format_brl, format_date_br


def render_reports(workspace):
    st.markdown("## 📊 Relatórios & Métricas")

    # 1. FILTERS
    c1, c2, c3, c4, c5 = st.columns(5)
    start = c1.date_input("Data Inicial", value=None, format="DD/MM/YYYY")
    end = c2.date_input("Data Final", value=None, format="DD/MM/YYYY")
    area = c3.selectbox(
        "Área", [config.FILTER_ALL] + [a.value for a in LegalArea],
        format_func=lambda x: "Todas" if x == config.FILTER_ALL else x, key="rep_area",
    )
    status = c4.selectbox(
        "Status", [config.FILTER_ALL] + [s.value for s in OSStatus],
        format_func=lambda x: "Todos" if x == config.FILTER_ALL else x, key="rep_status",
    )
    responsible = c5.text_input("Responsável", placeholder="Buscar nome...", key="rep_resp")

    filtered = projections.filter_report(
        workspace.orders.all(), start=start, end=end, area=area, status=status, responsible=responsible,
    )
    metrics = projections.report_metrics(filtered)

    # 2. METRICS
    m = st.columns(4)
    m[0].metric("Total de OS", metrics["total"])
    m[1].metric("Concluídas", metrics["completed"])
    m[2].metric("Valor Total", format_brl(metrics["total_value"]))
    m[3].metric("Tempo Médio de Resolução", f"{metrics['avg_resolution_days']} dias")

    # 3. EXPORT
    today = date.today()
    e1, e2, _ = st.columns([1, 1, 3])
    e1.download_button(
        "⬇️ CSV",
        projections.export_csv(filtered).encode("utf-8"),
        projections.csv_filename(today),
        "text/csv",
    )
    e2.download_button(
        "📄 Relatório (DOCX)",
        doc_renderer.render_report(filtered, metrics, today),
        f"relatorio_juridico_{today.isoformat()}.docx",
        doc_renderer.DOCX_MIME,
    )

    # 4. TABLE
    if not filtered:
        st.info("Nenhum registro encontrado para os filtros selecionados.")
        return
    st.dataframe(
        [
            {
                "OS": o.os_number,
                "Cliente": o.client_name,
                "Área": enum_value(o.legal_area),
                "Status": enum_value(o.status),
                "Responsável": o.responsible,
                "Data Criação": format_date_br(o.created_at),
                "Valor": format_brl(o.value),
            }
            for o in filtered
        ],
        use_container_width=True,
        hide_index=True,
    )
