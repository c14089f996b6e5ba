import streamlit as st

from . import doc_renderer, projections
from .utils import format_date_br


@st.cache_data(max_entries=256)
def document_bytes(doc_id, updated_at, _doc, _order):
    """Rendered .docx, rebuilt only when the order changes."""
    return doc_renderer.render_document(_doc, _order)


def render_documents(workspace):
    st.markdown("## 📄 Documentos")
    st.caption("Documentos gerados a partir das Ordens de Serviço cadastradas.")

    orders = {o.id: o for o in workspace.orders.all()}
    documents = projections.list_documents(orders.values())
    if not documents:
        st.info("Nenhum documento disponível.")
        return

    for doc in documents:
        order = orders[doc["order_id"]]
        c1, c2, c3 = st.columns([4, 1.5, 1])
        c1.markdown(f"**{doc['title']}**")
        c1.caption(f"{doc['type']} · {doc['os_number']}")
        c2.write(format_date_br(doc["date"]))
        c3.download_button(
            "Baixar",
            document_bytes(doc["id"], order.updated_at, doc, order),
            f"{doc['id']}.docx",
            doc_renderer.DOCX_MIME,
            key=f"dl_{doc['id']}",
        )
