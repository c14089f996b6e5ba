# lexflow/doc_renderer.py
from io import BytesIO

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from . import config
from .models import enum_value
from .projections import CSV_HEADER
from .utils import format_brl, format_date_br

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

DOC_BODIES = {
    "Contrato": (
        "Pelo presente instrumento, {client} contrata os serviços advocatícios do {office} "
        "para atuação no caso registrado sob a {os_number} ({area}), mediante os honorários "
        "ajustados entre as partes."
    ),
    "Procuração": (
        "{client}, pelo presente instrumento, nomeia e constitui seus procuradores os advogados "
        "do {office}, conferindo-lhes os poderes da cláusula ad judicia para o foro em geral, "
        "relativamente à {os_number} ({area})."
    ),
}


def _to_bytes(doc):
    b = BytesIO()
    doc.save(b)
    return b.getvalue()


def render_document(entry, order):
    """Word file for one of the placeholder documents of an order."""
    doc = Document()
    doc.add_heading(entry["title"], 0)

    meta = doc.add_paragraph()
    meta.add_run(f"{entry['os_number']} | {format_date_br(entry['date'])}").italic = True

    body = DOC_BODIES.get(entry["type"], "")
    p = doc.add_paragraph(body.format(
        client=order.client_name,
        office=config.OFFICE_NAME,
        os_number=order.os_number,
        area=enum_value(order.legal_area),
    ))
    p.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY

    doc.add_paragraph("")
    doc.add_paragraph("_" * 40)
    doc.add_paragraph(order.client_name)
    return _to_bytes(doc)


def render_report(orders, metrics, generated_on):
    """Word version of the filtered report: summary metrics and one table row per order."""
    doc = Document()
    doc.add_heading("Relatório Jurídico", 0)
    doc.add_paragraph(f"{config.OFFICE_NAME} | Gerado em {format_date_br(generated_on)}")

    doc.add_heading("Resumo", level=2)
    for label, value in (
        ("Total de OS", metrics["total"]),
        ("Concluídas", metrics["completed"]),
        ("Valor Total", format_brl(metrics["total_value"])),
        ("Tempo Médio de Resolução", f"{metrics['avg_resolution_days']} dias"),
    ):
        doc.add_paragraph(f"{label}: {value}", style="List Bullet")

    tbl = doc.add_table(rows=1, cols=len(CSV_HEADER))
    tbl.style = "Table Grid"
    for j, title in enumerate(CSV_HEADER):
        tbl.cell(0, j).text = title
    for o in orders:
        cells = tbl.add_row().cells
        row = [
            o.os_number,
            o.client_name,
            enum_value(o.legal_area),
            enum_value(o.status),
            o.responsible,
            format_date_br(o.created_at),
            format_brl(o.value),
        ]
        for j, text in enumerate(row):
            cells[j].text = text

    for row in tbl.rows:
        for cell in row.cells:
            for para in cell.paragraphs:
                for run in para.runs:
                    run.font.size = Pt(9)
    return _to_bytes(doc)
