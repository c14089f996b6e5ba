# lexflow/projections.py
"""
Read-only derivations over the order collection for the dashboard, the
reports page and the documents page. Nothing here mutates its input.
"""

import math
from datetime import date, datetime

from . import config
from .models import COMPLETED_STATUSES, IN_PROGRESS_STATUSES, OSStatus, enum_value
from .utils import format_date_br, parse_timestamp

CSV_HEADER = ["ID", "Cliente", "Área", "Status", "Responsável", "Data Criação", "Valor (R$)"]


def _matches(selected, value):
    return not selected or selected == config.FILTER_ALL or enum_value(value) == enum_value(selected)


# --- DASHBOARD ---
def dashboard_stats(orders):
    return {
        "total": len(orders),
        "open": sum(1 for o in orders if o.status == OSStatus.ABERTA),
        "in_progress": sum(1 for o in orders if o.status in IN_PROGRESS_STATUSES),
        "completed": sum(1 for o in orders if o.status in COMPLETED_STATUSES),
    }


def filter_orders(orders, text="", status=config.FILTER_ALL, area=config.FILTER_ALL):
    """Free text on client, OS number or responsible; exact status and area."""
    needle = (text or "").lower()
    result = []
    for o in orders:
        matches_text = (
            needle in o.client_name.lower()
            or needle in o.os_number.lower()
            or needle in o.responsible.lower()
        )
        if matches_text and _matches(status, o.status) and _matches(area, o.legal_area):
            result.append(o)
    return result


# --- REPORTS ---
def _as_date(value):
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    dt = parse_timestamp(value)
    return dt.date() if dt else None


def filter_report(orders, start=None, end=None, area=config.FILTER_ALL,
                  status=config.FILTER_ALL, responsible=""):
    """Creation date inside the inclusive [start, end] range; open bounds allowed."""
    start_d, end_d = _as_date(start), _as_date(end)
    who = (responsible or "").lower()
    result = []
    for o in orders:
        created = parse_timestamp(o.created_at)
        created_d = created.date() if created else None
        if start_d and (created_d is None or created_d < start_d):
            continue
        if end_d and (created_d is None or created_d > end_d):
            continue
        if not _matches(area, o.legal_area) or not _matches(status, o.status):
            continue
        if who and who not in o.responsible.lower():
            continue
        result.append(o)
    return result


def _resolution_days(order):
    start = parse_timestamp(order.created_at)
    end = parse_timestamp(order.updated_at)
    if start is None or end is None:
        return None
    return (end - start).total_seconds() / 86400


def report_metrics(orders):
    completed = [o for o in orders if o.status in COMPLETED_STATUSES]
    times = [d for d in (_resolution_days(o) for o in completed) if d is not None]
    avg = math.floor(sum(times) / len(times) + 0.5) if times else 0
    return {
        "total": len(orders),
        "completed": len(completed),
        "total_value": sum(o.value or 0 for o in orders),
        "avg_resolution_days": int(avg),
    }


def _quote(text):
    return '"' + text.replace('"', '""') + '"'


def export_csv(orders):
    lines = [",".join(CSV_HEADER)]
    for o in orders:
        lines.append(",".join([
            o.os_number,
            _quote(o.client_name),
            enum_value(o.legal_area),
            enum_value(o.status),
            o.responsible,
            format_date_br(o.created_at),
            f"{(o.value or 0):.2f}",
        ]))
    return "\n".join(lines)


def csv_filename(today=None):
    today = today or date.today()
    return f"relatorio_juridico_{today.isoformat()}.csv"


# --- DOCUMENTS ---
def list_documents(orders):
    """Two placeholder documents per order: fee agreement and power of attorney."""
    documents = []
    for o in orders:
        documents.append({
            "id": f"{o.id}-doc1",
            "title": f"Contrato de Honorários - {o.client_name}",
            "type": "Contrato",
            "date": o.created_at,
            "os_number": o.os_number,
            "order_id": o.id,
        })
        documents.append({
            "id": f"{o.id}-doc2",
            "title": f"Procuração Ad Judicia - {o.client_name}",
            "type": "Procuração",
            "date": o.created_at,
            "os_number": o.os_number,
            "order_id": o.id,
        })
    return documents
