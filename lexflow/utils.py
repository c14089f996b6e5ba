# lexflow/utils.py
import random
import secrets
import string
import time
from datetime import date, datetime, timezone

_ID_ALPHABET = string.digits + string.ascii_lowercase


# --- IDS ---
def new_id():
    """Millisecond timestamp plus a random base-36 suffix (e.g. 1729512000000-k3j9x0q2a)."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{int(time.time() * 1000)}-{suffix}"


def new_os_number(year):
    return f"OS-{year}-{random.randint(1000, 9999)}"


# --- DATES ---
def utc_now():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_timestamp(dt):
    """ISO-8601 UTC with milliseconds (2024-10-01T12:00:00.000Z)."""
    return dt.isoformat(timespec="milliseconds") + "Z"


def parse_timestamp(value):
    """
    Accepts date-only strings and ISO timestamps (with or without 'Z').
    Returns a naive UTC datetime, or None when the value cannot be parsed.
    """
    if not value:
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def format_date_br(value):
    """dd/mm/YYYY, or the raw value when it is not a date."""
    dt = parse_timestamp(value)
    if dt is None:
        return str(value or "")
    return dt.strftime("%d/%m/%Y")


# --- FORMATTING ---
def format_brl(amount):
    """R$ 1.234,56"""
    txt = f"{float(amount or 0):,.2f}"
    txt = txt.replace(",", "X").replace(".", ",").replace("X", ".")
    return f"R$ {txt}"


def get_initials(name):
    parts = [p for p in (name or "").split(" ") if p]
    if not parts:
        return "U"
    if len(parts) == 1:
        return parts[0][:2].upper()
    return (parts[0][0] + parts[-1][0]).upper()
