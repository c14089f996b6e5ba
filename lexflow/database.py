# lexflow/database.py
"""
Persistent key-value store for LexFlow.

Two media share the same contract, load(key, default) / save(key, value):
- JsonFileStore: one <key>.json file per key in a local directory (default).
- SupabaseStore: one row per key in a key/value table.

Loading never raises: an absent, unreadable or corrupt value returns the
supplied default. Saving overwrites the whole value; medium failures are
logged and not surfaced, the in-memory collections stay authoritative.
"""

import json
import logging
import os
import tempfile

import streamlit as st
from supabase import create_client

from . import config

logger = logging.getLogger(__name__)


@st.cache_resource
def init_supabase():
    url = config.get_setting("supabase.url") or config.get_setting("SUPABASE_URL")
    key = config.get_setting("supabase.key") or config.get_setting("SUPABASE_KEY")
    if not url or not key:
        return None
    try:
        return create_client(url, key)
    except Exception as e:
        logger.warning("Supabase init failed: %s", e)
        return None


class JsonFileStore:
    def __init__(self, directory):
        self.directory = directory

    def _path(self, key):
        return os.path.join(self.directory, f"{key}.json")

    def load(self, key, default=None):
        path = self._path(key)
        if not os.path.exists(path):
            return default
        try:
            with open(path, "r", encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, ValueError) as e:
            logger.warning("Unreadable store entry %s, using default: %s", key, e)
            return default

    def save(self, key, value):
        tmp_path = None
        try:
            os.makedirs(self.directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(value, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self._path(key))
            tmp_path = None
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save %s: %s", key, e)
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)


class SupabaseStore:
    """Rows of (key text primary key, value jsonb)."""

    def __init__(self, client, table=config.SUPABASE_TABLE):
        self.client = client
        self.table = table

    def load(self, key, default=None):
        try:
            res = self.client.table(self.table).select("value").eq("key", key).execute()
        except Exception as e:
            logger.warning("Supabase load %s failed, using default: %s", key, e)
            return default
        if not res.data:
            return default
        value = res.data[0].get("value")
        return default if value is None else value

    def save(self, key, value):
        try:
            self.client.table(self.table).upsert({"key": key, "value": value}).execute()
        except Exception as e:
            logger.error("Supabase save %s failed: %s", key, e)


def open_store():
    """Pick the medium from LEXFLOW_STORAGE (local | supabase)."""
    backend = (config.get_setting("LEXFLOW_STORAGE") or "local").lower()
    if backend == "supabase":
        client = init_supabase()
        if client is not None:
            return SupabaseStore(client)
        logger.warning("Supabase not configured, falling back to local storage")
    directory = config.get_setting("LEXFLOW_DATA_DIR") or config.DEFAULT_DATA_DIR
    return JsonFileStore(directory)
