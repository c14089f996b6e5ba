# lexflow/repository.py
import copy
import logging
import threading

from . import config
from .exceptions import ValidationError
from .models import Client, ServiceOrder

logger = logging.getLogger(__name__)


class RecordRepository:
    """
    Authoritative in-memory collection of one record kind.

    Every mutation goes through upsert/delete and is followed by a full save
    of the collection. Records are kept newest first.
    """

    def __init__(self, store, key, record_cls, seed):
        self.store = store
        self.key = key
        self.record_cls = record_cls
        self._lock = threading.RLock()
        self._records = self._load(seed)

    def _load(self, seed):
        raw = self.store.load(self.key, None)
        if raw is None:
            return [self.record_cls.from_dict(item) for item in seed]
        try:
            if not isinstance(raw, list):
                raise TypeError(f"expected a list, got {type(raw).__name__}")
            return [self.record_cls.from_dict(item) for item in raw]
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning("Malformed %s collection, using default data: %s", self.key, e)
            return [self.record_cls.from_dict(item) for item in seed]

    def _persist(self):
        self.store.save(self.key, [r.to_dict() for r in self._records])

    def all(self):
        with self._lock:
            return tuple(self._records)

    def get(self, record_id):
        for record in self.all():
            if record.id == record_id:
                return record
        return None

    def upsert(self, record):
        stored = copy.deepcopy(record)
        with self._lock:
            for i, existing in enumerate(self._records):
                if existing.id == record.id:
                    self._records[i] = stored
                    break
            else:
                self._records.insert(0, stored)
            self._persist()
        return stored

    def delete(self, record_id):
        with self._lock:
            self._records = [r for r in self._records if r.id != record_id]
            self._persist()

    def __len__(self):
        return len(self._records)


class Workspace:
    """The office's data: orders, clients and the display name of the acting user."""

    def __init__(self, store):
        self.store = store
        self._lock = threading.Lock()
        self.orders = RecordRepository(store, config.ORDERS_KEY, ServiceOrder, config.INITIAL_SERVICE_ORDERS)
        self.clients = RecordRepository(store, config.CLIENTS_KEY, Client, config.INITIAL_CLIENTS)
        name = store.load(config.USERNAME_KEY, None)
        self._display_name = name if isinstance(name, str) and name.strip() else config.DEFAULT_USER_NAME

    @property
    def display_name(self):
        return self._display_name

    def rename_user(self, name):
        name = (name or "").strip()
        if not name:
            raise ValidationError("Informe um nome de exibição.", field="display_name")
        with self._lock:
            self._display_name = name
            self.store.save(config.USERNAME_KEY, name)
        return name

    def save_client(self, client):
        if not client.name.strip():
            raise ValidationError("Informe o nome do cliente.", field="name")
        return self.clients.upsert(client)
