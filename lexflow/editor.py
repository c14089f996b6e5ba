# lexflow/editor.py
"""
Draft lifecycle of a service order.

An editor starts either NEW (fresh order, not in the repository yet) or
EDITING (private copy of an existing order). Field changes stay on the draft
until save() hands the finalized record to the repository.
"""

import copy
import dataclasses
import logging

from .exceptions import ValidationError
from .models import LegalArea, LogEntry, OSStatus, ServiceOrder
from .utils import new_id, new_os_number, to_timestamp, utc_now

logger = logging.getLogger(__name__)

NEW = "new"
EDITING = "editing"

ACTION_CREATED = "OS Criada"
ACTION_UPDATED = "OS Atualizada"
MISSING_CLIENT_MSG = "Por favor, preencha o nome do cliente."

_EDITABLE_FIELDS = {
    f.name for f in dataclasses.fields(ServiceOrder)
} - {"id", "os_number", "created_at", "updated_at", "history"}

INVALID_VALUE_MSG = "O valor deve ser um número maior ou igual a zero."


def _fee(value):
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(INVALID_VALUE_MSG, field="value") from None
    if amount < 0 or amount != amount:
        raise ValidationError(INVALID_VALUE_MSG, field="value")
    return amount


class OrderEditor:
    def __init__(self, draft, mode, acting_user):
        self.draft = draft
        self.mode = mode
        self.acting_user = acting_user

    @classmethod
    def new(cls, acting_user, now=None):
        now = now or utc_now()
        stamp = to_timestamp(now)
        draft = ServiceOrder(
            id=new_id(),
            os_number=new_os_number(now.year),
            client_name="",
            legal_area=LegalArea.CIVEL,
            status=OSStatus.ABERTA,
            responsible=acting_user,
            value=0.0,
            history=[],
            created_at=stamp,
            updated_at=stamp,
        )
        return cls(draft, NEW, acting_user)

    @classmethod
    def edit(cls, order, acting_user):
        draft = copy.deepcopy(order)
        draft.history = list(order.history)
        return cls(draft, EDITING, acting_user)

    @property
    def is_new(self):
        return self.mode == NEW

    def update(self, **fields):
        unknown = set(fields) - _EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Campo não editável: {', '.join(sorted(unknown))}")
        if "value" in fields:
            fields["value"] = _fee(fields["value"])
        for name, value in fields.items():
            setattr(self.draft, name, value)

    def save(self, repository, now=None):
        if not (self.draft.client_name or "").strip():
            raise ValidationError(MISSING_CLIENT_MSG, field="client_name")

        now = now or utc_now()
        stamp = to_timestamp(now)
        entry = LogEntry(
            id=new_id(),
            date=now.date().isoformat(),
            user=self.acting_user,
            action=ACTION_CREATED if self.is_new else ACTION_UPDATED,
        )
        final = dataclasses.replace(
            self.draft,
            history=[entry] + list(self.draft.history),
            updated_at=stamp,
        )
        saved = repository.upsert(final)
        logger.info("%s %s (%s)", entry.action, saved.os_number, saved.id)
        return saved

    def delete(self, repository):
        if self.is_new:
            raise ValidationError("A OS ainda não foi salva.")
        repository.delete(self.draft.id)
        logger.info("OS excluída %s (%s)", self.draft.os_number, self.draft.id)
