# lexflow/models.py
"""
Record types for LexFlow.

Records are serialized with the camelCase keys used by the stored JSON
(osNumber, clientName, ...). Reading is lenient: missing keys take the field
default and unknown enum values are kept as plain strings, so collections
written by older versions still load.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List


class LegalArea(str, Enum):
    TRABALHISTA = "Trabalhista"
    CIVEL = "Cível"
    PENAL = "Penal"
    TRIBUTARIO = "Tributário"
    PREVIDENCIARIO = "Previdenciário"
    CORPORATIVO = "Corporativo"
    DIREITOS_AUTORAIS = "Direitos Autorais"


class OSStatus(str, Enum):
    ABERTA = "Aberta"
    EM_ANDAMENTO = "Em Andamento"
    AGUARDANDO_DOCS = "Aguardando Docs"
    CONCLUIDA = "Concluída"
    ARQUIVADA = "Arquivada"


class ClientType(str, Enum):
    PESSOA_FISICA = "Pessoa Física"
    PESSOA_JURIDICA = "Pessoa Jurídica"


IN_PROGRESS_STATUSES = (OSStatus.EM_ANDAMENTO, OSStatus.AGUARDANDO_DOCS)
COMPLETED_STATUSES = (OSStatus.CONCLUIDA, OSStatus.ARQUIVADA)


def coerce_enum(enum_cls, value, default):
    if value is None or value == "":
        return default
    try:
        return enum_cls(value)
    except ValueError:
        return str(value)


def _text(data, key):
    value = data.get(key)
    return "" if value is None else str(value)


def _amount(value):
    try:
        amount = float(value or 0)
    except (TypeError, ValueError):
        return 0.0
    return amount if amount > 0 else 0.0


def enum_value(value):
    """Plain string for an enum member or a legacy free-text value."""
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True)
class LogEntry:
    id: str
    date: str
    user: str
    action: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "date": self.date, "user": self.user, "action": self.action}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        return cls(
            id=_text(data, "id"),
            date=_text(data, "date"),
            user=_text(data, "user"),
            action=_text(data, "action"),
        )


@dataclass
class ServiceOrder:
    """A legal case file ("Ordem de Serviço")."""

    id: str
    os_number: str
    client_name: str = ""
    legal_area: LegalArea = LegalArea.CIVEL
    description: str = ""
    strategy: str = ""
    methods: str = ""
    deadlines: str = ""
    status: OSStatus = OSStatus.ABERTA
    responsible: str = ""
    internal_notes: str = ""
    value: float = 0.0
    history: List[LogEntry] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    @property
    def is_completed(self) -> bool:
        return self.status in COMPLETED_STATUSES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "osNumber": self.os_number,
            "clientName": self.client_name,
            "legalArea": enum_value(self.legal_area),
            "description": self.description,
            "strategy": self.strategy,
            "methods": self.methods,
            "deadlines": self.deadlines,
            "status": enum_value(self.status),
            "responsible": self.responsible,
            "internalNotes": self.internal_notes,
            "value": self.value,
            "history": [entry.to_dict() for entry in self.history],
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServiceOrder":
        history = data.get("history") or []
        created_at = _text(data, "createdAt")
        return cls(
            id=_text(data, "id"),
            os_number=_text(data, "osNumber"),
            client_name=_text(data, "clientName"),
            legal_area=coerce_enum(LegalArea, data.get("legalArea"), LegalArea.CIVEL),
            description=_text(data, "description"),
            strategy=_text(data, "strategy"),
            methods=_text(data, "methods"),
            deadlines=_text(data, "deadlines"),
            status=coerce_enum(OSStatus, data.get("status"), OSStatus.ABERTA),
            responsible=_text(data, "responsible"),
            internal_notes=_text(data, "internalNotes"),
            value=_amount(data.get("value")),
            history=[LogEntry.from_dict(h) for h in history if isinstance(h, dict)],
            created_at=created_at,
            updated_at=_text(data, "updatedAt") or created_at,
        )


@dataclass
class Client:
    id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    type: ClientType = ClientType.PESSOA_FISICA
    document: str = ""  # CPF or CNPJ, not validated

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "type": enum_value(self.type),
            "document": self.document,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Client":
        return cls(
            id=_text(data, "id"),
            name=_text(data, "name"),
            email=_text(data, "email"),
            phone=_text(data, "phone"),
            type=coerce_enum(ClientType, data.get("type"), ClientType.PESSOA_FISICA),
            document=_text(data, "document"),
        )


@dataclass
class ChatMessage:
    """A chat turn. Lives in the session only, never persisted."""

    id: str
    role: str  # "user" | "model"
    text: str
    timestamp: datetime = field(default_factory=datetime.now)
