from lexflow import config
from lexflow.models import Client, ClientType, LegalArea, LogEntry, OSStatus, ServiceOrder


def test_order_keys_match_stored_json():
    raw = config.INITIAL_SERVICE_ORDERS[0]

    order = ServiceOrder.from_dict(raw)

    assert order.os_number == "OS-2024-001"
    assert order.legal_area is LegalArea.TRABALHISTA
    assert order.status is OSStatus.EM_ANDAMENTO
    assert order.history[0] == LogEntry(id="h1", date="2024-10-01", user="Dr. Rodrigo", action="OS Criada")
    assert order.to_dict() == raw


def test_order_tolerates_missing_and_bad_fields():
    order = ServiceOrder.from_dict({
        "id": "7",
        "status": "Suspensa",
        "value": "not a number",
        "history": [{"id": "h"}, "junk"],
        "createdAt": "2023-05-01",
    })

    assert order.os_number == ""
    assert order.status == "Suspensa"
    assert order.legal_area is LegalArea.CIVEL
    assert order.value == 0
    assert order.history == [LogEntry(id="h", date="", user="", action="")]
    assert order.updated_at == "2023-05-01"
    assert order.to_dict()["status"] == "Suspensa"


def test_negative_value_reads_as_zero():
    assert ServiceOrder.from_dict({"id": "1", "value": -50}).value == 0


def test_completed_statuses():
    assert ServiceOrder(id="1", os_number="x", status=OSStatus.ARQUIVADA).is_completed
    assert not ServiceOrder(id="1", os_number="x", status=OSStatus.AGUARDANDO_DOCS).is_completed


def test_client_round_trip():
    raw = config.INITIAL_CLIENTS[0]

    client = Client.from_dict(raw)

    assert client.type is ClientType.PESSOA_JURIDICA
    assert client.to_dict() == raw
    assert Client.from_dict({"id": "9"}).type is ClientType.PESSOA_FISICA
