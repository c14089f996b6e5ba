"""
Pytest configuration and fixtures for LexFlow tests.
"""

import pytest

from lexflow.ai_engine import TextGenerator
from lexflow.database import JsonFileStore
from lexflow.models import LegalArea, LogEntry, OSStatus, ServiceOrder
from lexflow.repository import Workspace


class FakeGenerator(TextGenerator):
    """Records every call and answers with a canned reply (or raises)."""

    def __init__(self, reply="Resposta simulada.", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, model, prompt, system_instruction, temperature, max_output_tokens):
        self.calls.append({
            "model": model,
            "prompt": prompt,
            "system_instruction": system_instruction,
            "temperature": temperature,
            "max_output_tokens": max_output_tokens,
        })
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(str(tmp_path / "data"))


@pytest.fixture
def workspace(store):
    """Workspace seeded with the default dataset."""
    return Workspace(store)


@pytest.fixture
def sample_order():
    return ServiceOrder(
        id="os-100",
        os_number="OS-2024-100",
        client_name="Acme Ltda",
        legal_area=LegalArea.TRIBUTARIO,
        description="Execução fiscal de ISS.",
        strategy="Exceção de pré-executividade.",
        methods="Análise das CDAs.",
        deadlines="Prazo 10/12/2024",
        status=OSStatus.EM_ANDAMENTO,
        responsible="Dr. Rodrigo Moraes",
        value=100.0,
        history=[
            LogEntry(id="h2", date="2024-11-02", user="Secretaria", action="Documentos recebidos"),
            LogEntry(id="h1", date="2024-11-01", user="Dr. Rodrigo", action="OS Criada"),
        ],
        created_at="2024-11-01T10:00:00.000Z",
        updated_at="2024-11-02T09:30:00.000Z",
    )


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def make_generator():
    return FakeGenerator
