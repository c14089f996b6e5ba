# lexflow/config.py
import os

import streamlit as st

APP_NAME = "LexFlow"
APP_VER = "1.4.0 (Ordens de Serviço & Assistente IA)"
OFFICE_NAME = "Escritório Rodrigo Moraes"

# --- STORAGE ---
ORDERS_KEY = "lexflow_orders"
CLIENTS_KEY = "lexflow_clients"
USERNAME_KEY = "lexflow_username"

SUPABASE_TABLE = "lexflow_storage"
DEFAULT_DATA_DIR = os.path.join(os.path.expanduser("~"), ".lexflow")

DEFAULT_USER_NAME = "Dra. Ana Beatriz Castellucci"

# --- AI ---
GEMINI_MODEL = "gemini-3-flash-preview"
GEMINI_TEMPERATURE = 0.7
GEMINI_MAX_OUTPUT_TOKENS = 800
GEMINI_TIMEOUT_MS = 30000

# Sentinel used by every select filter
FILTER_ALL = "ALL"


def get_setting(name, default=None):
    """
    Reads a setting from the environment first, then st.secrets.
    Nested secrets sections use "section.key" (e.g. "supabase.url").
    """
    env_name = name.upper().replace(".", "_")
    if env_name in os.environ:
        return os.environ[env_name]
    try:
        node = st.secrets
        for part in name.split("."):
            node = node[part]
        return node
    except Exception:
        # No secrets.toml, or key missing
        return default


# --- FALLBACK DATA (empty or corrupt storage) ---
INITIAL_CLIENTS = [
    {
        "id": "1",
        "name": "Indústrias Metalúrgicas Silva",
        "email": "contato@ims.ind.br",
        "phone": "(11) 3344-5566",
        "type": "Pessoa Jurídica",
        "document": "12.345.678/0001-99",
    },
    {
        "id": "2",
        "name": "Mikael Santos",
        "email": "mikael.santos@email.com",
        "phone": "(11) 98765-4321",
        "type": "Pessoa Física",
        "document": "123.456.789-00",
    },
    {
        "id": "3",
        "name": "Mariana Oliveira",
        "email": "mari.oliveira@email.com",
        "phone": "(21) 99888-7777",
        "type": "Pessoa Física",
        "document": "987.654.321-11",
    },
    {
        "id": "4",
        "name": "Tech Solutions LTDA",
        "email": "financeiro@techsolutions.com",
        "phone": "(48) 3030-2020",
        "type": "Pessoa Jurídica",
        "document": "98.765.432/0001-22",
    },
    {
        "id": "5",
        "name": "João da Silva",
        "email": "joao.silva@email.com",
        "phone": "(31) 91234-5678",
        "type": "Pessoa Física",
        "document": "111.222.333-44",
    },
]

INITIAL_SERVICE_ORDERS = [
    {
        "id": "1",
        "osNumber": "OS-2024-001",
        "clientName": "Indústrias Metalúrgicas Silva",
        "legalArea": "Trabalhista",
        "description": "Ação trabalhista movida por ex-funcionário alegando insalubridade e horas extras não pagas.",
        "strategy": "Contestar o laudo pericial técnico apresentado. Reunir cartões de ponto e testemunhas sobre o uso de EPIs.",
        "methods": "Reunião com RH, levantamento de documentação técnica, solicitação de assistente técnico.",
        "deadlines": "Contestação até 15/11/2024",
        "status": "Em Andamento",
        "responsible": "Dr. Rodrigo Moraes",
        "internalNotes": "Cliente preocupado com o impacto financeiro. Prioridade alta.",
        "value": 15000.00,
        "history": [
            {"id": "h1", "date": "2024-10-01", "user": "Dr. Rodrigo", "action": "OS Criada"},
            {"id": "h2", "date": "2024-10-05", "user": "Secretaria", "action": "Documentos recebidos"},
        ],
        "createdAt": "2024-10-01",
        "updatedAt": "2024-10-05",
    },
    {
        "id": "2",
        "osNumber": "OS-2024-002",
        "clientName": "Mariana Oliveira",
        "legalArea": "Cível",
        "description": "Processo de divórcio litigioso com disputa de guarda e bens.",
        "strategy": "Buscar mediação inicial para acordo sobre a guarda. Inventariar bens ocultos.",
        "methods": "Pedido de quebra de sigilo bancário. Reunião de mediação agendada.",
        "deadlines": "Audiência de conciliação 20/11/2024",
        "status": "Aguardando Docs",
        "responsible": "Dra. Ana Beatriz Castellucci",
        "internalNotes": "Cliente muito abalada emocionalmente. Tratar com cautela.",
        "value": 8500.00,
        "history": [
            {"id": "h3", "date": "2024-10-10", "user": "Dra. Ana", "action": "OS Criada"},
        ],
        "createdAt": "2024-10-10",
        "updatedAt": "2024-10-10",
    },
    {
        "id": "3",
        "osNumber": "OS-2024-003",
        "clientName": "Tech Solutions LTDA",
        "legalArea": "Tributário",
        "description": "Autuação fiscal referente a ICMS em operações interestaduais.",
        "strategy": "Impugnação administrativa demonstrando a bitributação indevida.",
        "methods": "Análise contábil, elaboração de defesa administrativa.",
        "deadlines": "Defesa Adm. até 30/10/2024",
        "status": "Aberta",
        "responsible": "Dr. Rodrigo Moraes",
        "internalNotes": "Valor da causa alto. Requer atenção dos sócios.",
        "value": 45000.00,
        "history": [],
        "createdAt": "2024-10-15",
        "updatedAt": "2024-10-15",
    },
    {
        "id": "4",
        "osNumber": "OS-2024-004",
        "clientName": "João da Silva",
        "legalArea": "Previdenciário",
        "description": "Solicitação de aposentadoria por tempo de contribuição indeferida pelo INSS.",
        "strategy": "Ajuizar ação federal para reconhecimento de tempo rural.",
        "methods": "Coleta de provas materiais de atividade rural.",
        "deadlines": "Sem prazo fatal imediato",
        "status": "Concluída",
        "responsible": "Dra. Ana Beatriz Castellucci",
        "internalNotes": "Caso de sucesso provável.",
        "value": 5000.00,
        "history": [
            {"id": "h4", "date": "2024-09-01", "user": "Dr. Rodrigo", "action": "OS Criada"},
            {"id": "h5", "date": "2024-10-20", "user": "Dra. Ana", "action": "Sentença favorável"},
        ],
        "createdAt": "2024-09-01",
        "updatedAt": "2024-10-20",
    },
]
