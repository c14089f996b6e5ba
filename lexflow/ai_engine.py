# lexflow/ai_engine.py
import logging

from google import genai
from google.genai import types

from . import config
from .models import ChatMessage, enum_value
from .utils import new_id

logger = logging.getLogger(__name__)

ADVICE_UNAVAILABLE = "Não foi possível gerar uma resposta no momento."
ADVICE_ERROR = (
    "Desculpe, ocorreu um erro ao consultar a Inteligência Artificial. "
    "Verifique sua chave de API."
)
WELCOME_TEXT = "Olá. Sou sua IA jurídica. Como posso ajudar com seus processos hoje?"

PERSONA = """Você é um assistente jurídico sênior de um escritório de advocacia de alto nível.
Seu tom deve ser profissional, objetivo, estratégico e formal (jurídico).
Você auxilia advogados na tomada de decisão, gestão de prazos e definição de estratégias processuais.
Responda em Português do Brasil."""


# --- 1. PROMPT ---
def build_system_instruction(order=None):
    instruction = PERSONA
    if order is not None:
        instruction += f"""

ESTÁ SENDO ANALISADA A SEGUINTE ORDEM DE SERVIÇO (OS):
- Número: {order.os_number}
- Cliente: {order.client_name}
- Área: {enum_value(order.legal_area)}
- Status: {enum_value(order.status)}
- Descrição do Caso: {order.description}
- Estratégia Atual: {order.strategy}
- Métodos: {order.methods}
- Prazos: {order.deadlines}

Use essas informações para fornecer respostas específicas e contextualizadas sobre este caso."""
    return instruction


# --- 2. CLIENT ---
class TextGenerator:
    """One request, one text answer. Swap in a fake for tests."""

    def generate(self, model, prompt, system_instruction, temperature, max_output_tokens):
        raise NotImplementedError


class GeminiTextGenerator(TextGenerator):
    def __init__(self, api_key, timeout_ms=config.GEMINI_TIMEOUT_MS):
        self.client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(timeout_ms)),
        )

    def generate(self, model, prompt, system_instruction, temperature, max_output_tokens):
        conf = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
        response = self.client.models.generate_content(
            model=model,
            contents=prompt,
            config=conf,
        )
        return response.text


def get_generator():
    """Gemini generator from GOOGLE_API_KEY, or None when the key is missing."""
    api_key = config.get_setting("GOOGLE_API_KEY")
    if not api_key:
        logger.warning("GOOGLE_API_KEY missing, AI assistant disabled")
        return None
    timeout_ms = config.get_setting("GEMINI_TIMEOUT_MS") or config.GEMINI_TIMEOUT_MS
    try:
        return GeminiTextGenerator(api_key, timeout_ms=timeout_ms)
    except Exception as e:
        logger.error("Gemini client init failed: %s", e)
        return None


# --- 3. ADVISOR ---
class LegalAdvisor:
    """
    Stateless: each call sends only the current prompt plus the system
    instruction. Never raises; failures become a fixed fallback text.
    """

    def __init__(self, generator, model=None,
                 temperature=config.GEMINI_TEMPERATURE,
                 max_output_tokens=config.GEMINI_MAX_OUTPUT_TOKENS):
        self.generator = generator
        self.model = model or config.GEMINI_MODEL
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

    def advise(self, prompt, order=None):
        if self.generator is None:
            return ADVICE_ERROR
        try:
            text = self.generator.generate(
                model=self.model,
                prompt=prompt,
                system_instruction=build_system_instruction(order),
                temperature=self.temperature,
                max_output_tokens=self.max_output_tokens,
            )
        except Exception:
            logger.exception("Erro ao chamar Gemini API")
            return ADVICE_ERROR
        if not isinstance(text, str) or not text.strip():
            return ADVICE_UNAVAILABLE
        return text


# --- 4. CHAT ---
def welcome_message():
    return ChatMessage(id="welcome", role="model", text=WELCOME_TEXT)


def context_message(order):
    text = (
        f"Entendido. Estou com o contexto da OS {order.os_number} ({order.client_name}). "
        "Pode perguntar sobre estratégia, prazos ou métodos."
    )
    return ChatMessage(id=new_id(), role="model", text=text)
