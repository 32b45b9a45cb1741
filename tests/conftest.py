"""
Fixtures compartidas.

  - El historial es global al proceso: se vacía antes y después de cada test.
  - FakeTranslator / FakeChat sustituyen a DeepL y Ollama sin tocar la red.
"""
import pytest

from speech_tutor.services import context_store
from speech_tutor.services.providers.base import BaseChatService, BaseTranslationService
from speech_tutor.services.vocabulary import ApprovedVocabulary


class FakeTranslator(BaseTranslationService):
    """Marca el texto con los idiomas para poder comprobar el sentido de cada traducción."""

    def __init__(self):
        self.calls = []

    def translate(self, text, source_lang, target_lang):
        self.calls.append((text, source_lang, target_lang))
        return f"[{source_lang}->{target_lang}] {text}"


class FakeChat(BaseChatService):
    """Devuelve respuestas fijas y guarda los prompts recibidos."""

    def __init__(self, reply="i like coffee in the morning", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(autouse=True)
def clean_history():
    context_store.clear_history()
    yield
    context_store.clear_history()


@pytest.fixture
def vocabulary():
    return ApprovedVocabulary([f"word{i}" for i in range(60)], prompt_limit=50)


@pytest.fixture
def translator():
    return FakeTranslator()


@pytest.fixture
def chat():
    return FakeChat()
