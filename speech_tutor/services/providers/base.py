"""
Clases base abstractas para los servicios externos.

FASE 1 - Contratos:
  - BaseTranslationService.translate(text, source_lang, target_lang) -> str
  - BaseChatService.generate(prompt) -> str

FASE 2 - Por qué abstracto:
  - ServiceFactory devuelve "cualquier servicio" que cumpla el contrato, y
    LanguageTutorService no conoce DeepL ni Ollama directamente.
  - Los tests sustituyen los servicios reales por implementaciones falsas.
"""
from abc import ABC, abstractmethod


class BaseTranslationService(ABC):
    """Interfaz que deben cumplir DeepL y cualquier traductor futuro."""

    @abstractmethod
    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Traduce text de source_lang a target_lang (códigos de DeepL: EN, ES, HE, RU)."""


class BaseChatService(ABC):
    """Interfaz para modelos de lenguaje que generan texto a partir de un prompt."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Devuelve la respuesta del modelo ya sin espacios sobrantes."""
