"""
Factory de servicios por proveedor.

FASE 1 - Patrón Factory:
  - LanguageTutorService no conoce DeepLTranslationService ni OllamaChatService
    directamente. Solo pide "el traductor" y "el modelo" configurados.

FASE 2 - Registro:
  - _translators y _chat_services mapean el enum del proveedor -> clase de servicio.
    Cada llamada instancia la clase; los servicios no guardan estado.

FASE 3 - Extensibilidad:
  - Para agregar un proveedor: añadir al Enum, crear la clase y registrarla aquí.
    Después basta con cambiar TRANSLATION_PROVIDER o CHAT_PROVIDER en .env.
"""
from typing import Dict, Type

from speech_tutor.schemas.speech import ChatProvider, TranslationProvider
from .providers.base import BaseChatService, BaseTranslationService
from .providers.deepl_service import DeepLTranslationService
from .providers.ollama_service import OllamaChatService


class ServiceFactory:
    """Mapeo proveedor -> clase de servicio."""

    _translators: Dict[TranslationProvider, Type[BaseTranslationService]] = {
        TranslationProvider.DEEPL: DeepLTranslationService,
    }
    _chat_services: Dict[ChatProvider, Type[BaseChatService]] = {
        ChatProvider.OLLAMA: OllamaChatService,
    }

    @classmethod
    def get_translator(cls, provider) -> BaseTranslationService:
        """Devuelve una instancia del traductor. Lanza ValueError si el proveedor no existe."""
        service_class = cls._translators.get(_as_enum(TranslationProvider, provider))
        if not service_class:
            raise ValueError(f"El proveedor de traducción '{provider}' no está soportado")
        return service_class()

    @classmethod
    def get_chat_service(cls, provider) -> BaseChatService:
        """Devuelve una instancia del modelo de chat. Lanza ValueError si el proveedor no existe."""
        service_class = cls._chat_services.get(_as_enum(ChatProvider, provider))
        if not service_class:
            raise ValueError(f"El proveedor de chat '{provider}' no está soportado")
        return service_class()


def _as_enum(enum_cls, value):
    """Acepta el miembro del Enum o su valor en texto (como viene de .env)."""
    try:
        return enum_cls(value)
    except ValueError:
        return None
