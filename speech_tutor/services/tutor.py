"""
Pipeline del tutor de conversación.

FASE 1 - process() (punto de entrada):
  1. Traduce el texto del usuario (idioma de práctica -> inglés).
  2. reply(): genera la respuesta del modelo en inglés.
  3. filter_to_approved_words(): capitaliza y puntúa.
  4. Traduce la respuesta (inglés -> idioma de práctica).

FASE 2 - reply():
  - Construye el prompt con las primeras palabras aprobadas y los últimos
    HISTORY_PROMPT_ENTRIES mensajes del historial.
  - Quita emojis de la respuesta y guarda el intercambio en el historial.
  - Si el modelo falla devuelve "Error" y el historial no se toca.
"""
import logging
from typing import Optional

from speech_tutor.core.config import settings
from speech_tutor.schemas.speech import (
    PIVOT_LANG,
    ProcessSpeechResponse,
    TargetLang,
    WordCheck,
)
from speech_tutor.services import context_store
from speech_tutor.services.factory import ServiceFactory
from speech_tutor.services.prompts import build_tutor_prompt
from speech_tutor.services.providers.base import BaseChatService, BaseTranslationService
from speech_tutor.services.text_filters import (
    ERROR_REPLY,
    filter_to_approved_words,
    remove_emojis,
    words_used,
)
from speech_tutor.services.vocabulary import ApprovedVocabulary, get_vocabulary

logger = logging.getLogger(__name__)


class LanguageTutorService:
    """Orquesta traductor + modelo de chat + historial para una petición."""

    def __init__(
        self,
        translator: BaseTranslationService,
        chat: BaseChatService,
        vocabulary: ApprovedVocabulary,
        history_entries: Optional[int] = None,
    ):
        self.translator = translator
        self.chat = chat
        self.vocabulary = vocabulary
        self.history_entries = (
            settings.HISTORY_PROMPT_ENTRIES if history_entries is None else history_entries
        )

    def reply(self, english_input: str, target_lang: TargetLang) -> str:
        """Respuesta del modelo en inglés, o "Error" si la llamada falla."""
        try:
            history = context_store.get_history(limit=self.history_entries)
            prompt = build_tutor_prompt(english_input, self.vocabulary.prompt_list, history)
            logger.info("Longitud del prompt: %s caracteres", len(prompt))

            reply = remove_emojis(self.chat.generate(prompt))
        except Exception as exc:
            logger.error("Error del modelo de chat: %s", exc)
            return ERROR_REPLY

        size = context_store.append_exchange(english_input, reply, target_lang.value)
        logger.info("Memoria de conversación: %s mensajes", size)
        return reply

    def process(self, text: str, target_lang: TargetLang) -> ProcessSpeechResponse:
        logger.info("Entrada (%s): %s", target_lang.value, text)

        english_input = self.translator.translate(text, target_lang.value, PIVOT_LANG)
        logger.info("DeepL -> inglés: %s", english_input)

        ai_text_raw = self.reply(english_input, target_lang)
        ai_text = filter_to_approved_words(ai_text_raw)
        logger.info("Modelo -> filtrado: %s", ai_text)

        ai_text_x = self.translator.translate(ai_text, PIVOT_LANG, target_lang.value)
        logger.info("DeepL inglés -> %s: %s", target_lang.value, ai_text_x)

        return ProcessSpeechResponse(
            user_text=text,
            english_input=english_input,
            ai_text_raw=ai_text_raw,
            ai_text=ai_text,
            ai_text_x=ai_text_x,
            target_lang=target_lang,
            word_check=WordCheck(
                approved_words_count=self.vocabulary.count,
                words_used=words_used(ai_text),
            ),
        )


def build_tutor_service() -> LanguageTutorService:
    """Arma el servicio con los proveedores configurados en settings."""
    return LanguageTutorService(
        translator=ServiceFactory.get_translator(settings.TRANSLATION_PROVIDER),
        chat=ServiceFactory.get_chat_service(settings.CHAT_PROVIDER),
        vocabulary=get_vocabulary(),
    )
