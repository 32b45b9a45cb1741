"""
Servicio para la API de traducción de DeepL.

FASE 1 - Petición:
  - POST /v2/translate con JSON; 'text' tiene que ser un array aunque sea una sola frase.
  - Autenticación por cabecera: Authorization: DeepL-Auth-Key <key>.

FASE 2 - Errores:
  - Cualquier fallo (sin API Key, timeout, HTTP != 200, JSON inesperado) se registra y
    se sustituye por una frase fija en el idioma destino, para que la demo siga hablando.
"""
import logging

import requests

from speech_tutor.core.config import settings
from .base import BaseTranslationService

logger = logging.getLogger(__name__)

FALLBACK_TRANSLATIONS = {
    "ES": "¡Hola! ¿Cómo estás?",
    "HE": "שלום! מה שלומך?",
    "RU": "Привет! Как дела?",
    "EN": "Hello! How are you?",
}
DEFAULT_FALLBACK = "Hello! Nice to practice."


def fallback_translation(target_lang: str) -> str:
    return FALLBACK_TRANSLATIONS.get(target_lang, DEFAULT_FALLBACK)


class DeepLTranslationService(BaseTranslationService):
    """Implementación para DeepL (plan free por defecto, ver DEEPL_API_URL)."""

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        try:
            return self._request_translation(text, source_lang, target_lang)
        except Exception as exc:
            logger.error("Error de DeepL (%s -> %s): %s", source_lang, target_lang, exc)
            return fallback_translation(target_lang)

    def _request_translation(self, text: str, source_lang: str, target_lang: str) -> str:
        api_key = settings.DEEPL_API_KEY
        if not api_key:
            raise ValueError("La API Key de DeepL no está configurada")

        payload = {
            "text": [text],
            "source_lang": source_lang,
            "target_lang": target_lang,
            "tag_handling": "html",
        }
        response = requests.post(
            settings.DEEPL_API_URL,
            headers={
                "Authorization": f"DeepL-Auth-Key {api_key}",
                "Content-Type": "application/json",
            },
            json=payload,
            timeout=settings.DEEPL_TIMEOUT,
        )
        if response.status_code != 200:
            raise ValueError(f"DeepL respondió {response.status_code}: {response.text}")

        try:
            return response.json()["translations"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise ValueError(f"Fallo al procesar la respuesta de DeepL: {exc}")
