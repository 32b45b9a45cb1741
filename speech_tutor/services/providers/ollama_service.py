"""
Servicio para un servidor Ollama local.

Llama a POST /api/generate con stream=False, así la respuesta llega completa en
el campo 'response'. Los errores se propagan como ValueError o RequestException;
quien decide la respuesta de respaldo es LanguageTutorService.
"""
import requests

from speech_tutor.core.config import settings
from .base import BaseChatService


class OllamaChatService(BaseChatService):
    """Implementación para Ollama (/api/generate)."""

    def generate(self, prompt: str) -> str:
        data = {
            "model": settings.OLLAMA_MODEL,
            "prompt": prompt,
            "stream": False,
            "options": {
                "num_predict": settings.OLLAMA_NUM_PREDICT,
                "temperature": settings.OLLAMA_TEMPERATURE,
                "top_p": settings.OLLAMA_TOP_P,
                "num_ctx": settings.OLLAMA_NUM_CTX,
            },
        }

        response = requests.post(
            settings.OLLAMA_URL,
            json=data,
            timeout=settings.OLLAMA_TIMEOUT,
        )
        if response.status_code != 200:
            raise ValueError(f"Error de Ollama: {response.text}")

        try:
            return response.json()["response"].strip()
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"Fallo al procesar la respuesta de Ollama: {exc}")
