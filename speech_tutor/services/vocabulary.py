"""
Vocabulario aprobado para las respuestas del tutor.

FASE 1 - Carga:
  - Se lee una sola vez el JSON {"words": [...]} indicado en APPROVED_WORDS_FILE.
  - get_vocabulary() está cacheado: la primera llamada (en el arranque) lee el archivo.

FASE 2 - Uso:
  - prompt_list: las primeras PROMPT_WORD_LIMIT palabras separadas por coma, para el prompt.
  - approved_set: el conjunto en minúsculas. No se usa para filtrar la respuesta;
    la restricción se pide al modelo en el prompt.
"""
import json
from functools import lru_cache
from pathlib import Path
from typing import Union

from speech_tutor.core.config import settings


class ApprovedVocabulary:
    """Lista fija de palabras aprobadas."""

    def __init__(self, words: list[str], prompt_limit: int = 50):
        self.words = list(words)
        self.prompt_limit = prompt_limit
        self.approved_set = frozenset(w.lower() for w in self.words)

    @property
    def count(self) -> int:
        return len(self.words)

    @property
    def prompt_list(self) -> str:
        return ", ".join(self.words[: self.prompt_limit])

    def is_approved(self, word: str) -> bool:
        return word.lower() in self.approved_set


def load_approved_words(path: Union[str, Path]) -> list[str]:
    """
    Lee el archivo de palabras.
    Lanza ValueError si el JSON no tiene una lista 'words' de strings.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    words = data.get("words") if isinstance(data, dict) else None
    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        raise ValueError(f"El archivo '{path}' debe contener una lista 'words' de strings")
    return words


@lru_cache(maxsize=1)
def get_vocabulary() -> ApprovedVocabulary:
    return ApprovedVocabulary(
        load_approved_words(settings.APPROVED_WORDS_FILE),
        prompt_limit=settings.PROMPT_WORD_LIMIT,
    )
