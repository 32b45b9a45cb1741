"""
Esquemas de petición/respuesta y enums de proveedores.

FASE 1 - Enums base:
  - TargetLang: idiomas de práctica aceptados desde el cliente (ES, HE, RU).
  - TranslationProvider / ChatProvider: claves de registro en ServiceFactory.

FASE 2 - Schemas de request/response:
  - El frontend habla camelCase (targetLang, aiTextX...). En Python se usa snake_case
    y alias_generator=to_camel hace la traducción en ambos sentidos.
  - ProcessSpeechRequest limpia el texto transcrito y rechaza textos vacíos.
  - ProcessSpeechResponse: formato único de salida de POST /api/process-speech.
"""
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Idioma pivote para DeepL: todo lo que entra al modelo va en inglés
PIVOT_LANG = "EN"


class TargetLang(str, Enum):
    """Idiomas que el usuario puede practicar. Coinciden con los códigos de DeepL."""
    ES = "ES"
    HE = "HE"
    RU = "RU"


class TranslationProvider(str, Enum):
    """Proveedores de traducción soportados."""
    DEEPL = "DeepL"


class ChatProvider(str, Enum):
    """Proveedores de generación de texto soportados."""
    OLLAMA = "Ollama"


class CamelModel(BaseModel):
    """Base con alias camelCase en el JSON y nombres snake_case en Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProcessSpeechRequest(CamelModel):
    """
    Texto transcrito por el navegador y el idioma en el que se habló.
    Salida esperada: un objeto con el texto sin espacios sobrantes.
    """
    text: str = Field(..., description="Transcripción del reconocimiento de voz")
    target_lang: TargetLang = Field(TargetLang.ES, description="Idioma de práctica")

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("El texto no puede estar vacío")
        return v


class WordCheck(CamelModel):
    """Información de vocabulario que acompaña a cada respuesta."""
    approved_words_count: int
    words_used: List[str]


class ProcessSpeechResponse(CamelModel):
    """
    Resultado completo del pipeline.
    Atributos:
        - user_text: texto original del usuario.
        - english_input: traducción al inglés enviada al modelo.
        - ai_text_raw: respuesta del modelo sin emojis.
        - ai_text: respuesta capitalizada y puntuada (inglés).
        - ai_text_x: respuesta traducida al idioma de práctica (la que se lee en voz alta).
    """
    user_text: str
    english_input: str
    ai_text_raw: str
    ai_text: str
    ai_text_x: str
    target_lang: TargetLang
    word_check: WordCheck


class ErrorResponse(BaseModel):
    """Cuerpo de las respuestas 500."""
    error: str


class StatusResponse(CamelModel):
    """Estado rápido del backend para GET /test."""
    message: str
    approved_words_count: int
    deepl_key_set: bool
    ollama_model: str
