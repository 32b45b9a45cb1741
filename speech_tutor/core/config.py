"""
Configuración central de la aplicación.

FASE 1 - Carga de variables:
  - pydantic-settings lee automáticamente desde .env en la raíz del proyecto.
  - DEEPL_API_KEY es la única credencial; Ollama corre en local sin autenticación.

FASE 2 - Valores por defecto:
  - Los timeouts, el modelo y las opciones de Ollama reproducen los valores con los
    que se probó la demo (qwen3:1.7b, 512 tokens, temperature 0.3).
  - La API Key es Optional para que la app arranque sin ella; el servicio de
    traducción la valida en cada llamada y devuelve su frase de respaldo si falta.

FASE 3 - Uso:
  - Se importa 'settings' y se accede a settings.DEEPL_API_KEY, etc.
  - case_sensitive=True evita que "deepl_api_key" sobrescriba "DEEPL_API_KEY".
"""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Lista de palabras aprobadas incluida con el paquete
DEFAULT_APPROVED_WORDS_FILE = Path(__file__).resolve().parent.parent / "data" / "approved_words.json"


class Settings(BaseSettings):
    """Configuración tipada accesible desde toda la aplicación."""
    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")

    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Speech Tutor API"
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"

    # Proveedores registrados en ServiceFactory
    TRANSLATION_PROVIDER: str = "DeepL"
    CHAT_PROVIDER: str = "Ollama"

    # DeepL: autenticación por cabecera "DeepL-Auth-Key"
    DEEPL_API_KEY: Optional[str] = None
    DEEPL_API_URL: str = "https://api-free.deepl.com/v2/translate"
    DEEPL_TIMEOUT: float = 10.0

    # Ollama local (/api/generate sin streaming)
    OLLAMA_URL: str = "http://localhost:11434/api/generate"
    OLLAMA_MODEL: str = "qwen3:1.7b"
    OLLAMA_TIMEOUT: float = 120.0
    OLLAMA_NUM_PREDICT: int = 512
    OLLAMA_TEMPERATURE: float = 0.3
    OLLAMA_TOP_P: float = 0.9
    OLLAMA_NUM_CTX: int = 8192

    # Vocabulario e historial
    APPROVED_WORDS_FILE: Path = DEFAULT_APPROVED_WORDS_FILE
    PROMPT_WORD_LIMIT: int = 50
    HISTORY_MAX_ENTRIES: int = 12
    HISTORY_PROMPT_ENTRIES: int = 6


# Instancia global: un solo punto de acceso a la configuración
settings = Settings()
