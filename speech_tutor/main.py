"""
Punto de entrada de la aplicación Speech Tutor.

FASE 1 - Arranque (lifespan):
  - Configura logging y carga una sola vez la lista de palabras aprobadas.
  - Avisa en el log si falta DEEPL_API_KEY (la app arranca igual; las traducciones
    devolverán frases de respaldo).

FASE 2 - CORS:
  - El frontend puede servirse desde otro puerto (p. ej. un servidor de desarrollo),
    así que se permiten todos los orígenes.

FASE 3 - Rutas:
  - API bajo /api (POST /api/process-speech).
  - /health y /test quedan en la raíz para monitoreo rápido.

FASE 4 - Archivos estáticos:
  - Monta speech_tutor/static/ en la raíz: / sirve index.html, /app.js y /style.css.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.api_router import api_router
from .core.config import settings
from .core.logging_config import setup_logging
from .schemas.speech import StatusResponse
from .services.vocabulary import get_vocabulary

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    vocabulary = get_vocabulary()
    logger.info("Palabras aprobadas cargadas: %s", vocabulary.count)
    logger.info("Modelo de Ollama: %s", settings.OLLAMA_MODEL)
    if not settings.DEEPL_API_KEY:
        logger.error("Falta DEEPL_API_KEY en el entorno o en .env; DeepL usará frases de respaldo")
    yield


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,  # Con "*" no se puede usar True (especificación CORS)
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/health")
def health_check():
    """Responde rápido sin depender de servicios externos (DeepL, Ollama)."""
    return {"status": "ok"}


@app.get("/test", response_model=StatusResponse)
def status_check():
    """Resumen de configuración: palabras cargadas, API Key presente y modelo."""
    return StatusResponse(
        message="DeepL + Ollama ready!",
        approved_words_count=get_vocabulary().count,
        deepl_key_set=bool(settings.DEEPL_API_KEY),
        ollama_model=settings.OLLAMA_MODEL,
    )


# Archivos estáticos: debe ir al final para no interceptar /health, /test ni /api
STATIC_DIR = Path(__file__).resolve().parent / "static"
if STATIC_DIR.exists():
    app.mount("/", StaticFiles(directory=str(STATIC_DIR), html=True), name="static")


def run():
    """Arranca el servidor en HOST:PORT (3001 por defecto, el puerto que usa el frontend)."""
    setup_logging(settings.LOG_LEVEL)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
