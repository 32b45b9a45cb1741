"""
Endpoint de procesamiento de voz.

POST /process-speech recibe el texto transcrito por el navegador y el idioma de
práctica, y delega en LanguageTutorService.process(). El endpoint es síncrono:
FastAPI lo ejecuta en su threadpool, así las llamadas bloqueantes a DeepL/Ollama
no frenan el event loop.

Los fallos de DeepL y Ollama ya se resuelven con frases de respaldo dentro del
servicio; aquí solo llega lo inesperado, que se devuelve como 500 {"error": ...}.
"""
import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from speech_tutor.schemas.speech import (
    ErrorResponse,
    ProcessSpeechRequest,
    ProcessSpeechResponse,
)
from speech_tutor.services.tutor import build_tutor_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/process-speech",
    response_model=ProcessSpeechResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Traducir, responder y traducir de vuelta",
)
def process_speech(request: ProcessSpeechRequest):
    try:
        service = build_tutor_service()
        return service.process(request.text, request.target_lang)
    except Exception as exc:
        logger.exception("Fallo al procesar la voz: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )
