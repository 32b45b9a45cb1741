"""
Router principal de la API.

Se monta en main.py con el prefijo API_PREFIX (/api), así la ruta queda como
/api/process-speech, que es la que llama el frontend.
"""
from fastapi import APIRouter

from .endpoints import speech

api_router = APIRouter()

api_router.include_router(speech.router, tags=["speech"])
