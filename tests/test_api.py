"""
Pruebas de los endpoints HTTP con TestClient.

build_tutor_service se sustituye en el módulo del endpoint para que ninguna
petición salga a DeepL u Ollama.
"""
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from speech_tutor.api.endpoints import speech
import speech_tutor.main
from speech_tutor.main import STATIC_DIR, app
from speech_tutor.services.tutor import LanguageTutorService

from conftest import FakeChat, FakeTranslator


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fake_service(monkeypatch, vocabulary):
    service = LanguageTutorService(FakeTranslator(), FakeChat(), vocabulary)
    monkeypatch.setattr(speech, "build_tutor_service", lambda: service)
    return service


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_status_reports_configuration(client):
    body = client.get("/test").json()
    assert body["message"] == "DeepL + Ollama ready!"
    assert body["approvedWordsCount"] > 0
    assert isinstance(body["deeplKeySet"], bool)
    assert "ollamaModel" in body


def test_process_speech(client, fake_service):
    response = client.post("/api/process-speech", json={"text": "  Hola amigo ", "targetLang": "ES"})

    assert response.status_code == 200
    body = response.json()
    assert body["userText"] == "Hola amigo"
    assert body["englishInput"] == "[ES->EN] Hola amigo"
    assert body["aiText"] == "I like coffee in the morning."
    assert body["aiTextX"] == "[EN->ES] I like coffee in the morning."
    assert body["targetLang"] == "ES"
    assert body["wordCheck"]["approvedWordsCount"] == 60
    print("✅ POST /api/process-speech responde en camelCase")


def test_process_speech_defaults_to_spanish(client, fake_service):
    body = client.post("/api/process-speech", json={"text": "Hola"}).json()
    assert body["targetLang"] == "ES"


@pytest.mark.parametrize(
    "payload",
    [
        {"text": "Bonjour", "targetLang": "FR"},
        {"text": "   ", "targetLang": "ES"},
        {"targetLang": "ES"},
    ],
)
def test_process_speech_rejects_invalid_body(client, fake_service, payload):
    assert client.post("/api/process-speech", json=payload).status_code == 422


def test_process_speech_unexpected_error_returns_500(client, monkeypatch):
    def broken():
        raise RuntimeError("vocabulary missing")

    monkeypatch.setattr(speech, "build_tutor_service", broken)

    response = client.post("/api/process-speech", json={"text": "Hola", "targetLang": "ES"})
    assert response.status_code == 500
    assert response.json() == {"error": "vocabulary missing"}


def test_process_speech_accepts_long_transcript(client, fake_service):
    """El dictado continuo produce textos largos; no hay límite de longitud."""
    text = "hola " * 500
    response = client.post("/api/process-speech", json={"text": text, "targetLang": "ES"})

    assert response.status_code == 200
    assert response.json()["userText"] == text.strip()


def test_root_serves_client_page(client):
    """La página del cliente se sirve desde el paquete, no desde el repositorio."""
    assert STATIC_DIR.parent == Path(speech_tutor.main.__file__).resolve().parent

    response = client.get("/")
    assert response.status_code == 200
    assert "AI Language Practice Tutor" in response.text
    assert client.get("/app.js").status_code == 200
    print("✅ GET / sirve la página del cliente")
