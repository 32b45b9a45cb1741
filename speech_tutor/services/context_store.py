"""
Historial de conversación compartido por todo el proceso.

Guarda los últimos HISTORY_MAX_ENTRIES mensajes (12 por defecto, es decir 6 turnos).
Formato interno: {"role": "user"|"assistant", "content": str, "lang": str}
("lang" solo en los mensajes del usuario). Solo se reinicia al reiniciar el proceso.
"""
import threading
from collections import deque
from typing import Deque, Optional

from speech_tutor.core.config import settings

# deque con maxlen descarta automáticamente los mensajes más antiguos
_history: Deque[dict] = deque(maxlen=settings.HISTORY_MAX_ENTRIES)
_lock = threading.Lock()


def get_history(limit: Optional[int] = None) -> list[dict]:
    """Devuelve una copia del historial; con limit, solo los últimos 'limit' mensajes."""
    with _lock:
        messages = [dict(m) for m in _history]
    if limit is not None:
        return messages[-limit:] if limit > 0 else []
    return messages


def append_exchange(user_text: str, reply: str, lang: str) -> int:
    """
    Añade el mensaje del usuario y la respuesta del asistente como una unidad.
    Devuelve el tamaño del historial tras la inserción.
    """
    with _lock:
        _history.append({"role": "user", "content": user_text, "lang": lang})
        _history.append({"role": "assistant", "content": reply})
        return len(_history)


def clear_history() -> None:
    """Borra el historial (para tests)."""
    with _lock:
        _history.clear()
