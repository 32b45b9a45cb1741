"""
Transformaciones de texto sobre la respuesta del modelo.

  - remove_emojis: quita emojis y símbolos (el sintetizador de voz los lee en voz alta).
  - filter_to_approved_words: capitaliza y puntúa. A pesar del nombre no descarta
    palabras fuera del vocabulario; solo sustituye respuestas vacías o erróneas.
  - words_used: tokens de la respuesta para wordCheck.
"""
import re

# Emoticonos, pictogramas, transporte, banderas, símbolos varios y dingbats
EMOJI_PATTERN = re.compile(
    "["
    "\U0001F600-\U0001F64F"
    "\U0001F300-\U0001F5FF"
    "\U0001F680-\U0001F6FF"
    "\U0001F1E0-\U0001F1FF"
    "\u2600-\u26FF"
    "\u2700-\u27BF"
    "]"
)

FALLBACK_REPLY = "It seems there was a problem."
ERROR_REPLY = "Error"
MIN_REPLY_LENGTH = 10


def remove_emojis(text: str) -> str:
    return EMOJI_PATTERN.sub("", text)


def filter_to_approved_words(reply: str) -> str:
    """
    Normaliza la respuesta del modelo.
    Salida esperada: una frase que empieza en mayúscula y siempre termina en punto.
    """
    if not reply or len(reply) < MIN_REPLY_LENGTH or reply == ERROR_REPLY:
        return FALLBACK_REPLY

    text = reply[0].upper() + reply[1:]
    if not text.endswith("."):
        text += "."
    return text


def words_used(text: str) -> list[str]:
    return [w for w in text.lower().split() if len(w) > 1]
