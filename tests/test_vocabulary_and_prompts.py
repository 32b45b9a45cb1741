"""
Pruebas del vocabulario aprobado y de la plantilla del prompt.
"""
import json

import pytest

from speech_tutor.services.prompts import build_tutor_prompt
from speech_tutor.services.vocabulary import (
    ApprovedVocabulary,
    get_vocabulary,
    load_approved_words,
)


def test_bundled_word_list_loads():
    """El archivo incluido con el paquete tiene más palabras de las que caben en el prompt."""
    vocabulary = get_vocabulary()
    assert vocabulary.count > 50
    assert len(vocabulary.prompt_list.split(", ")) == 50
    print(f"✅ {vocabulary.count} palabras aprobadas cargadas")


def test_load_approved_words_from_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"words": ["Hello", "friend"]}), encoding="utf-8")
    assert load_approved_words(path) == ["Hello", "friend"]


def test_load_approved_words_rejects_bad_format(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    with pytest.raises(ValueError):
        load_approved_words(path)


def test_prompt_list_is_truncated(vocabulary):
    words = vocabulary.prompt_list.split(", ")
    assert words[0] == "word0"
    assert words[-1] == "word49"
    assert vocabulary.count == 60


def test_is_approved_is_case_insensitive():
    vocabulary = ApprovedVocabulary(["Hello", "friend"])
    assert vocabulary.is_approved("hello")
    assert vocabulary.is_approved("FRIEND")
    assert not vocabulary.is_approved("enemy")


def test_prompt_without_history():
    prompt = build_tutor_prompt("I like dogs", "dog, cat", [])
    assert "1. Use ONLY these approved words: dog, cat" in prompt
    assert "Recent conversation" not in prompt
    assert 'User says: "I like dogs"' in prompt
    assert prompt.endswith("Reply following the rules above:")


def test_prompt_with_history():
    history = [
        {"role": "user", "content": "Hello", "lang": "ES"},
        {"role": "assistant", "content": "Hi! How are you?"},
    ]
    prompt = build_tutor_prompt("Fine {thanks}", "dog", history)
    assert "Recent conversation:\nuser: Hello\nassistant: Hi! How are you?\n\n" in prompt
    assert 'User says: "Fine {thanks}"' in prompt
    print("✅ Prompt con historial construido")
