"""Plantilla del prompt del tutor de conversación."""

TUTOR_PROMPT_TEMPLATE = """You are a friendly conversation partner for English language practice.

STRICT RULES:
1. Use ONLY these approved words: {approved_words}
2. Use only present tense or past tense verbs.

{history_block}

User says: "{user_input}"

Reply following the rules above:"""


def format_history(history: list[dict]) -> str:
    """Convierte el historial a líneas 'role: content'."""
    return "\n".join(f"{m['role']}: {m['content']}" for m in history)


def build_tutor_prompt(user_input: str, approved_words: str, history: list[dict]) -> str:
    """
    Rellena la plantilla. El bloque 'Recent conversation' solo aparece si hay historial.
    approved_words ya viene recortado (ApprovedVocabulary.prompt_list).
    """
    history_context = format_history(history)
    history_block = f"Recent conversation:\n{history_context}\n\n" if history_context else ""
    return TUTOR_PROMPT_TEMPLATE.format(
        approved_words=approved_words,
        history_block=history_block,
        user_input=user_input,
    )
