import re
import unicodedata


def remove_accents(text: str) -> str:
    nfd = unicodedata.normalize("NFD", text)
    return "".join(c for c in nfd if not unicodedata.combining(c))


def fold_text(text: str) -> str:
    """Lower-case and strip diacritics, keeping one output char per input char."""
    return remove_accents(text.lower())


def normalize_for_match(text: str) -> str:
    text = fold_text(text)
    text = re.sub(r"[^a-z0-9\s]", " ", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def sanitize_tokens(text: str) -> list[str]:
    return normalize_for_match(text).split()


def includes_any(haystack: str, needles: list[str] | tuple[str, ...]) -> bool:
    """
    Verifica se alguma palavra-chave aparece no texto:
    - palavras simples comparam com tokens inteiros
    - expressões com espaço comparam como substring
    """
    normalized = normalize_for_match(haystack)
    if not normalized:
        return False
    tokens = set(normalized.split(" "))

    for needle in needles:
        normalized_needle = normalize_for_match(needle)
        if not normalized_needle:
            continue
        if " " in normalized_needle:
            if normalized_needle in normalized:
                return True
        elif normalized_needle in tokens:
            return True
    return False


CLARIFICATION_MESSAGES = {
    "transaction": "Não entendi. Tente dizer: 'Gastei 50 reais de gasolina'.",
    "fuel": (
        "Não consegui entender. Tente dizer algo como: "
        "'Abasteci 120 reais a 5,99 o litro e rodei até 85 mil KM'."
    ),
    "fuel_no_data": (
        "Não encontrei dados para preencher. "
        "Fale sobre o valor total, preço por litro, litros ou KM."
    ),
    "transaction_filled": "Campos preenchidos por voz. Confira e salve.",
    "fuel_filled": "Campos preenchidos por voz. Confira antes de salvar.",
}


def get_clarification_message(field_type: str, context: str = "") -> str:
    msg = CLARIFICATION_MESSAGES.get(field_type, "Desculpe, não entendi. Poderia repetir?")
    return f"{msg}\n\n{context}" if context else msg
