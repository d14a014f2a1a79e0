import logging
from typing import Optional

from src.models.domain import ParsedTransaction, TransactionType
from src.utils.lexicon import (
    EXPENSE_CATEGORIES,
    EXPENSE_CATEGORY_TRIGGERS,
    EXPENSE_HINTS,
    EXPENSE_PRIORITY_HINTS,
    INCOME_HINTS,
    PLATFORM_PATTERNS,
)
from src.utils.number_words import parse_number_from_words
from src.utils.text_normalizer import includes_any, normalize_for_match, sanitize_tokens
from src.utils.value_extractor import extract_first_amount

logger = logging.getLogger(__name__)

REAIS_WORDS = ("real", "reais")
CENTAVOS_WORDS = ("centavo", "centavos")


def _index_of(words: list[str], targets: tuple[str, ...]) -> int:
    for index, word in enumerate(words):
        if word in targets:
            return index
    return -1


def extract_amount(text: str) -> Optional[float]:
    """
    Valor da transação: primeiro numeral com dígitos; sem dígitos, lê o valor
    por extenso ("cem reais e cinquenta centavos").
    """
    amount = extract_first_amount(text)
    if amount is not None:
        return amount

    words = sanitize_tokens(text)
    idx_reais = _index_of(words, REAIS_WORDS)
    idx_centavos = _index_of(words, CENTAVOS_WORDS)

    integer_part = None
    cents_part = None

    if idx_reais >= 0:
        integer_part = parse_number_from_words(words[:idx_reais])
    if idx_centavos >= 0:
        start = idx_reais + 1 if idx_reais >= 0 else 0
        cents_part = parse_number_from_words(words[start:idx_centavos])

    if integer_part is None and cents_part is None:
        integer_part = parse_number_from_words(words)

    if integer_part is None and cents_part is None:
        return None
    return (integer_part or 0) + min(99, cents_part or 0) / 100


def detect_platform(text: str) -> Optional[str]:
    normalized = normalize_for_match(text)
    if not normalized:
        return None

    for platform, patterns in PLATFORM_PATTERNS:
        if any(pattern.search(normalized) for pattern in patterns):
            return platform
    return None


def detect_category(text: str) -> Optional[str]:
    for category, keywords in EXPENSE_CATEGORIES:
        if includes_any(text, keywords):
            return category
    return None


def classify(text: str, platform: Optional[str] = None) -> Optional[TransactionType]:
    """
    Despesa quando há vocabulário de gasto e (um verbo de gasto, nenhum
    indício de receita ou uma palavra de categoria). Caso contrário receita,
    se houver indício de receita.
    """
    is_expense = includes_any(text, EXPENSE_HINTS)
    is_income = platform is not None or includes_any(text, INCOME_HINTS)

    if is_expense and (
        not is_income
        or includes_any(text, EXPENSE_PRIORITY_HINTS)
        or includes_any(text, EXPENSE_CATEGORY_TRIGGERS)
    ):
        return "expense"
    if is_income:
        return "income"
    return None


def parse_transaction(transcript: str) -> Optional[ParsedTransaction]:
    if not transcript or not transcript.strip():
        return None

    text = transcript.lower()
    amount = extract_amount(text)
    platform = detect_platform(text)
    transaction_type = classify(text, platform)

    if transaction_type is None:
        logger.debug("Transcript did not match income or expense vocabulary")
        return None

    if transaction_type == "expense":
        return ParsedTransaction(
            type="expense",
            amount=amount,
            description=transcript.strip(),
            category=detect_category(text),
        )

    return ParsedTransaction(
        type="income",
        amount=amount,
        description=transcript.strip(),
        platform=platform,
    )
