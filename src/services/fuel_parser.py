import logging
import re
import unicodedata
from typing import Optional

from src.models.domain import Candidate, FuelField, NumericToken, ParsedFuelEntry
from src.utils.lexicon import (
    KM_AFTER_KEYWORD,
    KM_KEYWORDS,
    LITER_ABBREVIATION,
    LITERS_KEYWORDS,
    PLURAL_LITERS,
    PRICE_KEYWORDS,
    SINGULAR_LITER,
    TOTAL_KEYWORDS,
)
from src.utils.text_normalizer import fold_text
from src.utils.value_extractor import (
    apply_spoken_scales,
    extract_numeric_tokens,
    merge_spoken_decimals,
    parse_decimal,
)

logger = logging.getLogger(__name__)

CONTEXT_RADIUS = 25

PRICE_MIN_VALUE = 0.5
PRICE_REALISTIC_MAX = 15
PRICE_ABSOLUTE_MAX = 25
TOTAL_MIN_VALUE = 10
LITERS_MAX = 200

# desempate quando palavras-chave de campos diferentes estão à mesma distância
FIELD_PRECEDENCE: tuple[FuelField, ...] = ("kmCurrent", "pricePerLiter", "liters", "totalCost")

ENTRY_ATTRIBUTES: dict[FuelField, str] = {
    "pricePerLiter": "price_per_liter",
    "totalCost": "total_cost",
    "liters": "liters",
    "kmCurrent": "km_current",
}


class ContextWindow:
    """Trecho normalizado de ±25 caracteres em volta de um numeral."""

    def __init__(self, text: str, token: NumericToken) -> None:
        offset = max(0, token.start - CONTEXT_RADIUS)
        self.text = fold_text(text[offset:min(len(text), token.end + CONTEXT_RADIUS)])
        self.token_start = token.start - offset
        self.token_end = token.end - offset

    def _distance(self, start: int, end: int) -> int:
        if end <= self.token_start:
            return self.token_start - end
        if start >= self.token_end:
            return start - self.token_end
        return 0

    def keyword_distance(self, keywords: tuple[str, ...]) -> Optional[int]:
        distances = []
        for keyword in keywords:
            position = self.text.find(keyword)
            while position != -1:
                distances.append(self._distance(position, position + len(keyword)))
                position = self.text.find(keyword, position + 1)
        return min(distances, default=None)

    def pattern_distance(self, pattern: re.Pattern[str]) -> Optional[int]:
        distances = [self._distance(m.start(), m.end()) for m in pattern.finditer(self.text)]
        return min(distances, default=None)

    def has_singular_liter(self) -> bool:
        return bool(SINGULAR_LITER.search(self.text)) and not PLURAL_LITERS.search(self.text)

    def has_price_keyword(self) -> bool:
        return self.has_singular_liter() or any(k in self.text for k in PRICE_KEYWORDS)


def _nearest(*distances: Optional[int]) -> Optional[int]:
    found = [d for d in distances if d is not None]
    return min(found) if found else None


def classify_context(window: ContextWindow, value: float) -> Optional[tuple[FuelField, float]]:
    singular_liter = window.has_singular_liter()

    hits: dict[FuelField, Optional[int]] = {
        "kmCurrent": window.keyword_distance(KM_KEYWORDS),
        "pricePerLiter": _nearest(
            window.keyword_distance(PRICE_KEYWORDS),
            window.pattern_distance(SINGULAR_LITER) if singular_liter else None,
        ),
        "liters": _nearest(
            window.keyword_distance(LITERS_KEYWORDS),
            window.pattern_distance(LITER_ABBREVIATION),
        ),
        "totalCost": window.keyword_distance(TOTAL_KEYWORDS) if value >= TOTAL_MIN_VALUE else None,
    }
    matched = [f for f in FIELD_PRECEDENCE if hits[f] is not None]
    if not matched:
        return None

    field = min(matched, key=lambda f: (hits[f], FIELD_PRECEDENCE.index(f)))
    if field == "pricePerLiter" and singular_liter:
        return field, 4
    return field, 3


def price_range_priority(value: float) -> Optional[float]:
    if PRICE_MIN_VALUE <= value < 10:
        return 2.5 if value >= 1 else 2
    if PRICE_MIN_VALUE <= value <= PRICE_REALISTIC_MAX:
        return 0.75
    if PRICE_MIN_VALUE <= value <= PRICE_ABSOLUTE_MAX:
        return 0.5
    return None


def price_range_score(value: float) -> int:
    if PRICE_MIN_VALUE <= value < 10:
        return 3
    if PRICE_MIN_VALUE <= value <= PRICE_REALISTIC_MAX:
        return 2
    if PRICE_MIN_VALUE <= value <= PRICE_ABSOLUTE_MAX:
        return 1
    return 0


def collect_candidates(text: str, tokens: list[NumericToken]) -> list[Candidate]:
    candidates: list[Candidate] = []

    for index, token in enumerate(tokens):
        context = classify_context(ContextWindow(text, token), token.value)
        if context is not None:
            field, priority = context
            candidates.append(Candidate(field=field, token_index=index, priority=priority))

    for index, token in enumerate(tokens):
        value = token.value
        price_priority = price_range_priority(value)
        if price_priority is not None:
            candidates.append(Candidate("pricePerLiter", index, price_priority))
        if value >= TOTAL_MIN_VALUE:
            candidates.append(Candidate("totalCost", index, 1))
        if 0 < value <= LITERS_MAX:
            candidates.append(Candidate("liters", index, 1))

    return candidates


def resolve_candidates(tokens: list[NumericToken], candidates: list[Candidate]) -> dict[FuelField, int]:
    """
    Mantém o melhor candidato de cada campo (prioridade, depois o numeral mais
    à direita) e atribui os campos em ordem decrescente. O primeiro campo que
    reivindica um token fica com ele; o guloso não busca o emparelhamento ótimo.
    """

    def rank(candidate: Candidate) -> tuple[float, int]:
        return candidate.priority, tokens[candidate.token_index].start

    best: dict[FuelField, Candidate] = {}
    for candidate in candidates:
        current = best.get(candidate.field)
        if current is None or rank(candidate) >= rank(current):
            best[candidate.field] = candidate

    # empate total: vale a ordem em que cada campo recebeu o primeiro candidato
    field_order = dict.fromkeys(candidate.field for candidate in candidates)
    ordered = sorted((best[f] for f in field_order), key=rank, reverse=True)

    assigned: dict[FuelField, int] = {}
    claimed: set[int] = set()
    for candidate in ordered:
        if candidate.token_index in claimed:
            continue
        assigned[candidate.field] = candidate.token_index
        claimed.add(candidate.token_index)
    return assigned


def repair_price(text: str, tokens: list[NumericToken], assigned: dict[FuelField, int]) -> None:
    price_index = assigned.get("pricePerLiter")
    total_index = assigned.get("totalCost")
    if price_index is None or total_index is None:
        return

    total = tokens[total_index].value
    if total <= 0 or tokens[price_index].value < total:
        return

    claimed = set(assigned.values())
    alternatives = []
    for index, token in enumerate(tokens):
        if index in claimed or token.value >= total or token.value < PRICE_MIN_VALUE:
            continue
        score = price_range_score(token.value)
        if ContextWindow(text, token).has_price_keyword():
            score += 4
        if score > 0:
            alternatives.append((score, token.start, index))

    if alternatives:
        _, _, index = max(alternatives)
        logger.debug(f"Price {tokens[price_index].value} >= total {total}, using {tokens[index].value}")
        assigned["pricePerLiter"] = index
    else:
        logger.debug(f"Price {tokens[price_index].value} >= total {total}, dropping price")
        del assigned["pricePerLiter"]


def find_km_fallback(
    text: str, tokens: list[NumericToken], assigned: dict[FuelField, int]
) -> Optional[tuple[float, Optional[int]]]:
    match = KM_AFTER_KEYWORD.search(fold_text(text))
    if not match:
        return None

    start, end = match.start(1), match.end(1)
    token_index = None
    for index, token in enumerate(tokens):
        if token.start < end and start < token.end:
            if index in assigned.values():
                return None
            token_index = index

    value = parse_decimal(match.group(1))
    if value is None:
        return None
    return value, token_index


def parse_fuel_entry(transcript: str) -> Optional[ParsedFuelEntry]:
    if not transcript or not transcript.strip():
        return None

    text = unicodedata.normalize("NFC", transcript.strip())
    tokens = apply_spoken_scales(text, merge_spoken_decimals(text, extract_numeric_tokens(text)))
    if not tokens:
        return None

    assigned = resolve_candidates(tokens, collect_candidates(text, tokens))
    repair_price(text, tokens, assigned)

    entry = ParsedFuelEntry()
    for field, index in assigned.items():
        setattr(entry, ENTRY_ATTRIBUTES[field], tokens[index].value)
        entry.token_indexes[field] = index

    if entry.km_current is None:
        fallback = find_km_fallback(text, tokens, assigned)
        if fallback is not None:
            entry.km_current, token_index = fallback
            if token_index is not None:
                entry.token_indexes["kmCurrent"] = token_index

    logger.debug(f"Fuel transcript: {len(tokens)} numerals, fields: {sorted(entry.token_indexes)}")

    if entry.is_empty():
        return None
    return entry
