import math
import re
from typing import Optional

from src.models.domain import NumericToken

# 1.200,50 | 50,90 | 50.90 | 50 | R$ 50
AMOUNT_PATTERN = re.compile(
    r"(?:r\$\s*)?(\d{1,3}(?:[.\s]\d{3})*(?:,\d{1,2})|\d+(?:[.,]\d{1,2})?|\d+)",
    re.IGNORECASE,
)

NUMERAL_PATTERN = re.compile(r"\d{1,3}(?:[.\s]\d{3})*(?:,\d{1,3})|\d+(?:[.,]\d{1,3})?")

FLOAT_PREFIX = re.compile(r"\d+\.?\d*|\.\d+")

SPOKEN_DECIMAL_GAP = re.compile(r"\s+e\s+", re.IGNORECASE)
SPOKEN_SCALE = re.compile(r"\s*mil\b", re.IGNORECASE)


def _parse_float_prefix(raw: str) -> Optional[float]:
    match = FLOAT_PREFIX.match(raw)
    if not match:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def normalize_number(raw: str) -> Optional[float]:
    """Pontos seguidos de três dígitos são milhar; vírgula final é decimal."""
    cleaned = re.sub(r"\s+", "", raw)
    cleaned = re.sub(r"\.(?=\d{3}(?:\D|$))", "", cleaned)
    cleaned = re.sub(r",(\d{1,2})$", r".\1", cleaned)
    cleaned = cleaned.replace(",", ".")
    return _parse_float_prefix(cleaned)


def parse_decimal(raw: str) -> Optional[float]:
    """
    Interpreta um numeral no formato brasileiro:
    - com vírgula: pontos são milhar e a vírgula é o decimal
    - sem pontos ou com um ponto: o ponto é decimal
    - dois ou mais pontos: só o último separa a parte decimal
    """
    if not raw:
        return None

    no_spaces = re.sub(r"\s", "", raw.strip())
    if not no_spaces:
        return None

    if "," in no_spaces:
        return _parse_float_prefix(no_spaces.replace(".", "").replace(",", ".", 1))

    if no_spaces.count(".") <= 1:
        return _parse_float_prefix(no_spaces)

    *integer_parts, decimal_part = no_spaces.split(".")
    return _parse_float_prefix(f"{''.join(integer_parts)}.{decimal_part}")


def extract_first_amount(text: str) -> Optional[float]:
    match = AMOUNT_PATTERN.search(text)
    if match:
        return normalize_number(match.group(1))
    return None


def extract_numeric_tokens(text: str) -> list[NumericToken]:
    tokens: list[NumericToken] = []
    for match in NUMERAL_PATTERN.finditer(text):
        value = parse_decimal(match.group(0))
        if value is None:
            continue
        tokens.append(NumericToken(value=value, start=match.start(), end=match.end()))
    return tokens


def merge_spoken_decimals(text: str, tokens: list[NumericToken]) -> list[NumericToken]:
    """Junta "5 e 90" em um único token 5.90."""
    merged: list[NumericToken] = []
    index = 0
    while index < len(tokens):
        current = tokens[index]
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if (
            following is not None
            and re.fullmatch(r"\d", text[current.start:current.end])
            and re.fullmatch(r"\d{2}", text[following.start:following.end])
            and SPOKEN_DECIMAL_GAP.fullmatch(text[current.end:following.start])
        ):
            merged.append(
                NumericToken(
                    value=current.value + following.value / 100,
                    start=current.start,
                    end=following.end,
                )
            )
            index += 2
            continue
        merged.append(current)
        index += 1
    return merged


def apply_spoken_scales(text: str, tokens: list[NumericToken]) -> list[NumericToken]:
    """Multiplica por mil os numerais seguidos da palavra "mil" ("85 mil km")."""
    scaled: list[NumericToken] = []
    for token in tokens:
        match = SPOKEN_SCALE.match(text, token.end)
        if match:
            token = NumericToken(value=token.value * 1000, start=token.start, end=match.end())
        scaled.append(token)
    return scaled
