from typing import Optional

UNITS = {
    "zero": 0, "um": 1, "uma": 1, "dois": 2, "duas": 2, "tres": 3,
    "quatro": 4, "cinco": 5, "seis": 6, "sete": 7, "oito": 8, "nove": 9,
}

TEENS = {
    "dez": 10, "onze": 11, "doze": 12, "treze": 13, "quatorze": 14, "catorze": 14,
    "quinze": 15, "dezesseis": 16, "dezessete": 17, "dezoito": 18, "dezenove": 19,
}

TENS = {
    "vinte": 20, "trinta": 30, "quarenta": 40, "cinquenta": 50,
    "sessenta": 60, "setenta": 70, "oitenta": 80, "noventa": 90,
}

HUNDREDS = {
    "cem": 100, "cento": 100, "duzentos": 200, "trezentos": 300, "quatrocentos": 400,
    "quinhentos": 500, "seiscentos": 600, "setecentos": 700, "oitocentos": 800,
    "novecentos": 900,
}

SCALES = {"mil": 1000, "milhao": 1_000_000, "milhoes": 1_000_000}

CONNECTOR = "e"


def word_value(word: str) -> Optional[int]:
    for table in (UNITS, TEENS, TENS, HUNDREDS):
        if word in table:
            return table[word]
    return None


def is_number_word(word: str) -> bool:
    if not word:
        return False
    return word == CONNECTOR or word in SCALES or word_value(word) is not None


def parse_cardinal_words(words: list[str]) -> Optional[int]:
    """
    Converte palavras já normalizadas (sem acento) em número.

    Unidades, dezenas e centenas somam no grupo corrente; uma escala
    ("mil", "milhao") multiplica o grupo (1 quando vazio) e acumula no total.
    Retorna None se nenhuma palavra numérica foi reconhecida.
    """
    total = 0
    group = 0
    consumed = False

    for word in words:
        if word == CONNECTOR:
            continue

        value = word_value(word)
        if value is not None:
            group += value
            consumed = True
            continue

        if word in SCALES:
            total += (group or 1) * SCALES[word]
            group = 0
            consumed = True

    if not consumed:
        return None
    return total + group


def split_number_sequences(words: list[str]) -> list[list[str]]:
    sequences: list[list[str]] = []
    current: list[str] = []

    for word in words:
        if is_number_word(word):
            current.append(word)
            continue
        if current:
            sequences.append(current)
            current = []

    if current:
        sequences.append(current)
    return sequences


def parse_number_from_words(words: list[str]) -> Optional[int]:
    # a última sequência numérica da frase costuma ser o valor falado
    for sequence in reversed(split_number_sequences(words)):
        value = parse_cardinal_words(sequence)
        if value is not None:
            return value
    return None
