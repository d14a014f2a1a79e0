import pytest

from src.models.domain import Candidate, NumericToken
from src.services.fuel_parser import (
    ContextWindow,
    classify_context,
    find_km_fallback,
    parse_fuel_entry,
    price_range_priority,
    resolve_candidates,
)
from src.utils.value_extractor import extract_numeric_tokens

SAMPLE_TRANSCRIPTS = [
    "coloquei 50 reais, preço do litro 5 e 90, km atual 42500",
    "Abasteci 120 reais a 5,99 o litro e rodei até 85 mil KM",
    "abasteci 40 litros a 5,50 o litro total 220 reais km 85000",
    "marcava 6, preço do litro 30, total 20, coloquei 40 litros",
    "preço do litro 60, total 50",
    "10 20 30 40 50 60",
]


class TestContextWindow:
    def test_window_is_folded_and_bounded(self):
        text = "x" * 40 + " PREÇO 5,90 " + "y" * 40
        token = extract_numeric_tokens(text)[0]
        window = ContextWindow(text, token)
        assert "preco" in window.text
        assert len(window.text) == 25 + (token.end - token.start) + 25
        assert window.text[window.token_start:window.token_end] == "5,90"

    def test_singular_liter_requires_no_plural(self):
        text = "o litro 5 e 40 litros"
        tokens = extract_numeric_tokens(text)
        assert ContextWindow(text, tokens[0]).has_singular_liter() is False
        text = "o litro 5"
        assert ContextWindow(text, extract_numeric_tokens(text)[0]).has_singular_liter() is True


class TestClassifyContext:
    def _classify(self, text: str, index: int = 0):
        token = extract_numeric_tokens(text)[index]
        return classify_context(ContextWindow(text, token), token.value)

    def test_odometer(self):
        assert self._classify("km 42500") == ("kmCurrent", 3)

    def test_singular_liter_price(self):
        assert self._classify("o litro 5,89") == ("pricePerLiter", 4)

    def test_price_keyword(self):
        assert self._classify("preço 5,89") == ("pricePerLiter", 3)

    def test_liters(self):
        assert self._classify("40 litros") == ("liters", 3)
        assert self._classify("35 l") == ("liters", 3)

    def test_total_requires_ten_or_more(self):
        assert self._classify("paguei 50") == ("totalCost", 3)
        assert self._classify("paguei 5") is None

    def test_total_word_is_not_liter_abbreviation(self):
        assert self._classify("total 50") == ("totalCost", 3)

    def test_nearest_keyword_wins(self):
        assert self._classify("coloquei 50 reais, preço do litro") == ("totalCost", 3)

    def test_tie_prefers_odometer_then_price_then_liters(self):
        assert self._classify("litros 40 km") == ("kmCurrent", 3)
        assert self._classify("abasteci 40 litros") == ("liters", 3)

    def test_no_keyword(self):
        assert self._classify("hoje 42") is None


class TestRangeHeuristics:
    @pytest.mark.parametrize(
        "value, expected",
        [(0.4, None), (0.8, 2), (5.9, 2.5), (10, 0.75), (15, 0.75), (20, 0.5), (25, 0.5), (26, None)],
    )
    def test_price_range_priority(self, value, expected):
        assert price_range_priority(value) == expected


class TestResolveCandidates:
    def test_greedy_first_claim_wins(self):
        tokens = [NumericToken(60, 0, 2), NumericToken(5, 5, 6)]
        candidates = [
            Candidate("pricePerLiter", 1, 4),
            Candidate("totalCost", 1, 3),
            Candidate("totalCost", 0, 1),
        ]
        # o melhor candidato de total usa o token já reivindicado: total fica vazio
        assert resolve_candidates(tokens, candidates) == {"pricePerLiter": 1}

    def test_tie_prefers_later_token(self):
        tokens = [NumericToken(20, 0, 2), NumericToken(30, 5, 7)]
        candidates = [Candidate("totalCost", 0, 1), Candidate("totalCost", 1, 1)]
        assert resolve_candidates(tokens, candidates) == {"totalCost": 1}

    def test_fields_resolved_by_priority(self):
        tokens = [NumericToken(50, 0, 2), NumericToken(6, 5, 6)]
        candidates = [
            Candidate("liters", 0, 1),
            Candidate("totalCost", 0, 3),
            Candidate("pricePerLiter", 1, 2.5),
            Candidate("liters", 1, 1),
        ]
        assert resolve_candidates(tokens, candidates) == {"totalCost": 0, "pricePerLiter": 1}


class TestKmFallback:
    def test_keyword_followed_by_number(self):
        text = "rodei km 42500"
        tokens = extract_numeric_tokens(text)
        assert find_km_fallback(text, tokens, {}) == (42500, 0)

    def test_claimed_number_is_ignored(self):
        text = "rodei km 42500"
        tokens = extract_numeric_tokens(text)
        assert find_km_fallback(text, tokens, {"totalCost": 0}) is None

    def test_accented_keyword(self):
        text = "rodei quilômetros 42500"
        tokens = extract_numeric_tokens(text)
        assert find_km_fallback(text, tokens, {}) == (42500, 0)

    def test_no_keyword(self):
        text = "rodei 42500"
        assert find_km_fallback(text, extract_numeric_tokens(text), {}) is None


class TestParseFuelEntry:
    def test_overflowing_numeral_is_ignored(self):
        assert parse_fuel_entry(f"total {'9' * 400}") is None

    def test_total_price_and_odometer(self):
        entry = parse_fuel_entry("coloquei 50 reais, preço do litro 5 e 90, km atual 42500")
        assert entry is not None
        assert entry.total_cost == 50
        assert entry.price_per_liter == pytest.approx(5.9)
        assert entry.km_current == 42500
        assert entry.liters is None

    def test_spoken_thousands_odometer(self):
        entry = parse_fuel_entry("Abasteci 120 reais a 5,99 o litro e rodei até 85 mil KM")
        assert entry is not None
        assert entry.total_cost == 120
        assert entry.price_per_liter == pytest.approx(5.99)
        assert entry.km_current == 85000
        assert entry.liters is None

    def test_all_fields(self):
        entry = parse_fuel_entry("abasteci 40 litros a 5,50 o litro total 220 reais km 85000")
        assert entry is not None
        assert entry.liters == 40
        assert entry.price_per_liter == pytest.approx(5.5)
        assert entry.total_cost == 220
        assert entry.km_current == 85000

    def test_only_liters(self):
        entry = parse_fuel_entry("coloquei 30 litros")
        assert entry is not None
        assert entry.liters == 30
        assert entry.total_cost is None
        assert entry.price_per_liter is None

    def test_total_only(self):
        entry = parse_fuel_entry("paguei total 50")
        assert entry is not None
        assert entry.total_cost == 50
        assert entry.liters is None

    def test_implausible_price_is_replaced(self):
        entry = parse_fuel_entry("marcava 6, preço do litro 30, total 20, coloquei 40 litros")
        assert entry is not None
        assert entry.price_per_liter == 6
        assert entry.total_cost == 20
        assert entry.liters == 40

    def test_implausible_price_without_alternative_is_dropped(self):
        entry = parse_fuel_entry("preço do litro 60, total 50")
        assert entry is not None
        assert entry.total_cost == 50
        assert entry.price_per_liter is None

    @pytest.mark.parametrize("transcript", ["", "   ", "abasteci o tanque", "preço do litro"])
    def test_unrecognized_returns_none(self, transcript):
        assert parse_fuel_entry(transcript) is None

    @pytest.mark.parametrize("transcript", SAMPLE_TRANSCRIPTS)
    def test_fields_use_distinct_tokens(self, transcript):
        entry = parse_fuel_entry(transcript)
        assert entry is not None
        indexes = list(entry.token_indexes.values())
        assert len(indexes) == len(set(indexes))

    @pytest.mark.parametrize("transcript", SAMPLE_TRANSCRIPTS)
    def test_price_never_reaches_total(self, transcript):
        entry = parse_fuel_entry(transcript)
        assert entry is not None
        if entry.price_per_liter is not None and entry.total_cost is not None:
            assert entry.price_per_liter < entry.total_cost

    @pytest.mark.parametrize("transcript", SAMPLE_TRANSCRIPTS)
    def test_deterministic(self, transcript):
        assert parse_fuel_entry(transcript) == parse_fuel_entry(transcript)


def test_exact_tie_keeps_first_field_seen():
    entry = parse_fuel_entry("10 20 30 40 50 60")
    assert entry is not None
    assert entry.total_cost == 60
    assert entry.liters is None
    assert entry.price_per_liter == 10
