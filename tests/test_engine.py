"""Tests for the query engine: state changes, replies and errors."""

from decimal import Decimal

import pytest

from intra.engine import QueryEngine
from intra.errors import (
    DigitAlreadyExists,
    InvalidRomanNumeral,
    ItemAlreadyExists,
    UnrecognizedItem,
    UnrecognizedQuery,
    UnrecognizedWord,
    WordAlreadyExists,
)

DIGITS = ["glob is I", "prok is V", "pish is X", "tegj is L"]


@pytest.fixture
def engine():
    e = QueryEngine()
    for line in DIGITS:
        assert e.query(line) is None
    return e


@pytest.fixture
def stocked():
    """Engine built from existing state, with whole-number prices."""
    return QueryEngine(
        dictionary={"glob": "I", "prok": "V", "pish": "X", "tegj": "L"},
        prices={"Gold": 10, "Silver": 5, "Iron": 1},
    )


class TestDefineDigit:
    def test_defines_word(self):
        e = QueryEngine()
        assert e.query("glob is I") is None
        assert e.dictionary.contains("glob")
        assert e.used_digits == {"I"}

    def test_word_already_exists(self, engine):
        with pytest.raises(WordAlreadyExists) as exc:
            engine.query("glob is V")
        assert exc.value.word == "glob"

    def test_word_already_exists_same_digit(self, engine):
        with pytest.raises(WordAlreadyExists):
            engine.query("glob is I")

    def test_digit_already_exists(self):
        e = QueryEngine()
        e.query("glob is I")
        with pytest.raises(DigitAlreadyExists) as exc:
            e.query("prok is I")
        assert exc.value.digit == "I"
        assert not e.dictionary.contains("prok")

    def test_prebuilt_dictionary_digits_in_use(self, stocked):
        assert stocked.used_digits == {"I", "V", "X", "L"}
        with pytest.raises(DigitAlreadyExists):
            stocked.query("blarg is X")


class TestDefinePrice:
    def test_unit_price(self, engine):
        assert engine.query("glob glob Silver is 34 Credits") is None
        assert engine.prices.get("Silver") == Decimal(17)

    def test_fractional_unit_price(self, engine):
        engine.query("pish pish Iron is 3910 Credits")
        assert engine.prices.get("Iron") == Decimal("195.5")

    def test_repeating_unit_price(self, engine):
        engine.query("glob glob glob Tin is 10 Credits")
        assert engine.prices.get("Tin") == Decimal("3." + "3" * 27)
        assert engine.query("how many credits is glob glob glob Tin?") == \
            "glob glob glob Tin is 9." + "9" * 27 + " Credits"

    def test_item_already_exists(self, engine):
        engine.query("glob glob Silver is 34 Credits")
        with pytest.raises(ItemAlreadyExists) as exc:
            engine.query("glob Silver is 20 Credits")
        assert exc.value.item == "Silver"
        assert engine.prices.get("Silver") == Decimal(17)

    def test_unknown_word_leaves_no_price(self, engine):
        with pytest.raises(UnrecognizedWord):
            engine.query("glob blarg Gold is 100 Credits")
        assert engine.prices.get("Gold") is None

    def test_invalid_numeral_leaves_no_price(self, engine):
        with pytest.raises(InvalidRomanNumeral):
            engine.query("glob glob glob glob Gold is 100 Credits")
        assert "Gold" not in engine.prices

    def test_multi_word_item(self, engine):
        engine.query("glob glob Dark Matter is 12 Credits")
        assert engine.query("how many credits is prok Dark Matter?") == \
            "prok Dark Matter is 30 Credits"


class TestNumeralValue:
    def test_value(self, engine):
        assert engine.query("how much is pish tegj glob glob ?") == "pish tegj glob glob is 42"

    def test_question_inside_line(self, engine):
        assert engine.query("Tell me, how much is pish tegj glob glob?") == "pish tegj glob glob is 42"

    def test_idempotent(self, engine):
        first = engine.query("How much is pish tegj glob glob?")
        second = engine.query("How much is pish tegj glob glob?")
        assert first == second == "pish tegj glob glob is 42"

    def test_unknown_word(self, stocked):
        with pytest.raises(UnrecognizedWord) as exc:
            stocked.query("How much is foo bar?")
        assert exc.value.word == "foo"


class TestItemPrice:
    def test_prebuilt_prices(self, stocked):
        assert stocked.query("How many credits is glob glob Gold?") == "glob glob Gold is 20 Credits"

    def test_price_from_definition(self, engine):
        engine.query("glob glob Silver is 34 Credits")
        assert engine.query("how many credits is glob prok Silver?") == \
            "glob prok Silver is 68 Credits"

    def test_rounding_normalized(self, engine):
        engine.query("pish pish Iron is 3910 Credits")
        assert engine.query("how many credits is glob prok Iron?") == "glob prok Iron is 782 Credits"

    def test_fraction_kept(self, engine):
        engine.query("pish pish Iron is 3910 Credits")
        assert engine.query("how many credits is glob Iron?") == "glob Iron is 195.5 Credits"

    def test_large_total_no_exponent(self, stocked):
        assert stocked.query("how many credits is tegj Gold?") == "tegj Gold is 500 Credits"

    def test_question_inside_line(self, stocked):
        assert stocked.query("So, how many credits is glob glob Gold? Quickly") == \
            "glob glob Gold is 20 Credits"

    def test_unknown_item(self, stocked):
        with pytest.raises(UnrecognizedItem) as exc:
            stocked.query("How many credits is glob glob Copper?")
        assert exc.value.item == "Copper"

    def test_invalid_numeral(self, stocked):
        with pytest.raises(InvalidRomanNumeral):
            stocked.query("How many credits is glob glob glob glob Gold?")


class TestUnrecognized:
    @pytest.mark.parametrize("text", [
        "What is pish tegj glob glob?",
        "how much wood could a woodchuck chuck if a woodchuck could chuck wood ?",
        "",
    ])
    def test_unrecognized_query(self, engine, text):
        with pytest.raises(UnrecognizedQuery) as exc:
            engine.query(text)
        assert exc.value.text == text


class TestSession:
    def test_full_session(self):
        e = QueryEngine()
        lines = DIGITS + [
            "glob glob Silver is 34 Credits",
            "glob prok Gold is 57800 Credits",
            "pish pish Iron is 3910 Credits",
            "how much is pish tegj glob glob ?",
            "how many Credits is glob prok Silver ?",
            "how many Credits is glob prok Gold ?",
            "how many Credits is glob prok Iron ?",
        ]
        replies = [e.query(line) for line in lines]
        assert [r for r in replies if r is not None] == [
            "pish tegj glob glob is 42",
            "glob prok Silver is 68 Credits",
            "glob prok Gold is 57800 Credits",
            "glob prok Iron is 782 Credits",
        ]

    def test_separate_sessions(self, engine):
        other = QueryEngine()
        with pytest.raises(UnrecognizedWord):
            other.query("how much is glob?")
        assert engine.query("how much is glob?") == "glob is 1"


class TestLogging:
    def test_log_entries(self, tmp_path):
        log_path = tmp_path / "intra.log"
        e = QueryEngine(log_path=str(log_path))
        e.query("glob is I", source="[test]")
        with pytest.raises(UnrecognizedQuery):
            e.query("hello", source="[test]")
        with pytest.raises(UnrecognizedWord):
            e.query("how much is prok?", source="[test]")

        lines = log_path.read_text().splitlines()
        assert len(lines) == 6
        assert lines[0].endswith("[test]  glob is I")
        assert lines[1] == "  -> define_digit, word='glob', digit='I'"
        assert lines[3] == "  -> none"
        assert lines[5] == "  -> numeral_value, number='prok', error=UnrecognizedWord"

    def test_no_log_by_default(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        QueryEngine().query("glob is I")
        assert list(tmp_path.iterdir()) == []

    def test_unwritable_log_ignored(self, tmp_path):
        e = QueryEngine(log_path=str(tmp_path / "missing" / "intra.log"))
        assert e.query("glob is I") is None
