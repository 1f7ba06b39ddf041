import math

import pytest

from core.parsing import (
    coerce_amount, is_valid_phone, parse_amount, parse_count, parse_digits,
    phone_db_to_input, phone_input_to_db, round_half_up
)


class TestParseAmount:

    @pytest.mark.parametrize("raw, expected", [
        ("300.000", 300000.0),
        ("1,500", 1500.0),
        ("1,5", 1.5),
        ("99.90", 99.9),
        ("1.234,50", 1234.5),
        ("1,234.50", 1234.5),
        ("€ 1 500", 1500.0),
        ("1 250 €", 1250.0),
        (42, 42.0),
        (12.5, 12.5),
    ])
    def test_accepts_common_spellings(self, raw, expected):
        assert parse_amount(raw) == expected

    def test_blank_is_unknown(self):
        assert parse_amount(None) is None
        assert parse_amount("") is None
        assert parse_amount("  € ") is None

    @pytest.mark.parametrize("raw", ["abc", "12a", "1.2.3", math.nan, math.inf, True])
    def test_rejects_malformed(self, raw):
        with pytest.raises(ValueError):
            parse_amount(raw)

    def test_coerce_degrades_to_none(self):
        assert coerce_amount("abc") is None
        assert coerce_amount("0") == 0.0


def test_parse_count():
    assert parse_count("3") == 3
    assert parse_count(2) == 2
    assert parse_count("2.5") is None
    assert parse_count("-1") is None
    assert parse_count("many") is None
    assert parse_count(None) is None


def test_parse_digits_truncates():
    assert parse_digits("300 000 €", 8) == 300000
    assert parse_digits("123456789", 8) == 12345678
    assert parse_digits("no digits", 8) is None
    assert parse_digits(None, 6) is None


def test_round_half_up_rounds_halves_away_from_zero():
    assert round_half_up(2.5) == 3.0
    assert round_half_up(0.5) == 1.0
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(-2.5) == -3.0


class TestPhones:

    def test_input_to_db(self):
        assert phone_input_to_db("912 345 678") == "+351 912345678"
        assert phone_input_to_db("") is None
        assert phone_input_to_db(None) is None

    def test_db_to_input_strips_country_code(self):
        assert phone_db_to_input("+351 912345678") == "912345678"
        assert phone_db_to_input(None) == ""

    def test_nine_digits_required(self):
        assert is_valid_phone("912345678")
        assert is_valid_phone("912 345 678")
        assert not is_valid_phone("91234567")
        assert not is_valid_phone(None)
