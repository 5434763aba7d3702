import base64
from decimal import Decimal
from fractions import Fraction

import pytest

from permenkit.formatting import (
    build_basic_auth_credentials,
    decimal_to_percentage,
    format_decimal_rupiah,
    format_rupiah,
    format_rupiah_string,
    indo_to_mysql_number,
    normalize_two_decimal,
    parse_comma_separated,
    terbilang,
)


def test_format_rupiah_pinned():
    assert format_rupiah(Fraction(123456789, 100)) == "Rp. 1.234.567,89"


@pytest.mark.parametrize("value", [0, 7, 999, 1000, 12345, 1000000, 987654321012])
def test_format_rupiah_grouping(value):
    result = format_rupiah(value)
    assert result.startswith("Rp. ")
    integer_part, decimal_part = result[4:].split(",")
    assert decimal_part == "00"
    groups = integer_part.split(".")
    assert "".join(groups) == str(value)
    assert all(len(group) == 3 for group in groups[1:])
    assert 1 <= len(groups[0]) <= 3


def test_format_rupiah_string_matches_fraction():
    assert format_rupiah_string("1/4") == format_rupiah(Fraction(1, 4))
    assert format_rupiah_string("2500.5") == format_rupiah(Decimal("2500.5"))


def test_format_rupiah_string_invalid_is_zero():
    assert format_rupiah_string("abc") == format_rupiah(0)


def test_terbilang_zero():
    assert terbilang(0) == "Nol"


def test_terbilang_whole():
    assert terbilang(1500) == "Seribu Lima Ratus Rupiah"


def test_terbilang_with_sen():
    assert terbilang(Fraction(1225, 100)) == "Dua Belas Rupiah Koma Dua Puluh Lima Sen"


def test_terbilang_too_large():
    assert terbilang(10**15).startswith("Angka terlalu besar")


def test_terbilang_negative_raises():
    with pytest.raises(ValueError):
        terbilang(-5)


def test_terbilang_small_units_use_source_words():
    assert terbilang(11).startswith("Sebelas")
    assert terbilang(10).startswith("Sepuluh")


def test_format_decimal_rupiah_invalid():
    assert format_decimal_rupiah("abc") == "0,00"


@pytest.mark.parametrize("text", ["1234567.89", "0.50", "1000.00", "42.10"])
def test_format_decimal_rupiah_round_trip(text):
    formatted = format_decimal_rupiah(text)
    assert Decimal(indo_to_mysql_number(formatted)) == Decimal(text)


def test_format_decimal_rupiah_matches_currency_format():
    assert "Rp. " + format_decimal_rupiah("98765.4") == format_rupiah(Decimal("98765.4"))


def test_decimal_to_percentage_invalid():
    assert decimal_to_percentage("abc") == "0%"


@pytest.mark.parametrize("text", ["7", "12.5", "0.25", "100"])
def test_decimal_to_percentage_invariants(text):
    result = decimal_to_percentage(text)
    assert result.endswith("%")
    body = result[:-1]
    assert "." not in body
    assert Decimal(body.replace(",", ".")) == Decimal(text)


def test_normalize_two_decimal_integer():
    assert normalize_two_decimal("12") == "12" + ".00"


def test_normalize_two_decimal_keeps_two_places():
    assert normalize_two_decimal("  -3.45 ") == "-3.45"


@pytest.mark.parametrize("text", ["", "   ", "1.5", "1,50", "abc", "1.234"])
def test_normalize_two_decimal_rejects(text):
    with pytest.raises(ValueError):
        normalize_two_decimal(text)


def test_parse_comma_separated():
    assert parse_comma_separated(" a, b ,,a ") == {"a", "b"}
    assert parse_comma_separated("") == set()


def test_basic_auth_credentials_round_trip():
    encoded = build_basic_auth_credentials("user", "password")
    assert base64.b64decode(encoded).decode() == "user:password"