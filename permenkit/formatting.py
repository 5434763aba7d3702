"""Formatting of Indonesian currency amounts, percentages and number words."""

import base64
import re
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Set, Union

Number = Union[int, float, Decimal, Fraction]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_TWO_DECIMALS = re.compile(r"[+-]?[0-9]+\.[0-9]{2}")

_UNITS = (
    "", "Satu", "Dua", "Tiga", "Empat", "Lima",
    "Enam", "Tujuh", "Delapan", "Sembilan", "Sepuluh", "Sebelas",
)

_SCALES = (
    (10**15, None),
    (10**12, " Triliun "),
    (10**9, " Milyar "),
    (10**6, " Juta "),
)


def _fixed_two(value: Fraction) -> str:
    """Render a value with exactly two decimals, rounding halves to even."""
    hundredths = abs(round(value * 100))
    sign = "-" if value < 0 else ""
    return f"{sign}{hundredths // 100}.{hundredths % 100:02d}"


def _group_thousands(digits: str) -> str:
    """Insert '.' every three characters counted from the right."""
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    if digits:
        groups.insert(0, digits)
    return ".".join(groups)


def _rupiah(value: Fraction) -> str:
    integer_part, decimal_part = _fixed_two(value).split(".")
    return f"Rp. {_group_thousands(integer_part)},{decimal_part}"


def _parse_decimal(text: str) -> Fraction:
    """Parse a decimal literal; raise ValueError when it is not a finite number."""
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"not a number: {text!r}") from exc
    if not value.is_finite():
        raise ValueError(f"not a finite number: {text!r}")
    return Fraction(value)


def format_rupiah(amount: Number) -> str:
    """Format an amount as 'Rp. 1.234.567,89'."""
    return _rupiah(Fraction(amount))


def format_rupiah_string(amount: str) -> str:
    """Format a numeric string as rupiah; unparsable input counts as zero."""
    try:
        value = Fraction(amount)
    except (ValueError, ZeroDivisionError):
        value = Fraction(0)
    return _rupiah(value)


def _words(value: int) -> str:
    if value == 0:
        return ""
    if value < 12:
        return _UNITS[value]
    if value < 20:
        return _words(value - 10) + " Belas"
    if value < 100:
        return (_words(value // 10) + " Puluh " + _words(value % 10)).strip()
    if value < 200:
        return "Seratus " + _words(value - 100)
    if value < 1000:
        return (_words(value // 100) + " Ratus " + _words(value % 100)).strip()
    if value < 2000:
        return "Seribu " + _words(value - 1000)
    if value < 10**6:
        return (_words(value // 1000) + " Ribu " + _words(value % 1000)).strip()
    if value >= 10**15:
        return "Angka terlalu besar"
    for limit, word in reversed(_SCALES[1:]):
        if value < limit * 1000:
            return (_words(value // limit) + word + _words(value % limit)).strip()
    return "Angka terlalu besar"


def terbilang(amount: Number) -> str:
    """Spell an amount out in Indonesian words, with fractions as sen."""
    value = Fraction(amount)
    if value == 0:
        return "Nol"

    whole = int(value)
    if whole < 0:
        raise ValueError("negative amounts cannot be spelled out")

    result = _words(whole)
    fraction = value - whole
    if fraction != 0:
        sen = int(float(fraction * 100) + 0.5)
        if sen > 0:
            result += " Rupiah Koma " + _words(sen) + " Sen"
    else:
        result += " Rupiah"
    return result.strip()


def format_decimal_rupiah(text: str) -> str:
    """Format a numeric string as '1.234.567,89'; invalid input gives '0,00'."""
    try:
        value = _parse_decimal(text)
    except ValueError:
        return "0,00"
    integer_part, decimal_part = _fixed_two(value).split(".")
    return f"{_group_thousands(integer_part)},{decimal_part}"


def decimal_to_percentage(text: str) -> str:
    """Render a number as a percentage with up to two decimals and ',' separator."""
    try:
        value = _parse_decimal(text)
    except ValueError:
        return "0%"
    formatted = _fixed_two(value).rstrip("0").rstrip(".")
    return formatted.replace(".", ",") + "%"


def indo_to_mysql_number(text: str) -> str:
    """Turn '1.234,56' into '1234.56'."""
    return text.replace(".", "").replace(",", ".")


def normalize_two_decimal(text: str) -> str:
    """Accept an integer or a two-decimal number and return it with two decimals."""
    stripped = text.strip()
    if stripped == "":
        raise ValueError("empty input")
    if _TWO_DECIMALS.fullmatch(stripped):
        return stripped
    if _INTEGER.fullmatch(stripped):
        return stripped + ".00"
    raise ValueError(
        "invalid decimal format: expected integer or exactly two decimal places "
        f"using '.' (got \"{text}\")"
    )


def parse_comma_separated(data: str) -> Set[str]:
    """Split a comma-separated list into a set of trimmed, non-empty items."""
    return {item.strip() for item in data.split(",") if item.strip()}


def build_basic_auth_credentials(username: str, password: str) -> str:
    """Return the base64 'username:password' value used in Basic auth."""
    return base64.b64encode(f"{username}:{password}".encode()).decode("ascii")