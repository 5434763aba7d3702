"""Simple string format checks."""

import re

_NUMERIC = re.compile(r"[0-9]+")
_ALPHA = re.compile(r"[A-Za-z ]+")
_ALPHANUMERIC = re.compile(r"[A-Za-z0-9 ]+")
_DECIMAL = re.compile(r"[0-9]+(\.[0-9]+)?")
_ACCOUNT_LOAN = re.compile(r"[0-9]{11}1[0-9]{3}")
_DATE_DMY = re.compile(r"(0?[1-9]|[12][0-9]|3[01])[/-](0?[1-9]|1[0-2])[/-][0-9]{4}")
_ASCII = re.compile(r"[\x00-\x7F]+")


def is_numeric(value: str) -> bool:
    """True if the string is made only of digits."""
    return _NUMERIC.fullmatch(value) is not None


def is_alpha(value: str) -> bool:
    """True if the string holds only ASCII letters and spaces."""
    return _ALPHA.fullmatch(value) is not None


def is_alphanumeric(value: str) -> bool:
    """True if the string holds only ASCII letters, digits and spaces."""
    return _ALPHANUMERIC.fullmatch(value) is not None


def is_ascii(value: str) -> bool:
    """True if the string is non-empty and holds only ASCII characters."""
    return _ASCII.fullmatch(value) is not None


def is_decimal(value: str) -> bool:
    """True if the string is an unsigned number with an optional fraction."""
    return _DECIMAL.fullmatch(value) is not None


def is_account_loan(value: str) -> bool:
    """True for a 15-digit loan account whose 12th digit is '1'."""
    return _ACCOUNT_LOAN.fullmatch(value) is not None


def is_nominal(value: str) -> bool:
    """True if the string is a valid nominal amount."""
    return is_decimal(value) or is_numeric(value)


def is_date_dmy(value: str) -> bool:
    """True for a date written d/m/yyyy or d-m-yyyy."""
    return _DATE_DMY.fullmatch(value) is not None