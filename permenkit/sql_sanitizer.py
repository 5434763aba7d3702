"""Input checks and helpers for building SQL fragments safely."""

import re
from typing import Any, Iterable, List, Sequence, Tuple

_DANGEROUS_PATTERNS = (
    "--",
    "/*",
    "*/",
    ";",
    "xp_",
    "sp_",
    "exec ",
    "execute",
    "union",
    "insert",
    "update",
    "delete",
    "drop",
    "create",
    "alter",
    "script",
    "<script",
    "javascript:",
)

_SQL_KEYWORDS = (
    "select", "insert", "update", "delete", "drop", "create", "alter",
    "union", "exec", "execute", "declare", "cast", "convert",
)

_SAFE_VALUE = re.compile(r"[a-zA-Z0-9\-_., ]+")
_COLUMN_NAME = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")


class SanitizationError(ValueError):
    """Raised when input is unsafe to place in a SQL statement."""


def sanitize_for_in_clause(value: str) -> str:
    """Return the value unchanged if it is safe for an IN clause, else raise."""
    if value == "":
        raise SanitizationError("input cannot be empty")

    if "%" in value:
        raise SanitizationError(
            "security error: malicious character detected in input - percent sign (%) "
            "is not allowed as it can be used for format string injection"
        )

    lowered = value.lower()
    for pattern in _DANGEROUS_PATTERNS:
        if pattern in lowered:
            raise SanitizationError(
                "security error: malicious character detected in input - "
                f"SQL injection pattern '{pattern}' is not allowed"
            )

    if _SAFE_VALUE.fullmatch(value) is None:
        raise SanitizationError(
            "security error: malicious or invalid character detected in input - only "
            "alphanumeric characters, hyphen, underscore, comma, period, and space are allowed"
        )

    return value


def sanitize_ids(ids: Sequence[str]) -> List[str]:
    """Sanitize every id, reporting the 1-based position of the first bad one."""
    if not ids:
        raise SanitizationError("ids array cannot be empty")

    sanitized = []
    for position, item in enumerate(ids, start=1):
        try:
            sanitized.append(sanitize_for_in_clause(item))
        except SanitizationError as exc:
            raise SanitizationError(
                "security error: malicious character detected in ID at position "
                f"{position} - {exc}"
            ) from exc
    return sanitized


def build_safe_in_clause(ids: Sequence[str]) -> str:
    """Build a quoted, comma-separated list such as "'id1', 'id2'"."""
    sanitized = sanitize_ids(ids)
    return ", ".join("'{}'".format(item.replace("'", "''")) for item in sanitized)


def validate_column_name(name: str) -> str:
    """Return the column name if it is a safe identifier, else raise."""
    if name == "":
        raise SanitizationError("column name cannot be empty")

    if _COLUMN_NAME.fullmatch(name) is None:
        raise SanitizationError(
            "invalid column name: must start with letter or underscore and contain "
            "only alphanumeric and underscore characters"
        )

    lowered = name.lower()
    if lowered in _SQL_KEYWORDS:
        raise SanitizationError(f"column name cannot be a SQL keyword: {lowered}")

    return name


def sanitize_order_by(column: str, direction: str) -> Tuple[str, str]:
    """Validate an ORDER BY column and direction; direction defaults to ASC."""
    try:
        validate_column_name(column)
    except SanitizationError as exc:
        raise SanitizationError(f"invalid ORDER BY column: {exc}") from exc

    normalized = direction.strip().upper()
    if normalized not in ("ASC", "DESC", ""):
        raise SanitizationError("invalid ORDER BY direction: must be ASC or DESC")

    return column, normalized or "ASC"


def is_ascii(value: str) -> bool:
    """True if every character is ASCII; the empty string counts as ASCII."""
    return all(ord(char) <= 127 for char in value)


def sanitize_ascii_input(value: str) -> str:
    """Require ASCII input and apply the IN-clause checks."""
    if not is_ascii(value):
        raise SanitizationError("input contains non-ASCII characters")
    return sanitize_for_in_clause(value)


def generate_placeholder_for_ids(values: Iterable[str], query: str) -> Tuple[str, List[Any]]:
    """Append a "(?,?,...)" placeholder list to the query; return it with the arguments."""
    args = list(values)
    placeholders = ",".join("?" for _ in args)
    return f"{query} ({placeholders})", args


def wrap_arguments_with_ids(ids: Iterable[Any], *args: Any) -> List[Any]:
    """Return the other arguments followed by the ids."""
    return [*args, *ids]