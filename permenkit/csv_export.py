"""Build gzip-compressed CSV downloads."""

import gzip
import io
from typing import Iterable, List, Sequence, Tuple

_QUOTE = '"'


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1 or delimiter in ('"', "\r", "\n", "\x00", "\ufffd"):
        raise ValueError("csv: invalid field or comment delimiter")
    if 0xD800 <= ord(delimiter) <= 0xDFFF:
        raise ValueError("csv: invalid field or comment delimiter")


def _needs_quotes(value: str, delimiter: str) -> bool:
    if value == "":
        return False
    if value == "\\.":
        return True
    if any(char in value for char in (delimiter, _QUOTE, "\r", "\n")):
        return True
    return value[0].isspace()


def _format_row(row: Sequence[str], delimiter: str) -> str:
    fields = (
        _QUOTE + value.replace(_QUOTE, _QUOTE * 2) + _QUOTE
        if _needs_quotes(value, delimiter)
        else value
        for value in row
    )
    return delimiter.join(fields) + "\n"


def write_csv_gzip(
    filename: str,
    headers: Sequence[str],
    rows: Iterable[Sequence[str]],
    delimiter: str = ",",
) -> Tuple[List[Tuple[str, str]], bytes]:
    """Return the response headers and the gzip-compressed CSV body."""
    _check_delimiter(delimiter)
    buffer = io.StringIO()
    buffer.write(_format_row(headers, delimiter))
    for row in rows:
        buffer.write(_format_row(row, delimiter))

    response_headers = [
        ("Content-Encoding", "gzip"),
        ("Content-Disposition", f"attachment; filename={filename}.csv.gz"),
        ("Content-Type", "text/csv"),
    ]
    return response_headers, gzip.compress(buffer.getvalue().encode("utf-8"))