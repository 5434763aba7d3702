"""Recording of outgoing ESB and gateway calls in history tables."""

from contextlib import closing
from typing import Any, Union

TABLE_HISTORY_ESB = "hst_esb_call"
TABLE_HISTORY_BRIGATE = "hst_brigate_call"

_INSERT_QUERY = "INSERT INTO {table} (id, request_header, request_body) VALUES (?, ?, ?)"
_UPDATE_QUERY = (
    "UPDATE {table} SET response_http_code = ?, response_header = ?, response_body = ? "
    "WHERE id = ?"
)

Payload = Union[bytes, bytearray, str]


def _text(value: Payload) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return value


def _table(is_esb: bool) -> str:
    return TABLE_HISTORY_ESB if is_esb else TABLE_HISTORY_BRIGATE


def _execute(connection: Any, query: str, params: tuple) -> None:
    with closing(connection.cursor()) as cursor:
        cursor.execute(query, params)


def log_external_call(
    connection: Any,
    call_id: str,
    request_header: Payload,
    request_body: Payload,
    is_esb: bool,
    is_insert: bool,
) -> None:
    """Insert a request row, or run the response update with only header, body and id.

    The update form binds three values to a four-placeholder statement, so the
    database driver rejects it.
    """
    table = _table(is_esb)
    if is_insert:
        params = (call_id, _text(request_header), _text(request_body))
        _execute(connection, _INSERT_QUERY.format(table=table), params)
    else:
        params = (_text(request_header), _text(request_body), call_id)
        _execute(connection, _UPDATE_QUERY.format(table=table), params)


def log_external_response(
    connection: Any,
    call_id: str,
    http_code: int,
    response_header: Payload,
    response_body: Payload,
    is_esb: bool,
) -> None:
    """Store the response code, headers and body for a logged call."""
    params = (http_code, _text(response_header), _text(response_body), call_id)
    _execute(connection, _UPDATE_QUERY.format(table=_table(is_esb)), params)