"""Validation of user, branch and authorization request headers."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Tuple

MAX_HEADER_SIZE = 5024

AUTHORIZATION_HEADER = "Authorization"
USERQ_HEADER = "userq"
HILFM_HEADER = "hilfm"
BRANCH_HEADER = "branch"
ORGEH_HEADER = "orgeh"
STELL_TX_HEADER = "stellTX"
KOSTL_HEADER = "costCenter"

_FIELDS = (
    (USERQ_HEADER, "userq"),
    (HILFM_HEADER, "hilfm"),
    (BRANCH_HEADER, "branch"),
    (ORGEH_HEADER, "orgeh"),
    (STELL_TX_HEADER, "stell_tx"),
    (KOSTL_HEADER, "kostl"),
)

_BEARER = "Bearer "


class HeaderError(ValueError):
    """Raised when request headers or credentials are invalid."""


@dataclass
class SecureHeaders:
    """Header values that passed validation."""

    userq: str = ""
    hilfm: str = ""
    branch: str = ""
    orgeh: str = ""
    stell_tx: str = ""
    kostl: str = ""


@dataclass
class AuthenticationResult:
    """Outcome of a successful bearer-token check."""

    token: str
    claims: Dict[str, Any]
    userq_header: str
    headers_to_set: Dict[str, str] = field(default_factory=dict)


def _get_header(headers: Mapping[str, str], name: str) -> str:
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return ""


def _size(value: str) -> int:
    return len(value.encode("utf-8"))


def validate_headers(headers: Mapping[str, str], *required: str) -> SecureHeaders:
    """Read the known headers, enforce size limits and required names, strip leading zeros."""
    required_names = set(required)
    values = {}
    for header_name, attribute in _FIELDS:
        value = _get_header(headers, header_name)
        if _size(value) > MAX_HEADER_SIZE:
            raise HeaderError(
                f"{header_name} header exceeds maximum allowed size ({MAX_HEADER_SIZE} bytes)"
            )
        if header_name in required_names and value == "":
            raise HeaderError(f"{header_name} header is required")
        values[attribute] = value if header_name == USERQ_HEADER else value.lstrip("0")
    return SecureHeaders(**values)


def _user(userq: str) -> Tuple[str, str]:
    if not userq:
        return "", ""
    try:
        return parse_user_header(userq)
    except HeaderError:
        return "", ""


def get_user_info(headers: Mapping[str, str], *required: str) -> Tuple[str, str, str, str, str, str]:
    """Return (pernr, name, hilfm, branch, orgeh, kostl)."""
    secure = validate_headers(headers, *required)
    pernr, name = _user(secure.userq)
    return pernr, name, secure.hilfm, secure.branch, secure.orgeh, secure.kostl


def get_approver_info(
    headers: Mapping[str, str], *required: str
) -> Tuple[str, str, str, str, str, str]:
    """Return (pernr, name, hilfm, branch, orgeh, position)."""
    secure = validate_headers(headers, *required)
    pernr, name = _user(secure.userq)
    return pernr, name, secure.hilfm, secure.branch, secure.orgeh, secure.stell_tx


def validate_authentication(
    headers: Mapping[str, str],
    verify_token: Callable[[str], Dict[str, Any]],
    fill_claims: Callable[[Dict[str, Any]], Dict[str, str]],
) -> AuthenticationResult:
    """Check the bearer Authorization header, verify the token and collect headers from claims."""
    auth_header = _get_header(headers, AUTHORIZATION_HEADER)

    if _size(auth_header) > MAX_HEADER_SIZE:
        raise HeaderError("authorization header exceeds maximum size")
    if auth_header == "":
        raise HeaderError("authorization header is empty")
    if "\n" in auth_header or "\r" in auth_header:
        raise HeaderError("authorization header contains invalid characters")
    if not auth_header.startswith(_BEARER):
        raise HeaderError("invalid authorization header format")

    token = auth_header[len(_BEARER):]
    if token == "":
        raise HeaderError("bearer token is empty")
    if _size(token) > MAX_HEADER_SIZE - len(_BEARER):
        raise HeaderError("bearer token exceeds maximum size")

    try:
        claims = verify_token(token)
    except Exception as exc:
        raise HeaderError(f"token verification failed: {exc}") from exc

    pernr = claims.get("pernr")
    nama = claims.get("nama")
    if not isinstance(pernr, str) or not isinstance(nama, str):
        raise HeaderError("invalid claims: missing pernr or nama")

    userq_header = f"{pernr} | {nama}"
    if _size(userq_header) > MAX_HEADER_SIZE:
        raise HeaderError("user header exceeds maximum size")

    headers_to_set = fill_claims(claims)
    for key, value in headers_to_set.items():
        if _size(key) > MAX_HEADER_SIZE:
            raise HeaderError(f"header key '{key}' exceeds maximum size")
        if _size(value) > MAX_HEADER_SIZE:
            raise HeaderError(f"header value for '{key}' exceeds maximum size")
        if any(char in key or char in value for char in "\n\r"):
            raise HeaderError("header contains invalid characters")

    return AuthenticationResult(
        token=token,
        claims=dict(claims),
        userq_header=userq_header,
        headers_to_set=dict(headers_to_set),
    )


def parse_user_header(header: str) -> Tuple[str, str]:
    """Split a 'pernr | name' header into its two parts."""
    parts = header.split(" | ")
    if len(parts) < 2:
        raise HeaderError("invalid user header format")
    return parts[0], parts[1]


def get_token_parts(token: str) -> List[str]:
    """Split 'Bearer <token>' into its two parts."""
    parts = token.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise HeaderError("invalid token format")
    return parts


def claims_user_id(claims: Mapping[str, Any]) -> int:
    """Return the numeric 'id' claim; raise if it is missing or zero."""
    value = claims.get("id")
    user_id = 0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        user_id = int(value)
    if user_id == 0:
        raise HeaderError("claims not found")
    return user_id