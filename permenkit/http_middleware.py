"""WSGI middleware adding CORS and security response headers."""

from typing import Any, Callable, Dict, Iterable, List, Sequence, Tuple

Header = Tuple[str, str]

ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS, PATCH"
ALLOW_HEADERS = (
    "Accept, Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization"
)
EXPOSE_HEADERS = "Content-Disposition, File-Name, Content-Type, Content-Length"
MAX_AGE = "86400"

_RELAXED_MODES = ("local", "dev")


def cors_headers(origin: str, allowed_origins: Sequence[str] = ()) -> List[Header]:
    """CORS headers for a request from the given origin."""
    headers: List[Header] = []
    if origin and origin in allowed_origins:
        headers.append(("Access-Control-Allow-Origin", origin))
        headers.append(("Access-Control-Allow-Credentials", "true"))
    else:
        headers.append(("Access-Control-Allow-Origin", "*"))
    headers.extend(
        [
            ("Access-Control-Allow-Methods", ALLOW_METHODS),
            ("Access-Control-Allow-Headers", ALLOW_HEADERS),
            ("Access-Control-Expose-Headers", EXPOSE_HEADERS),
            ("Access-Control-Max-Age", MAX_AGE),
        ]
    )
    return headers


def content_security_policy(release_mode: str) -> str:
    """Content-Security-Policy value; local and dev modes also allow plain HTTP connects."""
    connect_src = "'self' http: https:" if release_mode in _RELAXED_MODES else "'self' https:"
    return (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline' 'unsafe-eval'; "
        "style-src 'self' 'unsafe-inline'; "
        "img-src 'self' data: https:; "
        "font-src 'self'; "
        f"connect-src {connect_src}; "
        "media-src 'self'; "
        "object-src 'none'; "
        "frame-src 'none'; "
        "base-uri 'self'; "
        "form-action 'self'"
    )


def security_headers(release_mode: str) -> List[Header]:
    """Security headers added to every response; no Server header is sent."""
    return [
        ("Strict-Transport-Security", "max-age=31536000; includeSubDomains; preload"),
        ("X-Content-Type-Options", "nosniff"),
        ("X-Frame-Options", "DENY"),
        ("X-XSS-Protection", "1; mode=block"),
        ("Referrer-Policy", "strict-origin-when-cross-origin"),
        ("Content-Security-Policy", content_security_policy(release_mode)),
        ("Permissions-Policy", "geolocation=(), microphone=(), camera=()"),
    ]


def _merge(defaults: Iterable[Header], headers: Iterable[Header]) -> List[Header]:
    """Defaults first, with any the application sets itself replaced by its values."""
    own = list(headers)
    overridden = {name.lower() for name, _ in own}
    return [h for h in defaults if h[0].lower() not in overridden] + own


def _with_defaults(start_response: Callable, defaults: List[Header]) -> Callable:
    def wrapped(status: str, headers: List[Header], exc_info: Any = None) -> Any:
        merged = _merge(defaults, headers)
        if exc_info is None:
            return start_response(status, merged)
        return start_response(status, merged, exc_info)

    return wrapped


class CorsMiddleware:
    """Adds CORS headers and answers preflight requests with 204."""

    def __init__(self, app: Callable, allowed_origins: Sequence[str] = ()) -> None:
        self.app = app
        self.allowed_origins = tuple(allowed_origins)

    def __call__(self, environ: Dict[str, Any], start_response: Callable) -> Iterable[bytes]:
        defaults = cors_headers(environ.get("HTTP_ORIGIN", ""), self.allowed_origins)
        if environ.get("REQUEST_METHOD") == "OPTIONS":
            start_response("204 No Content", defaults)
            return []
        return self.app(environ, _with_defaults(start_response, defaults))


class SecurityHeadersMiddleware:
    """Adds the standard security headers to every response."""

    def __init__(self, app: Callable, release_mode: str = "") -> None:
        self.app = app
        self.release_mode = release_mode

    def __call__(self, environ: Dict[str, Any], start_response: Callable) -> Iterable[bytes]:
        defaults = security_headers(self.release_mode)
        return self.app(environ, _with_defaults(start_response, defaults))