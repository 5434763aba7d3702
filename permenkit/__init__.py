"""Helpers for Indonesian invoicing back ends: validation, SQL sanitising, formatting, header checks, CSV export and WSGI middleware."""

__version__ = "0.1.0"

__all__ = [
    "csv_export",
    "external_log",
    "formatting",
    "headers",
    "http_middleware",
    "sql_sanitizer",
    "timeutil",
    "validators",
]