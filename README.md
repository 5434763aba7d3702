# permenkit

Small, dependency-free building blocks for an Indonesian invoicing and tax
back end: input validators, SQL input sanitising, rupiah formatting and
spelling out amounts in words, time helpers with Indonesian day and month
names, request-header and bearer-token checks, gzip-compressed CSV export,
recording of external calls in history tables, and WSGI middleware for CORS
and security headers.

It needs Python 3.10 or later and nothing beyond the standard library.

## Installing

```
pip install permenkit
```

To run the test suite as well:

```
pip install "permenkit[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `permenkit.validators` | `is_numeric`, `is_alpha`, `is_alphanumeric`, `is_ascii`, `is_decimal`, `is_account_loan`, `is_nominal`, `is_date_dmy` |
| `permenkit.sql_sanitizer` | `SanitizationError`, checks for values and column names placed into SQL text, `generate_placeholder_for_ids`, `wrap_arguments_with_ids` |
| `permenkit.formatting` | `format_rupiah`, `format_rupiah_string`, `terbilang`, `format_decimal_rupiah`, `decimal_to_percentage`, `indo_to_mysql_number`, `normalize_two_decimal`, `parse_comma_separated`, `build_basic_auth_credentials` |
| `permenkit.timeutil` | `now`, `end_time`, `masa_pajak`, `indonesian_day_name`, `indonesian_date`, `indonesian_day_and_date`, `max_backdate` |
| `permenkit.headers` | `HeaderError`, `SecureHeaders`, `AuthenticationResult`, `validate_headers`, `get_user_info`, `get_approver_info`, `validate_authentication`, `parse_user_header`, `get_token_parts`, `claims_user_id` |
| `permenkit.csv_export` | `write_csv_gzip` |
| `permenkit.external_log` | `log_external_call`, `log_external_response` |
| `permenkit.http_middleware` | `CorsMiddleware`, `SecurityHeadersMiddleware`, `cors_headers`, `content_security_policy`, `security_headers` |

## Examples

### Validating input

```python
from permenkit.validators import is_account_loan, is_date_dmy, is_nominal

is_date_dmy("25/12/2024")          # True
is_date_dmy("2024-12-25")          # False
is_nominal("123.45")               # True
is_nominal("abc")                  # False
is_account_loan("000000000001000") # True: 15 digits, the 12th is '1'
```

### Keeping values out of SQL trouble

```python
from permenkit.sql_sanitizer import (
    SanitizationError,
    build_safe_in_clause,
    generate_placeholder_for_ids,
    sanitize_order_by,
)

build_safe_in_clause(["A-1", "B-2"])        # "'A-1', 'B-2'"
sanitize_order_by("created_at", "desc")     # ("created_at", "DESC")
sanitize_order_by("created_at", "")         # ("created_at", "ASC")
generate_placeholder_for_ids(["a", "b"], "SELECT * FROM t WHERE id IN")
# ("SELECT * FROM t WHERE id IN (?,?)", ["a", "b"])

try:
    build_safe_in_clause(["1; drop table invoices"])
except SanitizationError as exc:
    print(exc)
```

`SanitizationError` is a subclass of `ValueError`. Values containing `%`,
SQL comment markers, `;`, keywords such as `union` or `drop`, or any
character outside letters, digits, hyphen, underscore, comma, period and
space are rejected.

### Money in Indonesian notation

```python
from decimal import Decimal
from permenkit.formatting import (
    format_rupiah_string,
    indo_to_mysql_number,
    normalize_two_decimal,
    terbilang,
)

format_rupiah_string("1234567.5")   # "Rp. 1.234.567,50"
format_rupiah_string("oops")        # "Rp. 0,00"
terbilang(Decimal("1500"))          # "Seribu Lima Ratus Rupiah"
indo_to_mysql_number("1.234,56")    # "1234.56"
normalize_two_decimal("15")         # "15.00"
```

`normalize_two_decimal` raises `ValueError` for anything that is not an
integer or a number with exactly two decimal places. `terbilang` raises
`ValueError` for negative amounts and answers "Angka terlalu besar" for
amounts of a thousand trillion or more.

### Dates in Indonesian

```python
from datetime import datetime
from permenkit.timeutil import indonesian_day_and_date, masa_pajak, max_backdate

moment = datetime(2024, 3, 5)
indonesian_day_and_date(moment)     # ("Selasa", "05 Maret 2024")
masa_pajak(moment)                  # ("03", "2024")
max_backdate(3, moment)             # datetime(2024, 3, 3, 0, 0)
```

`max_backdate` raises `ValueError` when the day does not exist in the
month. Every function here uses the current time when no moment is given.

### Request headers and bearer tokens

```python
from permenkit.headers import HeaderError, get_user_info, validate_authentication

get_user_info({"userq": "00012345 | Budi", "branch": "0123"}, "branch")
# ("00012345", "Budi", "", "123", "", "")

def verify(raw_token):
    # Decode and check the token here; return its claims.
    return {"pernr": "00012345", "nama": "Budi"}

def fill_claims(claims):
    return {"branch": "0123"}

headers = {"Authorization": "Bearer token"}
try:
    result = validate_authentication(headers, verify, fill_claims)
    print(result.userq_header)      # "00012345 | Budi"
except HeaderError as exc:
    print(exc)
```

Header names are looked up case-insensitively. Every header value is limited
to 5024 bytes; values other than `userq` have their leading zeros removed.
Any exception raised by the token verifier is reported as a `HeaderError`.

### CSV downloads

```python
from permenkit.csv_export import write_csv_gzip

response_headers, body = write_csv_gzip("report", ["id", "amount"], [["1", "1000"]], ";")
```

`response_headers` holds `Content-Encoding: gzip`, a `Content-Disposition`
naming `report.csv.gz`, and `Content-Type: text/csv`; `body` is the
compressed CSV.

### Recording external calls

```python
import sqlite3
from permenkit.external_log import log_external_call, log_external_response

connection = sqlite3.connect("history.db")
log_external_call(connection, "call-1", b"{}", b'{"q": 1}', is_esb=True, is_insert=True)
log_external_response(connection, "call-1", 200, b"{}", b'{"ok": true}', is_esb=True)
connection.commit()
```

Rows go to `hst_esb_call` or, with `is_esb=False`, to `hst_brigate_call`.
Any DB-API connection using `?` placeholders will do; the tables must
already exist. Store responses with `log_external_response`: calling
`log_external_call` with `is_insert=False` binds only three values to the
four-placeholder update statement, which the driver rejects.

### CORS and security headers

`CorsMiddleware` and `SecurityHeadersMiddleware` wrap any WSGI application.
Headers the application sets itself take precedence over the defaults, and
`CorsMiddleware` answers `OPTIONS` requests with `204 No Content`.

```python
from permenkit.http_middleware import (
    CorsMiddleware,
    SecurityHeadersMiddleware,
    content_security_policy,
)

def app(environ, start_response):
    start_response("200 OK", [("Content-Type", "text/plain")])
    return [b"hello"]

wrapped = SecurityHeadersMiddleware(
    CorsMiddleware(app, allowed_origins=["https://app.example.com"]),
    release_mode="production",
)
print(content_security_policy("dev"))
```

Requests from an allowed origin get that origin back with credentials
allowed; all others get `*`. In `local` and `dev` release modes the content
security policy also allows plain `http:` connections; in every other mode
only `https:`.

## What it does not do

permenkit is a set of helpers, not an application. It runs no server, opens
no database connections and creates no tables, issues or verifies no tokens
itself (token checking is handed to the function you pass in), and has no
middleware that authenticates requests or generates identifiers and invoice
numbers.