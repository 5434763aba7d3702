"""Time helpers with Indonesian calendar names."""

import calendar
from datetime import datetime, tzinfo
from typing import Optional, Tuple

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_DAY_NAMES = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")

_MONTH_NAMES = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)


def now(tz: Optional[tzinfo] = None) -> datetime:
    """Current time in the given zone, or in the local zone."""
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def end_time(start: str, fmt: str = DEFAULT_TIME_FORMAT, tz: Optional[tzinfo] = None) -> str:
    """Check that start is in the given format and return the current time in it."""
    try:
        datetime.strptime(start, fmt)
    except ValueError as exc:
        raise ValueError(f"failed to parsing time string format, {exc}") from exc
    return now(tz).strftime(fmt)


def masa_pajak(moment: Optional[datetime] = None) -> Tuple[str, str]:
    """Tax period as (two-digit month, four-digit year)."""
    moment = moment or now()
    return moment.strftime("%m"), f"{moment.year:04d}"


def indonesian_day_name(moment: Optional[datetime] = None) -> str:
    """Indonesian name of the weekday."""
    moment = moment or now()
    return _DAY_NAMES[moment.weekday()]


def indonesian_date(moment: Optional[datetime] = None) -> str:
    """Date written like '02 Januari 2006'."""
    moment = moment or now()
    return f"{moment.day:02d} {_MONTH_NAMES[moment.month - 1]} {moment.year}"


def indonesian_day_and_date(moment: Optional[datetime] = None) -> Tuple[str, str]:
    """Both the Indonesian day name and the formatted date."""
    moment = moment or now()
    return indonesian_day_name(moment), indonesian_date(moment)


def max_backdate(day: int, today: Optional[datetime] = None) -> datetime:
    """Midnight of the given day in the current month; raise if the day does not exist."""
    today = today or datetime.now()
    last_day = calendar.monthrange(today.year, today.month)[1]
    if day < 1 or day > last_day:
        raise ValueError(f"invalid day {day} for month {calendar.month_name[today.month]}")
    return today.replace(day=day, hour=0, minute=0, second=0, microsecond=0)