"""Argument resolution - turns raw flag values into Parameters.

Pure: takes today's date as an argument instead of reading the clock,
and reports problems by raising ArgumentError subclasses.
"""

import re
from dataclasses import dataclass
from datetime import MAXYEAR, date

from .errors import ArgumentParseError, ValidationError
from .modes import FormatMode, Month, WorkingDayMode

MIN_YEAR = 2000
MAX_YEAR = MAXYEAR
CURRENT_MONTH = "CURRENT"
_YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")
PROGRAM_NAME = "working-days"


@dataclass(frozen=True)
class Parameters:
    """Validated settings for a single run."""

    year: int
    month: Month
    format_mode: FormatMode
    working_day_mode: WorkingDayMode


def _choices(tokens: list[str]) -> str:
    return "|".join(tokens)


def usage(min_year: int = MIN_YEAR) -> str:
    """Usage text listing every accepted token."""
    months = [CURRENT_MONTH] + [m.name for m in Month]
    return (
        f"Usage example: {PROGRAM_NAME}"
        " -y <YEAR>"
        f" -m <{_choices(months)}>"
        f" -f <{_choices([m.name for m in FormatMode])}>"
        f" -w <{_choices([m.name for m in WorkingDayMode])}>\n"
        f"YEAR must be {min_year} or later; every flag is optional."
    )


def parse_year(value: str | None, today: date, min_year: int = MIN_YEAR) -> int:
    if value is None:
        return today.year
    token = value.strip()
    if not _YEAR_PATTERN.fullmatch(token):
        raise ArgumentParseError(f"Year must be an integer, got {value!r}")
    year = int(token)
    if year < min_year:
        raise ValidationError(f"Year must be at least {min_year}, got {year}")
    if year > MAX_YEAR:
        raise ValidationError(f"Year must be at most {MAX_YEAR}, got {year}")
    return year


def parse_month(value: str | None, today: date) -> Month:
    """Match CURRENT or an English month name, ignoring case."""
    if value is None:
        return Month(today.month)
    token = value.strip().upper()
    if token == CURRENT_MONTH:
        return Month(today.month)
    try:
        return Month[token]
    except KeyError:
        raise ArgumentParseError(f"Unrecognized month {value!r}") from None


def parse_format_mode(value: str | None, default: FormatMode = FormatMode.YYYY) -> FormatMode:
    if value is None:
        return default
    try:
        return FormatMode[value]
    except KeyError:
        raise ArgumentParseError(f"Unrecognized format mode {value!r}") from None


def parse_working_day_mode(
    value: str | None,
    default: WorkingDayMode = WorkingDayMode.ALL_DAYS,
) -> WorkingDayMode:
    if value is None:
        return default
    try:
        return WorkingDayMode[value]
    except KeyError:
        raise ArgumentParseError(f"Unrecognized working day mode {value!r}") from None


def resolve_parameters(
    year: str | None,
    month: str | None,
    format_mode: str | None,
    working_day_mode: str | None,
    today: date,
    *,
    min_year: int = MIN_YEAR,
    default_format_mode: FormatMode = FormatMode.YYYY,
    default_working_day_mode: WorkingDayMode = WorkingDayMode.ALL_DAYS,
) -> Parameters:
    """
    Resolve raw flag values into Parameters.

    Args:
        year, month, format_mode, working_day_mode: Raw values from the
            command line, or None when the flag was not given
        today: Date used for the year and month defaults

    Returns:
        Parameters

    Raises:
        ArgumentParseError: A value is malformed or not a known token
        ValidationError: The year is below min_year or past MAX_YEAR
    """
    return Parameters(
        year=parse_year(year, today, min_year),
        month=parse_month(month, today),
        format_mode=parse_format_mode(format_mode, default_format_mode),
        working_day_mode=parse_working_day_mode(working_day_mode, default_working_day_mode),
    )
