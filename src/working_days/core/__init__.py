"""Functional core - pure business logic with no I/O."""

from .errors import (
    ArgumentError,
    ArgumentParseError,
    ValidationError,
    InternalConsistencyError,
)
from .modes import Month, FormatMode, WorkingDayMode
from .params import Parameters, resolve_parameters, usage
from .days import MonthDays, days_in_month, enumerate_days, is_weekend
from .formatting import format_date, render_lines

__all__ = [
    # Errors
    "ArgumentError",
    "ArgumentParseError",
    "ValidationError",
    "InternalConsistencyError",
    # Modes
    "Month",
    "FormatMode",
    "WorkingDayMode",
    # Params
    "Parameters",
    "resolve_parameters",
    "usage",
    # Days
    "MonthDays",
    "days_in_month",
    "enumerate_days",
    "is_weekend",
    # Formatting
    "format_date",
    "render_lines",
]
