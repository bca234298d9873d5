"""Default settings for Working Days."""

from dataclasses import dataclass

from .core.modes import FormatMode, WorkingDayMode
from .core.params import MIN_YEAR


@dataclass(frozen=True)
class Defaults:
    """Values used when a flag is absent."""

    min_year: int = MIN_YEAR
    format_mode: FormatMode = FormatMode.YYYY
    working_day_mode: WorkingDayMode = WorkingDayMode.ALL_DAYS


DEFAULTS = Defaults()
