"""Date rendering for the agenda and ISO formats.

Name tables are fixed strings keyed by ISO weekday (1 = Monday) and month
number, so output never depends on the process locale.
"""

from datetime import date
from typing import Iterable, Iterator

from .errors import InternalConsistencyError
from .modes import FormatMode

RO_WEEKDAYS = {
    1: "Luni",
    2: "Marți",
    3: "Miercuri",
    4: "Joi",
    5: "Vineri",
    6: "Sâmbătă",
    7: "Duminică",
}

RO_MONTHS = {
    1: "Ian",
    2: "Feb",
    3: "Mar",
    4: "Apr",
    5: "Mai",
    6: "Iun",
    7: "Iul",
    8: "Aug",
    9: "Sep",
    10: "Oct",
    11: "Noi",
    12: "Dec",
}

EN_WEEKDAYS = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday",
}

EN_MONTHS = {
    1: "Jan",
    2: "Feb",
    3: "Mar",
    4: "Apr",
    5: "May",
    6: "Jun",
    7: "Jul",
    8: "Aug",
    9: "Sep",
    10: "Oct",
    11: "Nov",
    12: "Dec",
}


def format_ro_agenda(d: date) -> str:
    """Romanian agenda line, e.g. "Duminică, 1 Dec 2024"."""
    return f"{RO_WEEKDAYS[d.isoweekday()]}, {d.day} {RO_MONTHS[d.month]} {d.year}"


def format_en_agenda(d: date) -> str:
    """English agenda line, e.g. "Wednesday, 25.Dec.2024"."""
    return f"{EN_WEEKDAYS[d.isoweekday()]}, {d.day}.{EN_MONTHS[d.month]}.{d.year}"


def format_iso(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def format_date(d: date, mode: FormatMode) -> list[str]:
    """
    Output lines for one date.

    Agenda modes are followed by a blank separator line.
    """
    match mode:
        case FormatMode.RO_AGENDA:
            return [format_ro_agenda(d), ""]
        case FormatMode.EN_AGENDA:
            return [format_en_agenda(d), ""]
        case FormatMode.YYYY:
            return [format_iso(d)]
        case _:
            raise InternalConsistencyError(f"Unsupported format mode {mode!r}")


def render_lines(dates: Iterable[date], mode: FormatMode) -> Iterator[str]:
    """Yield the output lines for each date, in order."""
    for d in dates:
        yield from format_date(d, mode)
