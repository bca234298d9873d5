"""Enumerations shared by the resolver, enumerator and formatter."""

from enum import Enum, IntEnum


class Month(IntEnum):
    """Calendar month, valued by its number."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class FormatMode(Enum):
    """Rendering style for each date."""

    RO_AGENDA = "RO_AGENDA"  # Luni, 2 Dec 2024
    EN_AGENDA = "EN_AGENDA"  # Monday, 2.Dec.2024
    YYYY = "YYYY"  # 2024-12-02


class WorkingDayMode(Enum):
    """Which days of the month are emitted."""

    WORKING_DAYS = "WORKING_DAYS"
    ALL_DAYS = "ALL_DAYS"
