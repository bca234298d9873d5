"""Clock adapters."""

from datetime import date


class SystemClock:
    """
    Wall-clock date from the operating system.

    Implements Clock protocol.
    """

    def today(self) -> date:
        return date.today()


class FixedClock:
    """
    A clock that always returns the same date.

    Implements Clock protocol. Lets tests pin "today".
    """

    def __init__(self, fixed: date):
        self.fixed = fixed

    def today(self) -> date:
        return self.fixed
