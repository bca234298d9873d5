"""Clock interface."""

from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Interface for reading the current date."""

    def today(self) -> date:
        """Return the current calendar date."""
        ...
