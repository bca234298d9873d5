"""Working Days - print the days of a month as agenda or ISO lines."""

__version__ = "0.1.0"
