"""Fluent calendar arithmetic and inspection for UTC datetimes.

The ``core`` module holds ``Carbono`` and ``IsoWeek``; ``calendar_math`` holds
the leap-year, month-length and month-shifting helpers.
"""

__version__ = "0.1.1"
__all__ = ["calendar_math", "core"]