"""
Swatch Internet Time for standard Python datetimes.

A decimal time relative to Biel, Switzerland (UTC+1), at 1000 ".beats" per day.
Contains the beat calculator, the InternetTime value with its layout formatter,
and a small `swatch-time` CLI.
"""

from .beats import BIEL, Algorithm, compute_beats, round_down
from .config import ClockConfig, load_clock_config
from .format import BEATS, CENTI_BEATS, DECI_BEATS, MICRO_BEATS, MILLI_BEATS, Format
from .internet_time import InternetTime, new, now, with_algorithm, with_time

__all__ = [
    "BIEL",
    "Algorithm",
    "compute_beats",
    "round_down",
    "ClockConfig",
    "load_clock_config",
    "BEATS",
    "DECI_BEATS",
    "CENTI_BEATS",
    "MILLI_BEATS",
    "MICRO_BEATS",
    "Format",
    "InternetTime",
    "new",
    "now",
    "with_algorithm",
    "with_time",
]
