from __future__ import annotations

"""
Beat calculation for Swatch Internet Time.

A day is split into 1000 ".beats" of 86.4 seconds each, counted from midnight
in Biel, Switzerland (UTC+1, no daylight saving).
"""

import logging
import math
from datetime import datetime, timedelta, timezone
from enum import Enum
from fractions import Fraction
from numbers import Rational
from typing import Union

logger = logging.getLogger(__name__)

SECONDS_PER_BEAT = 86.4
NANO_PER_HOUR = 3_600_000_000_000
NANO_PER_DAY = 86_400_000_000_000
NANO_PER_BEAT = NANO_PER_DAY // 1000
MAX_PRECISION = 6

# Fixed offset rather than a named zone so DST never applies.
BIEL = timezone(timedelta(hours=1), "UTC+1")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Algorithm(Enum):
    TOTAL_SECONDS = "seconds"
    TOTAL_NANOSECONDS = "nanoseconds"

    @classmethod
    def parse(cls, value: Union[str, "Algorithm", None]) -> "Algorithm":
        """Resolve a member, member name or alias; anything else is TOTAL_SECONDS."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for alg in cls:
                if key.upper() == alg.name or key.lower() == alg.value:
                    return alg
        logger.debug("unknown algorithm %r, using %s", value, cls.TOTAL_SECONDS.name)
        return cls.TOTAL_SECONDS


def to_reference_zone(t: datetime) -> datetime:
    """Normalise t into the UTC+1 reference zone (naive values are local time)."""
    return t.astimezone(timezone.utc).astimezone(BIEL)


def round_down(value: Union[float, Rational], precision: int) -> float:
    """Floor value to `precision` decimal digits.

    Floats are truncated on their decimal repr so e.g. 0.29 stays 0.29 instead
    of becoming 0.28 through binary scaling.
    """
    if isinstance(value, float):
        value = Fraction(repr(value))
    scale = 10 ** precision
    return math.floor(value * scale) / scale


def total_seconds_raw(t: datetime) -> Fraction:
    local = to_reference_zone(t)
    seconds = local.hour * 3600 + local.minute * 60 + local.second
    # seconds / 86.4, kept exact
    return Fraction(seconds * 1000, 86_400)


def unix_nanos(t: datetime) -> int:
    if t.tzinfo is None:
        t = t.astimezone()
    return (t - _EPOCH) // timedelta(microseconds=1) * 1000


def total_nanoseconds_raw(t: datetime) -> Fraction:
    since_midnight = (unix_nanos(t) + NANO_PER_HOUR) % NANO_PER_DAY
    # Exactly at reference midnight counts as the end of the previous cycle.
    if since_midnight == 0:
        since_midnight = NANO_PER_DAY
    return Fraction(since_midnight, NANO_PER_BEAT)


def compute_beats(t: datetime, algorithm: Algorithm = Algorithm.TOTAL_SECONDS) -> float:
    """Return the beat count of t in [0, 1000], truncated to MAX_PRECISION digits."""
    if algorithm is Algorithm.TOTAL_NANOSECONDS:
        raw = total_nanoseconds_raw(t)
    else:
        raw = total_seconds_raw(t)
    return round_down(raw, MAX_PRECISION)
