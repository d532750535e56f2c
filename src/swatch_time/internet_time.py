from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from typing import Callable, Optional

from .beats import Algorithm, compute_beats, round_down, to_reference_zone
from .format import BEATS, beat_replacements, render

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return to_reference_zone(datetime.now(timezone.utc))


@dataclass(frozen=True)
class InternetTime:
    """A point in time read as Swatch Internet Time.

    `time` is always held in the UTC+1 reference zone. Instances are immutable;
    use with_time / with_algorithm to derive modified copies.
    """

    time: datetime = field(default_factory=_now)
    algorithm: Algorithm = Algorithm.TOTAL_SECONDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "time", to_reference_zone(self.time))
        object.__setattr__(self, "algorithm", Algorithm.parse(self.algorithm))

    @classmethod
    def from_iso(cls, text: str, algorithm: Algorithm = Algorithm.TOTAL_SECONDS) -> "InternetTime":
        return cls(time=datetime.fromisoformat(text), algorithm=algorithm)

    def with_time(self, t: datetime) -> "InternetTime":
        return replace(self, time=t)

    def with_algorithm(self, algorithm: Algorithm) -> "InternetTime":
        return replace(self, algorithm=algorithm)

    def date(self) -> date:
        """Calendar date in the reference zone."""
        return self.time.date()

    def beats(self) -> int:
        return int(round_down(self.precise_beats(), 0))

    def precise_beats(self) -> float:
        return compute_beats(self.time, self.algorithm)

    def format(self, layout: str) -> str:
        """Render layout, replacing beat tokens and strftime directives.

        Tokens (@xxx, @xxx.x, @xxx.xx, @xxx.xxx, @xxx.xxxxxx) are matched
        longest first in a single pass; all other text goes through
        datetime.strftime on the reference-zone time.
        """
        replacements = beat_replacements(self.beats(), self.precise_beats())
        return render(layout, self.time, replacements)

    def __str__(self) -> str:
        return self.format(BEATS)


Option = Callable[[InternetTime], InternetTime]


def with_time(t: datetime) -> Option:
    def apply(it: InternetTime) -> InternetTime:
        return it.with_time(t)

    return apply


def with_algorithm(algorithm: Algorithm) -> Option:
    def apply(it: InternetTime) -> InternetTime:
        return it.with_algorithm(algorithm)

    return apply


def new(*options: Option) -> InternetTime:
    """Build an InternetTime from options applied in order; time defaults to now."""
    it = InternetTime()
    for apply in options:
        it = apply(it)
    logger.debug("new InternetTime time=%s algorithm=%s", it.time.isoformat(), it.algorithm.name)
    return it


def now(algorithm: Optional[Algorithm] = None) -> InternetTime:
    if algorithm is None:
        return new()
    return new(with_algorithm(algorithm))
