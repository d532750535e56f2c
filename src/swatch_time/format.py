from __future__ import annotations

import logging
import re
from datetime import datetime
from enum import Enum
from typing import Dict

from .beats import MAX_PRECISION, round_down

logger = logging.getLogger(__name__)

# Layout tokens replaced with .beats values by InternetTime.format.
BEATS = "@xxx"
DECI_BEATS = "@xxx.x"
# Also sometimes called "sub-beats".
CENTI_BEATS = "@xxx.xx"
MILLI_BEATS = "@xxx.xxx"
MICRO_BEATS = "@xxx.xxxxxx"


class Format(Enum):
    SWATCH = BEATS
    DECI = DECI_BEATS
    CENTI = CENTI_BEATS
    MILLI = MILLI_BEATS
    MICRO = MICRO_BEATS

    def __str__(self) -> str:
        return self.value

    @property
    def precision(self) -> int:
        return _PRECISION[self]

    @classmethod
    def from_token(cls, token: str) -> "Format":
        return cls(token)


_PRECISION = {
    Format.SWATCH: 0,
    Format.DECI: 1,
    Format.CENTI: 2,
    Format.MILLI: 3,
    Format.MICRO: MAX_PRECISION,
}

# Longest first: regex alternation takes the first branch that matches.
TOKEN_PATTERN = re.compile(
    "|".join(re.escape(tok) for tok in (MICRO_BEATS, MILLI_BEATS, CENTI_BEATS, DECI_BEATS, BEATS))
)


def format_number(value: float) -> str:
    """Shortest positional decimal for a truncated beat value: 91.2, 123, 0.000001."""
    return f"{value:.{MAX_PRECISION}f}".rstrip("0").rstrip(".")


def beat_replacements(beats: int, precise: float) -> Dict[str, str]:
    """Replacement text for every token, computed once per format call."""
    out = {BEATS: f"@{beats}", MICRO_BEATS: f"@{format_number(precise)}"}
    for fmt in (Format.DECI, Format.CENTI, Format.MILLI):
        out[fmt.value] = f"@{format_number(round_down(precise, fmt.precision))}"
    return out


def render(layout: str, t: datetime, replacements: Dict[str, str]) -> str:
    """Substitute beat tokens and strftime everything in between, in one pass."""
    parts = []
    pos = 0
    for match in TOKEN_PATTERN.finditer(layout):
        if match.start() > pos:
            parts.append(t.strftime(layout[pos:match.start()]))
        parts.append(replacements[match.group(0)])
        pos = match.end()
    if pos < len(layout):
        parts.append(t.strftime(layout[pos:]))
    result = "".join(parts)
    logger.debug("format %r -> %r", layout, result)
    return result
