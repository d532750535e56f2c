from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .beats import Algorithm
from .format import CENTI_BEATS, Format

logger = logging.getLogger(__name__)

DATE_LAYOUT = "%Y-%m-%d"
DEBUG_ENV = "SWATCH_TIME_DEBUG"


@dataclass
class ClockConfig:
    layout: str = CENTI_BEATS
    date: bool = False
    algorithm: Algorithm = Algorithm.TOTAL_SECONDS

    def full_layout(self) -> str:
        return (DATE_LAYOUT if self.date else "") + self.layout


def _layout_from_precision(name: str) -> str:
    try:
        return Format[name.strip().upper()].value
    except KeyError:
        choices = ", ".join(f.name.lower() for f in Format)
        raise ValueError(f"unknown precision {name!r} (expected one of: {choices})") from None


def clock_config_from_dict(raw: Dict[str, Any]) -> ClockConfig:
    if not isinstance(raw, dict):
        raise ValueError("clock config must be a JSON object")
    layout = str(raw.get("layout", CENTI_BEATS))
    # A named precision wins over an explicit layout
    if raw.get("precision"):
        layout = _layout_from_precision(str(raw["precision"]))
    return ClockConfig(
        layout=layout,
        date=bool(raw.get("date", False)),
        algorithm=Algorithm.parse(raw.get("algorithm")),
    )


def load_clock_config(path: str) -> ClockConfig:
    with open(path, "r") as f:
        raw = json.load(f)
    cfg = clock_config_from_dict(raw)
    logger.debug("loaded %s: %s", path, cfg)
    return cfg


def debug_enabled(env: Optional[Dict[str, str]] = None) -> bool:
    env = os.environ if env is None else env
    return env.get(DEBUG_ENV, "").strip().lower() not in ("", "0", "false", "no")
