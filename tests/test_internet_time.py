from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date, datetime, timedelta, timezone

import pytest

from swatch_time import (
    BEATS,
    Algorithm,
    InternetTime,
    new,
    now,
    with_algorithm,
    with_time,
)


def _t(text: str) -> datetime:
    return datetime.fromisoformat(text)


def test_new_defaults_to_now_in_reference_zone():
    before = datetime.now(timezone.utc)
    it = new()
    after = datetime.now(timezone.utc)
    assert it.algorithm is Algorithm.TOTAL_SECONDS
    assert it.time.utcoffset() == timedelta(hours=1)
    assert before <= it.time <= after
    assert 0 <= it.beats() <= 999


def test_now_alias_accepts_algorithm():
    it = now(Algorithm.TOTAL_NANOSECONDS)
    assert it.algorithm is Algorithm.TOTAL_NANOSECONDS
    assert now().algorithm is Algorithm.TOTAL_SECONDS


def test_with_time_keeps_instant_and_normalises_zone():
    t = _t("2023-01-02T11:11:28+10:00")
    it = new(with_time(t))
    assert it.time == t
    assert it.time.utcoffset() == timedelta(hours=1)
    assert (it.time.hour, it.time.minute, it.time.second) == (2, 11, 28)


def test_options_apply_in_order():
    t1 = _t("2006-02-15T12:00:00-06:00")
    t2 = _t("2023-01-02T11:11:28+10:00")
    it = new(
        with_time(t1),
        with_algorithm(Algorithm.TOTAL_NANOSECONDS),
        with_time(t2),
    )
    assert it.time == t2
    assert it.algorithm is Algorithm.TOTAL_NANOSECONDS


def test_value_is_immutable():
    it = new(with_time(_t("2023-01-02T11:11:28+10:00")))
    with pytest.raises(FrozenInstanceError):
        it.algorithm = Algorithm.TOTAL_NANOSECONDS  # type: ignore[misc]
    other = it.with_algorithm(Algorithm.TOTAL_NANOSECONDS)
    assert it.algorithm is Algorithm.TOTAL_SECONDS
    assert other.algorithm is Algorithm.TOTAL_NANOSECONDS
    assert other.time == it.time


@pytest.mark.parametrize(
    "text,expect",
    [
        ("2006-02-15T12:00:00-06:00", 791),
        ("2008-05-11T03:10:07+10:00", 757),
        ("2023-01-02T11:11:28+10:00", 91),
        ("2023-01-02T23:59:59.999999+01:00", 999),
    ],
)
@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_beats_known_values(text, expect, algorithm):
    it = InternetTime.from_iso(text, algorithm=algorithm)
    assert it.beats() == expect


def test_precise_beats_seconds_vs_nanoseconds():
    t = _t("2023-01-02T23:59:59.999999+01:00")
    assert new(with_time(t)).precise_beats() == pytest.approx(999.988425, abs=1e-9)
    nano = new(with_time(t), with_algorithm(Algorithm.TOTAL_NANOSECONDS))
    assert nano.precise_beats() == pytest.approx(999.999999, abs=1e-9)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_beats_is_floor_of_precise_beats(algorithm):
    start = _t("2023-01-02T00:00:00.000001+01:00")
    for minutes in range(0, 24 * 60, 17):
        it = InternetTime(time=start + timedelta(minutes=minutes, microseconds=minutes * 997), algorithm=algorithm)
        assert it.beats() == int(it.precise_beats())


def test_one_beat_apart():
    # 12:00:00.6 and 12:01:27.0 are exactly 86.4 seconds apart
    t1 = _t("2006-02-15T12:00:00.600+01:00")
    t2 = t1 + timedelta(seconds=86.4)
    for algorithm in Algorithm:
        a = InternetTime(time=t1, algorithm=algorithm).beats()
        b = InternetTime(time=t2, algorithm=algorithm).beats()
        assert b - a == 1


def test_nanosecond_midnight_reports_end_of_cycle():
    midnight = _t("2023-01-02T00:00:00+01:00")
    it = new(with_time(midnight), with_algorithm(Algorithm.TOTAL_NANOSECONDS))
    assert it.precise_beats() == 1000.0
    assert it.beats() == 1000
    assert new(with_time(midnight)).beats() == 0


def test_invalid_algorithm_defaults_to_seconds():
    it = InternetTime(time=_t("2023-01-02T11:11:28+10:00"), algorithm="sundial")  # type: ignore[arg-type]
    assert it.algorithm is Algorithm.TOTAL_SECONDS
    assert it.beats() == 91


def test_date_is_reference_zone_date():
    # 23:30 UTC on the 1st is already the 2nd in Biel
    it = new(with_time(_t("2023-01-01T23:30:00+00:00")))
    assert it.date() == date(2023, 1, 2)


def test_str_is_whole_beats():
    it = new(with_time(_t("2023-01-02T11:11:28+10:00")))
    assert str(it) == "@91"
    assert str(it) == it.format(BEATS)


def test_example_usage():
    it = new(
        with_time(_t("2006-02-15T02:57:08.000+01:00")),
        with_algorithm(Algorithm.TOTAL_NANOSECONDS),
    )
    assert it.beats() == 123
    assert it.precise_beats() == pytest.approx(123.009259, abs=1e-9)
    assert it.format("@xxx.xx") == "@123"
    assert it.format("%Y-%m-%d@xxx") == "2006-02-15@123"
