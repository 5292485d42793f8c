# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from startstop_scheduler.scheduling.time_gate import TimeGate

time_gate = TimeGate.of(["07:00", "19:00", "08:26"], ZoneInfo("CET"))


@pytest.mark.parametrize(
    "now, expected",
    [
        (datetime(2024, 1, 15, 6, 0, 0, tzinfo=timezone.utc), "07:00"),
        (datetime(2024, 1, 15, 6, 0, 59, 999999, tzinfo=timezone.utc), "07:00"),
        (datetime(2024, 1, 15, 18, 0, 30, tzinfo=timezone.utc), "19:00"),
        (datetime(2024, 1, 15, 7, 26, tzinfo=timezone.utc), "08:26"),
        # summer time, CET observes UTC+2
        (datetime(2024, 7, 15, 5, 0, tzinfo=timezone.utc), "07:00"),
        (datetime(2024, 1, 15, 7, 0, tzinfo=ZoneInfo("CET")), "07:00"),
        (datetime(2024, 1, 15, 15, 0, tzinfo=ZoneInfo("Asia/Tokyo")), "07:00"),
    ],
)
def test_matches_trigger_time_in_configured_timezone(
    now: datetime, expected: str
) -> None:
    assert time_gate.current_trigger_time(now) == expected
    assert time_gate.is_trigger_time(now)


@pytest.mark.parametrize(
    "now",
    [
        datetime(2024, 1, 15, 7, 0, tzinfo=timezone.utc),
        datetime(2024, 1, 15, 5, 59, 59, tzinfo=timezone.utc),
        datetime(2024, 1, 15, 6, 1, tzinfo=timezone.utc),
        datetime(2024, 7, 15, 6, 0, tzinfo=timezone.utc),
    ],
)
def test_no_match_outside_trigger_minutes(now: datetime) -> None:
    assert time_gate.current_trigger_time(now) is None
    assert not time_gate.is_trigger_time(now)


def test_every_minute_of_a_day_matches_only_configured_times() -> None:
    matches = []
    for hour in range(24):
        for minute in range(60):
            now = datetime(2024, 1, 15, hour, minute, tzinfo=ZoneInfo("CET"))
            if time_gate.is_trigger_time(now):
                matches.append(time_gate.local_time(now))

    assert matches == ["07:00", "08:26", "19:00"]


def test_local_time_is_zero_padded() -> None:
    now = datetime(2024, 1, 15, 6, 5, tzinfo=timezone.utc)
    assert time_gate.local_time(now) == "07:05"


def test_rejects_naive_datetimes() -> None:
    with pytest.raises(ValueError):
        time_gate.is_trigger_time(datetime(2024, 1, 15, 7, 0))
