# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import datetime

import pytest

from startstop_scheduler.configuration.time_utils import (
    format_time,
    is_valid_time_str,
    normalize_time_str,
    parse_time_str,
)


@pytest.mark.parametrize(
    "time_str", ["00:00", "1:00", "01:00", "10:00", "00:05", "00:15", "23:59"]
)
def test_valid_time_str(time_str: str) -> None:
    assert is_valid_time_str(time_str) is True


@pytest.mark.parametrize("time_str", ["abc", "10:5", "1:5", "24:00", "25:00", ""])
def test_invalid_time_str(time_str: str) -> None:
    assert is_valid_time_str(time_str) is False


def test_parse_time_str() -> None:
    assert parse_time_str("7:05") == datetime.time(7, 5)
    assert parse_time_str("19:00") == datetime.time(19, 0)

    with pytest.raises(ValueError):
        parse_time_str("7pm")


def test_format_time_is_zero_padded() -> None:
    assert format_time(datetime.time(7, 0)) == "07:00"
    assert format_time(datetime.datetime(2024, 1, 1, 8, 26, 59)) == "08:26"


def test_normalize_time_str() -> None:
    assert normalize_time_str("7:00") == "07:00"
    assert normalize_time_str(" 08:26 ") == "08:26"
    assert normalize_time_str("19:00") == "19:00"
