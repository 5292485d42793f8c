# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from pytest import raises

from startstop_scheduler.util.app_env_utils import (
    AppEnvError,
    env_to_bool,
    env_to_list,
    env_to_positive_int,
)


def test_to_bool() -> None:
    assert env_to_bool("True")
    assert env_to_bool("true ")
    assert env_to_bool(" yes")

    assert not env_to_bool("")
    assert not env_to_bool("False")
    assert not env_to_bool("\tno")
    assert not env_to_bool("Anything else")


def test_to_list() -> None:
    assert env_to_list("") == []

    assert env_to_list("a") == ["a"]
    assert env_to_list("a,b,c") == ["a", "b", "c"]

    assert env_to_list("foo,,bar") == ["foo", "bar"]
    assert env_to_list("  ,   foo  , bar, ") == ["foo", "bar"]


def test_to_positive_int() -> None:
    assert env_to_positive_int("POLL_INTERVAL_SECONDS", "60") == 60
    assert env_to_positive_int("POLL_INTERVAL_SECONDS", " 5 ") == 5


def test_to_positive_int_rejects_non_integers() -> None:
    with raises(AppEnvError) as err:
        env_to_positive_int("POLL_INTERVAL_SECONDS", "sixty")

    assert str(err.value) == "Invalid integer for POLL_INTERVAL_SECONDS: sixty"


def test_to_positive_int_rejects_zero() -> None:
    with raises(AppEnvError):
        env_to_positive_int("POLL_INTERVAL_SECONDS", "0")
