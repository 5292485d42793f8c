# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from os import environ
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from startstop_scheduler.configuration.time_utils import normalize_time_str
from startstop_scheduler.util.app_env_utils import (
    AppEnvError,
    env_to_list,
    env_to_positive_int,
)

DEFAULT_TRIGGER_TIMES = "07:00,19:00,08:26"
DEFAULT_TIMEZONE = "CET"
DEFAULT_POLL_INTERVAL_SECONDS = "60"
DEFAULT_REGION = "eu-west-1"
DEFAULT_OPT_IN_TAG_KEY = "startstop"
DEFAULT_OPT_IN_TAG_VALUE = "True"
DEFAULT_DATABASE_RULES_FILE = "rds.csv"
DEFAULT_SERVICE_RULES_FILE = "ecs.csv"
DEFAULT_CLIENT_CONNECT_TIMEOUT = "10"
DEFAULT_CLIENT_READ_TIMEOUT = "30"
DEFAULT_USER_AGENT_EXTRA = "startstop-scheduler"


@dataclass(frozen=True)
class SchedulerEnvironment:
    trigger_times: frozenset[str]
    timezone: ZoneInfo
    poll_interval_seconds: int
    region: str
    account_id: str
    opt_in_tag_key: str
    opt_in_tag_value: str
    database_rules_file: Path
    service_rules_file: Path
    client_connect_timeout: int
    client_read_timeout: int
    user_agent_extra: str

    @staticmethod
    def from_env() -> "SchedulerEnvironment":
        """
        Load the scheduler configuration from the process environment.

        Every setting is optional and falls back to the values the agent has always run
        with. Load once at startup and pass the values down; an invalid setting is fatal.
        """
        try:
            return SchedulerEnvironment(
                trigger_times=_to_trigger_times(
                    environ.get("TRIGGER_TIMES", DEFAULT_TRIGGER_TIMES)
                ),
                timezone=ZoneInfo(
                    environ.get("SCHEDULER_TIMEZONE", DEFAULT_TIMEZONE).strip()
                ),
                poll_interval_seconds=env_to_positive_int(
                    "POLL_INTERVAL_SECONDS",
                    environ.get("POLL_INTERVAL_SECONDS", DEFAULT_POLL_INTERVAL_SECONDS),
                ),
                region=environ.get("SCHEDULER_REGION", DEFAULT_REGION).strip(),
                account_id=environ.get("SCHEDULER_ACCOUNT_ID", "").strip(),
                opt_in_tag_key=environ.get("OPT_IN_TAG_KEY", DEFAULT_OPT_IN_TAG_KEY),
                opt_in_tag_value=environ.get(
                    "OPT_IN_TAG_VALUE", DEFAULT_OPT_IN_TAG_VALUE
                ),
                database_rules_file=Path(
                    environ.get("DATABASE_RULES_FILE", DEFAULT_DATABASE_RULES_FILE)
                ),
                service_rules_file=Path(
                    environ.get("SERVICE_RULES_FILE", DEFAULT_SERVICE_RULES_FILE)
                ),
                client_connect_timeout=env_to_positive_int(
                    "CLIENT_CONNECT_TIMEOUT",
                    environ.get(
                        "CLIENT_CONNECT_TIMEOUT", DEFAULT_CLIENT_CONNECT_TIMEOUT
                    ),
                ),
                client_read_timeout=env_to_positive_int(
                    "CLIENT_READ_TIMEOUT",
                    environ.get("CLIENT_READ_TIMEOUT", DEFAULT_CLIENT_READ_TIMEOUT),
                ),
                user_agent_extra=environ.get(
                    "USER_AGENT_EXTRA", DEFAULT_USER_AGENT_EXTRA
                ),
            )
        except (ZoneInfoNotFoundError, ValueError) as err:
            # ZoneInfo raises a plain ValueError for malformed keys such as absolute paths
            raise AppEnvError(f"Invalid timezone: {err.args[0]}") from err


def _to_trigger_times(value: str) -> frozenset[str]:
    times = set()
    for item in env_to_list(value):
        try:
            times.add(normalize_time_str(item))
        except ValueError as err:
            raise AppEnvError(f"Invalid trigger time: {item}") from err
    if not times:
        raise AppEnvError("TRIGGER_TIMES must name at least one time")
    return frozenset(times)
