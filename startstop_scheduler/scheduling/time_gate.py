# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from startstop_scheduler.configuration.time_utils import format_time
from startstop_scheduler.util.time import is_aware


@dataclass(frozen=True)
class TimeGate:
    """
    Matches the wall clock against the configured trigger times.

    Matching is exact at minute resolution in the configured civil timezone, a trigger
    time therefore matches for the whole minute it names.
    """

    trigger_times: frozenset[str]
    timezone: ZoneInfo

    @classmethod
    def of(cls, trigger_times: Iterable[str], timezone: ZoneInfo) -> "TimeGate":
        return cls(trigger_times=frozenset(trigger_times), timezone=timezone)

    def local_time(self, now: datetime) -> str:
        if not is_aware(now):
            raise ValueError(f"Expected a timezone-aware datetime, got {now}")
        return format_time(now.astimezone(self.timezone))

    def current_trigger_time(self, now: datetime) -> Optional[str]:
        local_time = self.local_time(now)
        return local_time if local_time in self.trigger_times else None

    def is_trigger_time(self, now: datetime) -> bool:
        return self.current_trigger_time(now) is not None
