# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import time
import traceback
from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from typing import Any, Final, Optional

from startstop_scheduler.configuration.scheduler_environment import (
    SchedulerEnvironment,
)
from startstop_scheduler.observability.powertools_logging import powertools_logger
from startstop_scheduler.scheduling.dispatch_result import DispatchResult
from startstop_scheduler.scheduling.ecs import ServiceRuleKind
from startstop_scheduler.scheduling.rds import DatabaseRuleKind
from startstop_scheduler.scheduling.rule_kind import RuleKind
from startstop_scheduler.scheduling.tick import process_rule_kind
from startstop_scheduler.scheduling.time_gate import TimeGate

logger = powertools_logger()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Scheduler:
    """
    Polls the clock and runs the rule kinds whenever a trigger time is reached.

    Ticks are independent of each other, the scheduler holds nothing but its
    configuration between them.
    """

    def __init__(
        self,
        env: SchedulerEnvironment,
        rule_kinds: Optional[Sequence[RuleKind[Any]]] = None,
        clock: Callable[[], datetime] = utc_now,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.env: Final = env
        self.time_gate: Final = TimeGate.of(env.trigger_times, env.timezone)
        # database rules are always processed before service rules
        self.rule_kinds: Final[Sequence[RuleKind[Any]]] = (
            rule_kinds
            if rule_kinds is not None
            else (DatabaseRuleKind(env), ServiceRuleKind(env))
        )
        self._clock = clock
        self._sleep = sleep

    def run_once(self, now: Optional[datetime] = None) -> list[DispatchResult]:
        current = now if now is not None else self._clock()
        trigger_time = self.time_gate.current_trigger_time(current)
        logger.info(
            f"Current time in {self.env.timezone.key}: {self.time_gate.local_time(current)}"
        )
        if trigger_time is None:
            return []

        results: list[DispatchResult] = []
        for kind in self.rule_kinds:
            results.extend(process_rule_kind(kind, trigger_time))
        return results

    def run_forever(self) -> None:
        while True:
            try:
                self.run_once()
            except Exception as e:
                logger.error(f"Error running scheduler tick: ({e})\n{traceback.format_exc()}")
            self._sleep(self.env.poll_interval_seconds)
