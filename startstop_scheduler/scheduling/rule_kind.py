# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Final, Generic, Sequence, TypeVar

from startstop_scheduler.configuration.scheduler_environment import (
    SchedulerEnvironment,
)
from startstop_scheduler.scheduling.dispatch_result import DispatchResult
from startstop_scheduler.scheduling.rules import DatabaseRule, ServiceRule
from startstop_scheduler.scheduling.tag_gate import OptInTag
from startstop_scheduler.util.session_manager import create_client

R = TypeVar("R", DatabaseRule, ServiceRule)


class RuleKind(ABC, Generic[R]):
    """
    One resource kind driven by a rule table.

    A kind knows how to turn a table row into a rule, how to check that the rule's
    target has opted in to automated start/stop, and how to carry the rule out.
    The tick pipeline is the same for every kind.
    """

    def __init__(self, env: SchedulerEnvironment) -> None:
        self.env: Final = env
        self.opt_in_tag: Final = OptInTag.from_env(env)

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def service_name(self) -> str:
        """boto3 service the kind talks to"""

    @property
    @abstractmethod
    def rules_file(self) -> Path:
        pass

    @abstractmethod
    def parse_row(self, row: Sequence[str]) -> R:
        pass

    @abstractmethod
    def is_authorized(self, client: Any, rule: R) -> bool:
        """never raises, lookup failures count as not authorized"""

    @abstractmethod
    def dispatch(self, client: Any, rule: R) -> DispatchResult:
        """never raises, failures are reported in the returned result"""

    def create_client(self) -> Any:
        return create_client(self.service_name, self.env)

    def describe_opt_in_tag(self) -> str:
        return f"{self.opt_in_tag.key}={self.opt_in_tag.value}"
