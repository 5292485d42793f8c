# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from startstop_scheduler.configuration.scheduler_environment import (
    SchedulerEnvironment,
)


@dataclass(frozen=True)
class OptInTag:
    key: str
    value: str

    @classmethod
    def from_env(cls, env: SchedulerEnvironment) -> "OptInTag":
        return cls(key=env.opt_in_tag_key, value=env.opt_in_tag_value)

    def is_present(
        self,
        tags: Optional[Iterable[Mapping[str, Any]]],
        key_field: str = "Key",
        value_field: str = "Value",
    ) -> bool:
        """
        True iff one of the tags carries exactly this key and value (case-sensitive).

        RDS returns tags as {"Key", "Value"} pairs while ECS uses {"key", "value"}, the
        field names are passed by the caller.
        """
        for tag in tags or []:
            if tag.get(key_field) == self.key and tag.get(value_field) == self.value:
                return True
        return False
