# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from startstop_scheduler.configuration.time_utils import normalize_time_str


class InvalidRuleError(ValueError):
    pass


class InvalidDesiredCountError(ValueError):
    pass


class RuleAction(str, Enum):
    START = "start"
    STOP = "stop"

    @classmethod
    def parse(cls, value: str) -> "RuleAction":
        try:
            return cls(value)
        except ValueError:
            raise InvalidRuleError(
                f"Unknown action {value!r}, must be one of {[a.value for a in cls]}"
            )


def _parse_trigger_time(value: str) -> str:
    try:
        return normalize_time_str(value)
    except ValueError as err:
        raise InvalidRuleError(str(err)) from err


def _require_columns(row: Sequence[str], columns: int, layout: str) -> None:
    if len(row) < columns:
        raise InvalidRuleError(
            f"Expected at least {columns} columns ({layout}), got {len(row)}: {list(row)}"
        )


@dataclass(frozen=True)
class DatabaseRule:
    trigger_time: str
    action: RuleAction
    instance_identifier: str

    @property
    def target(self) -> str:
        return self.instance_identifier

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "DatabaseRule":
        """row layout: trigger_time, action, instance_identifier"""
        _require_columns(row, 3, "trigger_time,action,instance_identifier")
        return cls(
            trigger_time=_parse_trigger_time(row[0]),
            action=RuleAction.parse(row[1]),
            instance_identifier=row[2],
        )


@dataclass(frozen=True)
class ServiceRule:
    trigger_time: str
    action: RuleAction
    cluster_name: str
    service_name: str
    desired_count: Optional[str] = None

    @property
    def target(self) -> str:
        return f"{self.cluster_name}/{self.service_name}"

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "ServiceRule":
        """
        row layout: trigger_time, action, cluster_name, service_name, desired_count

        desired_count is only read for start rules; it is kept as the raw string and
        validated by parse_desired_count when the rule is dispatched.
        """
        _require_columns(
            row, 4, "trigger_time,action,cluster_name,service_name[,desired_count]"
        )
        action = RuleAction.parse(row[1])
        return cls(
            trigger_time=_parse_trigger_time(row[0]),
            action=action,
            cluster_name=row[2],
            service_name=row[3],
            desired_count=(
                row[4] if action == RuleAction.START and len(row) > 4 else None
            ),
        )


def parse_desired_count(value: Optional[str]) -> int:
    if value is None:
        raise InvalidDesiredCountError("desired count is missing")
    try:
        count = int(value.strip())
    except ValueError:
        raise InvalidDesiredCountError(f"desired count {value!r} is not an integer")
    if count < 0:
        raise InvalidDesiredCountError(f"desired count {count} is negative")
    return count
