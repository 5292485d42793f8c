# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from enum import Enum
from typing import Optional, assert_never

from botocore.exceptions import BotoCoreError, ClientError

from startstop_scheduler.observability.error_codes import ErrorCode
from startstop_scheduler.scheduling.rules import RuleAction


class DispatchAction(Enum):
    START = "Started"
    STOP = "Stopped"
    SKIPPED = "Skipped"
    ERROR = "Error"

    @classmethod
    def from_rule_action(cls, rule_action: RuleAction) -> "DispatchAction":
        match rule_action:
            case RuleAction.START:
                return DispatchAction.START
            case RuleAction.STOP:
                return DispatchAction.STOP
            case _:
                assert_never(rule_action)


@dataclass()
class DispatchResult:
    rule_kind: str
    target: str
    requested_action: Optional[RuleAction]
    action_taken: DispatchAction
    action_info: Optional[str] = None
    error_code: Optional[ErrorCode] = None
    error_message: Optional[str] = None

    @property
    def dispatched(self) -> bool:
        return self.action_taken in {DispatchAction.START, DispatchAction.STOP}

    def to_json_log(self) -> dict[str, str]:
        return {
            "log_type": "dispatch_result",
            "rule_kind": self.rule_kind,
            "target": self.target,
            "requested_action": (
                self.requested_action.value if self.requested_action else ""
            ),
            "action_taken": self.action_taken.value,
            "action_info": str(self.action_info),
            "error_code": self.error_code.value if self.error_code else "",
            "error_message": str(self.error_message),
        }

    @classmethod
    def success(
        cls,
        rule_kind: str,
        target: str,
        action: RuleAction,
        action_info: Optional[str] = None,
    ) -> "DispatchResult":
        return cls(
            rule_kind=rule_kind,
            target=target,
            requested_action=action,
            action_taken=DispatchAction.from_rule_action(action),
            action_info=action_info,
        )

    @classmethod
    def not_authorized(
        cls, rule_kind: str, target: str, action: RuleAction, tag: str
    ) -> "DispatchResult":
        return cls(
            rule_kind=rule_kind,
            target=target,
            requested_action=action,
            action_taken=DispatchAction.SKIPPED,
            error_code=ErrorCode.NOT_AUTHORIZED,
            error_message=f"Resource is not tagged with {tag}",
        )

    @classmethod
    def error(
        cls,
        rule_kind: str,
        target: str,
        error_code: ErrorCode,
        error_message: Optional[str] = None,
        action: Optional[RuleAction] = None,
    ) -> "DispatchResult":
        return cls(
            rule_kind=rule_kind,
            target=target,
            requested_action=action,
            action_taken=DispatchAction.ERROR,
            error_code=error_code,
            error_message=error_message,
        )

    @classmethod
    def client_exception(
        cls,
        rule_kind: str,
        target: str,
        action: RuleAction,
        error: Exception,
    ) -> "DispatchResult":
        match action:
            case RuleAction.START:
                error_code = ErrorCode.START_FAILED
            case RuleAction.STOP:
                error_code = ErrorCode.STOP_FAILED
            case _:
                assert_never(action)

        return cls.error(
            rule_kind=rule_kind,
            target=target,
            action=action,
            error_code=error_code,
            error_message=(
                str(error)
                if isinstance(error, (ClientError, BotoCoreError))
                else "Unknown Error"
            ),
        )
