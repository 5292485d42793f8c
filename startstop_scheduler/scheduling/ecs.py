# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from pathlib import Path
from typing import TYPE_CHECKING, Sequence, assert_never

from startstop_scheduler.observability.error_codes import ErrorCode
from startstop_scheduler.observability.powertools_logging import powertools_logger
from startstop_scheduler.scheduling.dispatch_result import DispatchResult
from startstop_scheduler.scheduling.rule_kind import RuleKind
from startstop_scheduler.scheduling.rules import (
    InvalidDesiredCountError,
    RuleAction,
    ServiceRule,
    parse_desired_count,
)

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient
else:
    ECSClient = object

logger = powertools_logger()


class ServiceRuleKind(RuleKind[ServiceRule]):

    @property
    def name(self) -> str:
        return "service"

    @property
    def service_name(self) -> str:
        return "ecs"

    @property
    def rules_file(self) -> Path:
        return self.env.service_rules_file

    def parse_row(self, row: Sequence[str]) -> ServiceRule:
        return ServiceRule.from_row(row)

    def is_authorized(self, client: ECSClient, rule: ServiceRule) -> bool:
        try:
            response = client.describe_services(
                cluster=rule.cluster_name,
                services=[rule.service_name],
                include=["TAGS"],
            )
        except Exception as ex:
            logger.error(f"Unable to describe ECS service {rule.target} ({str(ex)})")
            return False

        services = response.get("services", [])
        if not services:
            logger.info(f"Service not found: {rule.target}")
            return False

        tags = services[0].get("tags")
        if not tags:
            logger.info(f"Service {rule.target} has no tags")
            return False

        return self.opt_in_tag.is_present(tags, key_field="key", value_field="value")

    def dispatch(self, client: ECSClient, rule: ServiceRule) -> DispatchResult:
        match rule.action:
            case RuleAction.START:
                try:
                    desired_count = parse_desired_count(rule.desired_count)
                except InvalidDesiredCountError as ex:
                    logger.error(
                        f"Not starting ECS service {rule.target}: {str(ex)}"
                    )
                    return DispatchResult.error(
                        self.name,
                        rule.target,
                        ErrorCode.INVALID_DESIRED_COUNT,
                        str(ex),
                        action=rule.action,
                    )
            case RuleAction.STOP:
                desired_count = 0
            case _:
                assert_never(rule.action)

        try:
            client.update_service(
                cluster=rule.cluster_name,
                service=rule.service_name,
                desiredCount=desired_count,
            )
        except Exception as ex:
            logger.error(
                f"Unable to update desired count of ECS service {rule.target} ({str(ex)})"
            )
            return DispatchResult.client_exception(
                self.name, rule.target, rule.action, ex
            )

        logger.info(
            f"Successfully updated {rule.target} desired count set to: {desired_count}"
        )
        return DispatchResult.success(
            self.name,
            rule.target,
            rule.action,
            action_info=f"desiredCount={desired_count}",
        )
