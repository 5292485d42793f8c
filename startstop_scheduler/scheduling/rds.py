# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from pathlib import Path
from typing import TYPE_CHECKING, Final, Sequence, assert_never

from startstop_scheduler.configuration.scheduler_environment import (
    SchedulerEnvironment,
)
from startstop_scheduler.observability.powertools_logging import powertools_logger
from startstop_scheduler.scheduling.dispatch_result import DispatchResult
from startstop_scheduler.scheduling.rule_kind import RuleKind
from startstop_scheduler.scheduling.rules import DatabaseRule, RuleAction
from startstop_scheduler.util.arn import ARN
from startstop_scheduler.util.session_manager import partition_for_region

if TYPE_CHECKING:
    from mypy_boto3_rds.client import RDSClient
else:
    RDSClient = object

logger = powertools_logger()


class DatabaseRuleKind(RuleKind[DatabaseRule]):

    def __init__(self, env: SchedulerEnvironment) -> None:
        super().__init__(env)
        self.partition: Final = partition_for_region(env.region)

    @property
    def name(self) -> str:
        return "database"

    @property
    def service_name(self) -> str:
        return "rds"

    @property
    def rules_file(self) -> Path:
        return self.env.database_rules_file

    def parse_row(self, row: Sequence[str]) -> DatabaseRule:
        return DatabaseRule.from_row(row)

    def instance_arn(self, instance_identifier: str) -> ARN:
        return ARN.for_rds_instance(
            partition=self.partition,
            region=self.env.region,
            account=self.env.account_id,
            instance_identifier=instance_identifier,
        )

    def is_authorized(self, client: RDSClient, rule: DatabaseRule) -> bool:
        arn = self.instance_arn(rule.instance_identifier)
        try:
            response = client.list_tags_for_resource(ResourceName=arn)
        except Exception as ex:
            logger.error(f"Unable to list tags for {arn} ({str(ex)})")
            return False

        return self.opt_in_tag.is_present(response.get("TagList"))

    def dispatch(self, client: RDSClient, rule: DatabaseRule) -> DispatchResult:
        identifier = rule.instance_identifier
        try:
            match rule.action:
                case RuleAction.START:
                    response = client.start_db_instance(
                        DBInstanceIdentifier=identifier
                    )
                case RuleAction.STOP:
                    response = client.stop_db_instance(DBInstanceIdentifier=identifier)
                case _:
                    assert_never(rule.action)
        except Exception as ex:
            logger.error(
                f"Unable to {rule.action.value} RDS instance {identifier} ({str(ex)})"
            )
            return DispatchResult.client_exception(
                self.name, rule.target, rule.action, ex
            )

        confirmed_identifier = response.get("DBInstance", {}).get(
            "DBInstanceIdentifier", identifier
        )
        logger.info(
            f"Successfully requested {rule.action.value} for instance: {confirmed_identifier}"
        )
        return DispatchResult.success(
            self.name, rule.target, rule.action, action_info=confirmed_identifier
        )
