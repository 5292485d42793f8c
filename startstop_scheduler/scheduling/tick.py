# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterable, Sequence
from typing import Any

from botocore.exceptions import BotoCoreError

from startstop_scheduler.observability.error_codes import ErrorCode
from startstop_scheduler.observability.powertools_logging import powertools_logger
from startstop_scheduler.scheduling.dispatch_result import (
    DispatchAction,
    DispatchResult,
)
from startstop_scheduler.scheduling.rule_kind import RuleKind
from startstop_scheduler.scheduling.rule_source import RuleSourceError, read_rule_table
from startstop_scheduler.scheduling.rules import InvalidRuleError

logger = powertools_logger()


def select_rules(
    kind: RuleKind[Any], rows: Iterable[Sequence[str]], trigger_time: str
) -> tuple[list[Any], list[DispatchResult]]:
    """
    Split the rows of a rule table into the rules due at `trigger_time` and the
    results for rows that could not be parsed. Rows due at other times are dropped.
    """
    due = []
    invalid = []
    for row in rows:
        logger.debug(f"{kind.name} rule row: {list(row)}")
        try:
            rule = kind.parse_row(row)
        except InvalidRuleError as ex:
            invalid.append(
                DispatchResult.error(
                    kind.name, ",".join(row), ErrorCode.INVALID_RULE, str(ex)
                )
            )
            continue
        if rule.trigger_time == trigger_time:
            due.append(rule)
    return due, invalid


def process_rule_kind(kind: RuleKind[Any], trigger_time: str) -> list[DispatchResult]:
    """
    Run one rule kind for one tick: read its table, then authorize and dispatch every
    rule due at `trigger_time`. Failures to reach the provider or read the table skip
    the kind for this tick only.
    """
    try:
        client = kind.create_client()
    except BotoCoreError as ex:
        logger.error(f"Failed to load {kind.service_name} client configuration ({ex})")
        return []

    try:
        rows = read_rule_table(kind.rules_file)
    except RuleSourceError as ex:
        logger.error(f"Skipping {kind.name} rules for this run: {ex}")
        return []

    due, results = select_rules(kind, rows, trigger_time)
    for result in results:
        log_result(result)

    logger.info(f"{len(due)} {kind.name} rule(s) due at {trigger_time}")
    for rule in due:
        if kind.is_authorized(client, rule):
            result = kind.dispatch(client, rule)
        else:
            result = DispatchResult.not_authorized(
                kind.name, rule.target, rule.action, kind.describe_opt_in_tag()
            )
        log_result(result)
        results.append(result)

    return results


def log_result(result: DispatchResult) -> None:
    if result.action_taken == DispatchAction.ERROR:
        logger.error(
            f"{result.rule_kind} rule for {result.target} failed: {result.error_message}",
            extra=result.to_json_log(),
        )
    elif result.action_taken == DispatchAction.SKIPPED:
        logger.info(
            f"{result.rule_kind} rule for {result.target} not authorized: {result.error_message}",
            extra=result.to_json_log(),
        )
    else:
        logger.info(
            f"{result.rule_kind} rule for {result.target}: {result.action_taken.value}",
            extra=result.to_json_log(),
        )
