# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from os import environ
from unittest.mock import MagicMock, patch

import pytest
from aws_lambda_powertools.utilities.typing import LambdaContext

from startstop_scheduler import main
from startstop_scheduler.main import lambda_handler
from startstop_scheduler.scheduling.dispatch_result import DispatchResult
from startstop_scheduler.scheduling.rules import RuleAction


def test_lambda_handler_runs_a_single_tick() -> None:
    result = DispatchResult.success("database", "mydb-prod", RuleAction.STOP)

    with patch.object(main, "Scheduler") as scheduler:
        scheduler.return_value.run_once.return_value = [result]
        assert lambda_handler({}, LambdaContext()) == [result.to_json_log()]

    scheduler.return_value.run_once.assert_called_once()
    scheduler.return_value.run_forever.assert_not_called()


def test_main_runs_forever() -> None:
    with patch.object(main, "Scheduler") as scheduler:
        main.main()

    scheduler.return_value.run_forever.assert_called_once()


def test_main_exits_on_invalid_timezone() -> None:
    with patch.dict(environ, {"SCHEDULER_TIMEZONE": "Mars/Olympus_Mons"}), patch.object(
        main, "Scheduler"
    ) as scheduler:
        with pytest.raises(SystemExit) as exit_info:
            main.main()

    assert exit_info.value.code == 1
    scheduler.assert_not_called()


def test_lambda_handler_propagates_configuration_errors() -> None:
    scheduler = MagicMock()
    with patch.dict(environ, {"TRIGGER_TIMES": "noon"}), patch.object(
        main, "Scheduler", scheduler
    ):
        with pytest.raises(main.AppEnvError):
            lambda_handler({}, LambdaContext())

    scheduler.assert_not_called()
