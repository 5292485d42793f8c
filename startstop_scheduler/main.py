# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import sys
from collections.abc import Mapping
from time import time
from typing import TYPE_CHECKING, Any

from startstop_scheduler import __version__
from startstop_scheduler.configuration.scheduler_environment import (
    SchedulerEnvironment,
)
from startstop_scheduler.observability.powertools_logging import powertools_logger
from startstop_scheduler.scheduler import Scheduler
from startstop_scheduler.util.app_env_utils import AppEnvError

if TYPE_CHECKING:
    from aws_lambda_powertools.utilities.typing import LambdaContext
else:
    LambdaContext = object

logger = powertools_logger()


def lambda_handler(event: Mapping[str, Any], context: LambdaContext) -> Any:
    """Runs a single tick, for deployments where an external schedule replaces the loop"""
    env = SchedulerEnvironment.from_env()
    logger.info(f"StartStopScheduler, version {__version__}")

    start = time()
    results = Scheduler(env).run_once()
    execution_time = round(float((time() - start)), 3)
    logger.info(f"Handling took {execution_time} seconds")
    return [result.to_json_log() for result in results]


def main() -> None:
    try:
        env = SchedulerEnvironment.from_env()
    except AppEnvError as e:
        logger.error(f"Invalid scheduler configuration: {e}")
        sys.exit(1)

    logger.info(
        f"StartStopScheduler, version {__version__}, trigger times "
        f"{sorted(env.trigger_times)} ({env.timezone.key})"
    )
    Scheduler(env).run_forever()


if __name__ == "__main__":
    main()
