# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import replace

from pytest import fixture

from tests.test_utils.mock_scheduler_environment import MockSchedulerEnvironment

MOTO_ACCOUNT = "123456789012"


@fixture
def integration_env(
    scheduler_env: MockSchedulerEnvironment, moto_backend: None
) -> MockSchedulerEnvironment:
    return replace(scheduler_env, account_id=MOTO_ACCOUNT)
