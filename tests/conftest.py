# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterator
from os import environ
from pathlib import Path
from unittest.mock import patch

from moto import mock_aws
from pytest import fixture

from tests import DEFAULT_REGION
from tests.test_utils.mock_scheduler_environment import MockSchedulerEnvironment


@fixture(autouse=True)
def aws_credentials() -> Iterator[None]:
    creds = {
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        "AWS_SECURITY_TOKEN": "testing",
        "AWS_SESSION_TOKEN": "testing",
        "AWS_DEFAULT_REGION": DEFAULT_REGION,
    }
    with patch.dict(environ, creds, clear=True):
        yield


@fixture
def moto_backend() -> Iterator[None]:
    with mock_aws():
        yield


@fixture
def database_rules_file(tmp_path: Path) -> Path:
    return tmp_path / "rds.csv"


@fixture
def service_rules_file(tmp_path: Path) -> Path:
    return tmp_path / "ecs.csv"


@fixture
def scheduler_env(
    database_rules_file: Path, service_rules_file: Path
) -> MockSchedulerEnvironment:
    return MockSchedulerEnvironment(
        database_rules_file=database_rules_file,
        service_rules_file=service_rules_file,
    )
