# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any, Optional

from boto3 import Session
from botocore.config import Config as _Config

from startstop_scheduler.configuration.scheduler_environment import (
    SchedulerEnvironment,
)


def get_boto_config(
    *, user_agent_extra: str, connect_timeout: int, read_timeout: int
) -> _Config:
    """
    Returns a boto3 config with bounded timeouts and `user_agent_extra`.

    Actions are fire-and-forget, so the SDK is limited to a single attempt per call.
    """
    return _Config(
        retries={"total_max_attempts": 1, "mode": "standard"},
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        user_agent_extra=user_agent_extra,
    )


def create_client(
    service_name: str,
    env: SchedulerEnvironment,
    session: Optional[Session] = None,
) -> Any:
    """simple wrapper for session.client() that includes the config from get_boto_config"""
    aws_session = session if session is not None else Session()
    return aws_session.client(
        service_name=service_name,
        region_name=env.region,
        config=get_boto_config(
            user_agent_extra=env.user_agent_extra,
            connect_timeout=env.client_connect_timeout,
            read_timeout=env.client_read_timeout,
        ),
    )


def partition_for_region(region: str, session: Optional[Session] = None) -> str:
    aws_session = session if session is not None else Session()
    return aws_session.get_partition_for_region(region) or "aws"
