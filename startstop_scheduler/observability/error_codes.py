# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from enum import Enum


class ErrorCode(str, Enum):
    NOT_AUTHORIZED = "NotAuthorized"
    INVALID_RULE = "InvalidRule"
    INVALID_DESIRED_COUNT = "InvalidDesiredCount"
    START_FAILED = "StartFailed"
    STOP_FAILED = "StopFailed"
