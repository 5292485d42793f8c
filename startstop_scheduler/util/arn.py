# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from functools import cached_property


class ARN(str):

    @classmethod
    def build(
        cls, *, partition: str, service: str, region: str, account: str, resource: str
    ) -> "ARN":
        return cls(":".join(["arn", partition, service, region, account, resource]))

    @classmethod
    def for_rds_instance(
        cls, *, partition: str, region: str, account: str, instance_identifier: str
    ) -> "ARN":
        """the account segment may be left empty, in which case the caller's account is implied"""
        return cls.build(
            partition=partition,
            service="rds",
            region=region,
            account=account,
            resource=f"db:{instance_identifier}",
        )

    @cached_property
    def arn_parts(self) -> list[str]:
        parts = self.split(":")
        if len(parts) < 6 or parts[0] != "arn":
            raise ValueError(f"Invalid ARN format: {self}")
        # Rejoin resource part if it contains additional colons
        if len(parts) > 6:
            resource = ":".join(parts[5:])
            parts = parts[:5] + [resource]
        return parts

    @property
    def aws_partition(self) -> str:
        return self.arn_parts[1]

    @property
    def service(self) -> str:
        return self.arn_parts[2]

    @property
    def region(self) -> str:
        return self.arn_parts[3]

    @property
    def account(self) -> str:
        return self.arn_parts[4]

    @property
    def resource(self) -> str:
        return self.arn_parts[5]

    @property
    def resource_type(self) -> str:
        """Extract resource type from resource part (e.g., 'db' from 'db:my-database')"""
        if "/" in self.resource:
            return self.resource.split("/")[0].split(":")[0]
        elif ":" in self.resource:
            return self.resource.split(":")[0]
        return ""

    @property
    def resource_id(self) -> str:
        """Extract resource ID from resource part (e.g., 'my-database' from 'db:my-database')"""
        if "/" in self.resource:
            return self.resource.split("/", 1)[1]
        elif ":" in self.resource:
            return self.resource.split(":", 1)[1]
        return self.resource
