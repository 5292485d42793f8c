# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import csv
from os import PathLike
from typing import Union


class RuleSourceError(Exception):
    pass


def read_rule_table(path: Union[str, "PathLike[str]"]) -> list[list[str]]:
    """
    Read a header-less comma separated rule table into its rows.

    Every row is returned as a list of whitespace-stripped string fields, blank lines
    are dropped. The meaning of each column is left to the rule kind that consumes it.
    """
    try:
        with open(path, newline="", encoding="utf-8") as file:
            return [
                [field.strip() for field in row]
                for row in csv.reader(file, strict=True)
                if any(field.strip() for field in row)
            ]
    except (OSError, UnicodeDecodeError, csv.Error) as err:
        raise RuleSourceError(f"Unable to read rule table {path}: {err}") from err
