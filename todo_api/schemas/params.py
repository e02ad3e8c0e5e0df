"""Path and query parameter types shared by the routers."""

import re
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator

# SQLite INTEGER (and BIGINT elsewhere) is a signed 64-bit value
SQL_INT_MAX = 2**63 - 1
SQL_INT_MIN = -(2**63)

_BASE10 = re.compile(r"-?[0-9]+")


def _parse_base10(value):
    if isinstance(value, str):
        if not _BASE10.fullmatch(value):
            raise ValueError("must be a base-10 integer")
        return int(value)
    return value


def _in_storage_range(value: int) -> int:
    if not SQL_INT_MIN <= value <= SQL_INT_MAX:
        raise ValueError("integer out of range")
    return value


def _parse_true_false(value):
    if isinstance(value, str):
        if value == "true":
            return True
        if value == "false":
            return False
        raise ValueError("must be 'true' or 'false'")
    return value


RecordId = Annotated[int, BeforeValidator(_parse_base10), AfterValidator(_in_storage_range)]
QueryFlag = Annotated[bool, BeforeValidator(_parse_true_false)]
