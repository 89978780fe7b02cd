# SPDX-License-Identifier: MIT

from typing import Literal, cast

GranularityType = Literal["days", "weeks", "months"]

GRANULARITIES: tuple[GranularityType, ...] = ("days", "weeks", "months")


def is_granularity(value: str) -> bool:
    return value in GRANULARITIES


def to_granularity(value: str) -> GranularityType:
    if not is_granularity(value):
        raise ValueError(
            f"Granularity must be one of {', '.join(GRANULARITIES)}, got '{value}'"
        )
    return cast(GranularityType, value)
