# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

from taskline.model.granularity_type import GranularityType

APP_NAME = "taskline"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    show_header: bool
    default_granularity: GranularityType
    left_column_width: int
    leading_padding_days: int
    trailing_padding_days: int
    fallback_window_days: int
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "default_granularity": "weeks",
        "left_column_width": 40,
        "leading_padding_days": 7,
        "trailing_padding_days": 14,
        "fallback_window_days": 90,
        "log_level": "WARNING",
    }
