# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskline import configuration
from taskline.model.granularity_type import GranularityType


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = configuration.get_default_configuration()
        if not configuration.APP_CONFIG_PATH.is_file():
            return

        raw_config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if raw_config is None:
            return
        if not isinstance(raw_config, dict):
            raise ValueError(
                f"Invalid configuration file {configuration.APP_CONFIG_PATH}"
            )

        # Keys missing from older config files keep their defaults
        loaded = cast(dict, self._config)
        for key, value in raw_config.items():
            if key in loaded:
                loaded[key] = value

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        default_granularity: Optional[GranularityType] = None,
        left_column_width: Optional[int] = None,
        leading_padding_days: Optional[int] = None,
        trailing_padding_days: Optional[int] = None,
        fallback_window_days: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if default_granularity is not None:
            self.config["default_granularity"] = default_granularity
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width
        if leading_padding_days is not None:
            self.config["leading_padding_days"] = leading_padding_days
        if trailing_padding_days is not None:
            self.config["trailing_padding_days"] = trailing_padding_days
        if fallback_window_days is not None:
            self.config["fallback_window_days"] = fallback_window_days
        if log_level is not None:
            self.config["log_level"] = log_level

    def reset_config(self) -> None:
        self.is_dirty = True
        self._config = configuration.get_default_configuration()

    def reload(self) -> None:
        self._config = None
        self.is_dirty = False


CONFIGURATION_REPO = ConfigurationRepository()
