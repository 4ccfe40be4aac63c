# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskline import configuration


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
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = configuration.default_configuration()
            return

        raw_config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise ValueError(
                f"Configuration file {configuration.APP_CONFIG_PATH} is not a mapping"
            )

        # Back-fill settings added after the file was written
        config = cast(dict[str, Any], configuration.default_configuration())
        config.update(raw_config)
        self._config = cast(configuration.Configuration, config)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        default_granularity: Optional[configuration.GranularityType] = None,
        default_zoom: Optional[int] = None,
        week_starts_on: Optional[configuration.WeekStart] = None,
        padding_days: Optional[int] = None,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if default_granularity is not None:
            self.config["default_granularity"] = default_granularity
        if default_zoom is not None:
            self.config["default_zoom"] = default_zoom
        if week_starts_on is not None:
            self.config["week_starts_on"] = week_starts_on
        if padding_days is not None:
            self.config["padding_days"] = padding_days
        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level.upper()

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False


CONFIGURATION_REPO = ConfigurationRepository()
