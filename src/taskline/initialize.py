# SPDX-License-Identifier: MIT

from typing import Any

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from taskline import configuration
from taskline.logger import configure_logging
from taskline.repository.configuration import CONFIGURATION_REPO
from taskline.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])
    view_state.set_week_starts_on(config["week_starts_on"])
    configure_logging(config["log_level"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = dict(configuration.default_configuration())
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_PROJECTS_PATH.is_file():
        configuration.DATA_PROJECTS_PATH.touch()
        projects: dict[str, Any] = {"projects": []}
        configuration.DATA_PROJECTS_PATH.write_text(dump(projects, Dumper=Dumper))
    if not configuration.DATA_TASKS_PATH.is_file():
        configuration.DATA_TASKS_PATH.touch()
        tasks: dict[str, Any] = {"tasks": []}
        configuration.DATA_TASKS_PATH.write_text(dump(tasks, Dumper=Dumper))
