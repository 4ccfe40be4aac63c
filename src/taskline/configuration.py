# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from taskline.model.calendar_mode import WeekStart
from taskline.model.granularity_type import GranularityType

APP_NAME = "taskline"
DATA_PATH_ENV_VAR = "TASKLINE_DATA_PATH"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_PROJECTS_PATH: Path = DATA_PATH / "projects.yaml"
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"


class Configuration(TypedDict):
    data_path: Optional[str]
    default_granularity: GranularityType
    default_zoom: int
    week_starts_on: WeekStart
    padding_days: int
    show_header: bool
    log_level: str


def default_configuration() -> Configuration:
    return {
        "data_path": None,
        "default_granularity": "week",
        "default_zoom": 100,
        "week_starts_on": "sunday",
        "padding_days": 7,
        "show_header": True,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_PROJECTS_PATH, DATA_TASKS_PATH

    DATA_PATH = data_path
    DATA_PROJECTS_PATH = DATA_PATH / "projects.yaml"
    DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"


def load_data_path_configuration() -> None:
    """
    Resolve the snapshot directory and set the DATA_* paths.

    The TASKLINE_DATA_PATH environment variable wins over the data_path
    setting of the config file. Must run before the snapshot repository
    loads anything.
    """
    env_data_path = os.environ.get(DATA_PATH_ENV_VAR)
    if env_data_path:
        set_data_path(Path(env_data_path))
        return

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
