# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import TypedDict

import platformdirs

APP_NAME = "stagetimeline"

CONFIG_PATH_ENV = "STAGETIMELINE_CONFIG"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    show_header: bool
    use_demo_when_empty: bool
    default_sort: str
    log_level: str


DEFAULT_CONFIGURATION: Configuration = {
    "show_header": True,
    "use_demo_when_empty": True,
    "default_sort": "recent",
    "log_level": "WARNING",
}


def app_config_path() -> Path:
    """The config file in use; the environment variable wins over the default."""
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override)
    return APP_CONFIG_PATH
