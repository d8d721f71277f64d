# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from stagetimeline import configuration
from stagetimeline.logger import get_logger

logger = get_logger(__name__)


class ConfigurationRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._config: Optional[configuration.Configuration] = None

    @property
    def path(self) -> Path:
        if self._path is None:
            return configuration.app_config_path()
        return self._path

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        raw: Any = None
        if self.path.is_file():
            try:
                raw = load(self.path.read_text(), Loader=Loader)
            except YAMLError as error:
                logger.warning("Ignoring unreadable config %s: %s", self.path, error)
        else:
            logger.debug("No config at %s, using defaults", self.path)

        config = deepcopy(configuration.DEFAULT_CONFIGURATION)
        if isinstance(raw, dict):
            # Missing or mistyped keys keep their defaults
            for key, default in configuration.DEFAULT_CONFIGURATION.items():
                if key in raw and isinstance(raw[key], type(default)):
                    config[key] = raw[key]  # type: ignore[literal-required]
        self._config = cast(configuration.Configuration, config)

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def reload(self) -> None:
        self._config = None


CONFIGURATION_REPO = ConfigurationRepository()
