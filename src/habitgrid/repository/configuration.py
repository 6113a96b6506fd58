# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from habitgrid import configuration


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
        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if loaded is None:
            loaded = {}

        # Back-fill settings added after the config file was written
        for key, default in configuration.DEFAULT_CONFIGURATION.items():
            if key not in loaded:
                loaded[key] = deepcopy(default)
                self.is_dirty = True

        self._config = cast(configuration.Configuration, loaded)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(self, **settings: Any) -> None:
        """Update known settings; unknown keys raise KeyError."""
        for key in settings:
            if key not in configuration.DEFAULT_CONFIGURATION:
                raise KeyError(key)

        self.is_dirty = True
        for key, value in settings.items():
            self.config[key] = value  # type: ignore[literal-required]


CONFIGURATION_REPO = ConfigurationRepository()
