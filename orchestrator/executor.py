from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Sequence

from contracts.defaults import WRAPPER_PROPERTIES_PATH
from contracts.errors import ConfigurationError, MissingFileError, PathLike
from contracts.schemas import Configuration, Installer, Launcher
from wrapper_config import resolve_configuration
from wrapper_properties import load_properties

logger = logging.getLogger(__name__)


def _load_configuration(properties_file: Path) -> Configuration:
    try:
        properties = load_properties(properties_file)
        return resolve_configuration(properties, properties_file)
    except Exception as exc:
        raise ConfigurationError(
            f"Could not load wrapper properties from '{properties_file}'.", properties_file
        ) from exc


class WrapperExecutor:
    """
    Holds the resolved wrapper configuration and runs install-then-launch.

    Build instances with ``for_wrapper_properties_file`` (the file must load)
    or ``for_project_directory`` (a missing conventional file means defaults).
    """

    def __init__(self, properties_file: Path, configuration: Configuration, require_file: bool) -> None:
        self._properties_file = properties_file
        self._configuration = configuration
        self._require_file = require_file

    @classmethod
    def for_wrapper_properties_file(cls, properties_file: PathLike) -> "WrapperExecutor":
        path = Path(os.fspath(properties_file))
        return cls(path, _load_configuration(path), require_file=True)

    @classmethod
    def for_project_directory(cls, project_dir: PathLike) -> "WrapperExecutor":
        path = Path(os.fspath(project_dir)) / WRAPPER_PROPERTIES_PATH
        if path.exists():
            configuration = _load_configuration(path)
        else:
            logger.debug("no wrapper properties at %s, using defaults", path)
            configuration = Configuration.defaults()
        return cls(path, configuration, require_file=False)

    @property
    def properties_file(self) -> Path:
        return self._properties_file

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def distribution(self) -> Optional[str]:
        return self._configuration.distribution

    def execute(self, arguments: Sequence[str], installer: Installer, launcher: Launcher) -> None:
        if self._require_file and not self._properties_file.exists():
            raise MissingFileError(self._properties_file)

        config = self._configuration
        # Only a project directory without a properties file leaves this unset.
        if config.distribution is None:
            raise MissingFileError(self._properties_file)

        logger.debug("installing distribution %s", config.distribution)
        install_dir = installer.create_dist(
            config.distribution,
            config.distribution_base,
            config.distribution_path,
            config.zip_base,
            config.zip_path,
        )
        logger.debug("starting %s with %d argument(s)", install_dir, len(arguments))
        launcher.start(arguments, install_dir)
