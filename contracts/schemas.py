from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Protocol, Sequence, Union

from contracts.defaults import (
    DEFAULT_DISTRIBUTION_PATH,
    DISTRIBUTION_BASE_PROPERTY,
    DISTRIBUTION_PATH_PROPERTY,
    DISTRIBUTION_URL_PROPERTY,
    LEGACY_CLASSIFIER_PROPERTY,
    LEGACY_NAME_PROPERTY,
    LEGACY_URL_ROOT_PROPERTY,
    LEGACY_VERSION_PROPERTY,
    TOOL_USER_HOME,
    ZIP_STORE_BASE_PROPERTY,
    ZIP_STORE_PATH_PROPERTY,
)

RawProperties = dict[str, str]


@dataclass(frozen=True)
class Configuration:
    distribution: Optional[str] = None
    distribution_base: str = TOOL_USER_HOME
    distribution_path: str = DEFAULT_DISTRIBUTION_PATH
    zip_base: str = TOOL_USER_HOME
    zip_path: str = DEFAULT_DISTRIBUTION_PATH

    @classmethod
    def defaults(cls) -> "Configuration":
        return cls()

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            DISTRIBUTION_URL_PROPERTY: self.distribution,
            DISTRIBUTION_BASE_PROPERTY: self.distribution_base,
            DISTRIBUTION_PATH_PROPERTY: self.distribution_path,
            ZIP_STORE_BASE_PROPERTY: self.zip_base,
            ZIP_STORE_PATH_PROPERTY: self.zip_path,
        }


@dataclass(frozen=True)
class DirectUrl:
    url: str

    def raw_distribution(self) -> str:
        return self.url


@dataclass(frozen=True)
class LegacyCoordinates:
    """
    Pre-``distributionUrl`` schema: the archive location is spelled out as
    ``<urlRoot>/<distributionName>-<distributionVersion>-<distributionClassifier>.zip``.
    """

    url_root: str
    distribution_version: str
    distribution_name: str
    distribution_classifier: str

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> Optional["LegacyCoordinates"]:
        keys = (
            LEGACY_URL_ROOT_PROPERTY,
            LEGACY_VERSION_PROPERTY,
            LEGACY_NAME_PROPERTY,
            LEGACY_CLASSIFIER_PROPERTY,
        )
        if any(properties.get(k) is None for k in keys):
            return None
        return cls(
            url_root=properties[LEGACY_URL_ROOT_PROPERTY],
            distribution_version=properties[LEGACY_VERSION_PROPERTY],
            distribution_name=properties[LEGACY_NAME_PROPERTY],
            distribution_classifier=properties[LEGACY_CLASSIFIER_PROPERTY],
        )

    def raw_distribution(self) -> str:
        return (
            f"{self.url_root}/{self.distribution_name}-{self.distribution_version}"
            f"-{self.distribution_classifier}.zip"
        )


DistributionSource = Union[DirectUrl, LegacyCoordinates]


class Installer(Protocol):
    def create_dist(
        self,
        distribution: str,
        distribution_base: str,
        distribution_path: str,
        zip_base: str,
        zip_path: str,
    ) -> Path: ...


class Launcher(Protocol):
    def start(self, arguments: Sequence[str], install_dir: Path) -> None: ...
