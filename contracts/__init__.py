from .errors import ConfigurationError, MissingFileError
from .schemas import (
    Configuration,
    DirectUrl,
    DistributionSource,
    Installer,
    Launcher,
    LegacyCoordinates,
    RawProperties,
)

__all__ = [
    "Configuration",
    "ConfigurationError",
    "DirectUrl",
    "DistributionSource",
    "Installer",
    "Launcher",
    "LegacyCoordinates",
    "MissingFileError",
    "RawProperties",
]
