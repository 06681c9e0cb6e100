from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from contracts.defaults import (
    DEFAULT_DISTRIBUTION_PATH,
    DISTRIBUTION_BASE_PROPERTY,
    DISTRIBUTION_PATH_PROPERTY,
    DISTRIBUTION_URL_PROPERTY,
    TOOL_USER_HOME,
    ZIP_STORE_BASE_PROPERTY,
    ZIP_STORE_PATH_PROPERTY,
)
from contracts.errors import ConfigurationError, PathLike
from contracts.schemas import Configuration, DirectUrl, DistributionSource, LegacyCoordinates
from distribution_uri import resolve_distribution_uri

logger = logging.getLogger(__name__)


def read_distribution_source(properties: Mapping[str, str], properties_file: PathLike) -> DistributionSource:
    url = properties.get(DISTRIBUTION_URL_PROPERTY)
    if url:
        return DirectUrl(url)

    legacy = LegacyCoordinates.from_properties(properties)
    if legacy is not None:
        logger.warning(
            "Wrapper properties file '%s' contains deprecated entries 'urlRoot', 'distributionName', "
            "'distributionVersion' and 'distributionClassifier'. These will be removed soon. "
            "Please use '%s' instead.",
            os.fspath(properties_file),
            DISTRIBUTION_URL_PROPERTY,
        )
        return legacy

    raise ConfigurationError(
        f"No value with key '{DISTRIBUTION_URL_PROPERTY}' specified in wrapper properties file "
        f"'{os.fspath(properties_file)}'.",
        properties_file,
    )


def resolve_configuration(properties: Mapping[str, str], properties_file: PathLike) -> Configuration:
    source = read_distribution_source(properties, properties_file)
    anchor = Path(os.fspath(properties_file)).parent
    distribution = resolve_distribution_uri(source.raw_distribution(), anchor)
    logger.debug("resolved distribution %s from %s", distribution, os.fspath(properties_file))

    # Each location defaults on its own, whichever format named the distribution.
    return Configuration(
        distribution=distribution,
        distribution_base=properties.get(DISTRIBUTION_BASE_PROPERTY, TOOL_USER_HOME),
        distribution_path=properties.get(DISTRIBUTION_PATH_PROPERTY, DEFAULT_DISTRIBUTION_PATH),
        zip_base=properties.get(ZIP_STORE_BASE_PROPERTY, TOOL_USER_HOME),
        zip_path=properties.get(ZIP_STORE_PATH_PROPERTY, DEFAULT_DISTRIBUTION_PATH),
    )
