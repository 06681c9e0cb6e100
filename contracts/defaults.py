from __future__ import annotations

from pathlib import PurePath

# Symbolic bases understood by the installer.
TOOL_USER_HOME = "GRADLE_USER_HOME"
PROJECT = "PROJECT"

DEFAULT_DISTRIBUTION_PATH = "wrapper/dists"

WRAPPER_PROPERTIES_PATH = PurePath("gradle", "wrapper", "gradle-wrapper.properties")

DISTRIBUTION_URL_PROPERTY = "distributionUrl"
DISTRIBUTION_BASE_PROPERTY = "distributionBase"
DISTRIBUTION_PATH_PROPERTY = "distributionPath"
ZIP_STORE_BASE_PROPERTY = "zipStoreBase"
ZIP_STORE_PATH_PROPERTY = "zipStorePath"

LEGACY_URL_ROOT_PROPERTY = "urlRoot"
LEGACY_VERSION_PROPERTY = "distributionVersion"
LEGACY_NAME_PROPERTY = "distributionName"
LEGACY_CLASSIFIER_PROPERTY = "distributionClassifier"
