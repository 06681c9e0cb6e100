from __future__ import annotations

import logging
import unittest
from pathlib import Path

from contracts.defaults import DEFAULT_DISTRIBUTION_PATH, TOOL_USER_HOME
from contracts.errors import ConfigurationError
from contracts.schemas import Configuration, DirectUrl, LegacyCoordinates
from distribution_uri import scheme_specific_part
from wrapper_config import read_distribution_source, resolve_configuration

PROPS_FILE = Path("/work/project/gradle/wrapper/gradle-wrapper.properties")

LEGACY = {
    "urlRoot": "http://gradle.artifactoryonline.com/gradle/distributions",
    "distributionVersion": "1.0-milestone-3",
    "distributionName": "gradle",
    "distributionClassifier": "bin",
}


class TestConfigurationResolver(unittest.TestCase):
    def test_distribution_url_only_uses_defaults(self) -> None:
        config = resolve_configuration({"distributionUrl": "http://server/test/gradle.zip"}, PROPS_FILE)
        self.assertEqual(
            config,
            Configuration(
                distribution="http://server/test/gradle.zip",
                distribution_base=TOOL_USER_HOME,
                distribution_path=DEFAULT_DISTRIBUTION_PATH,
                zip_base=TOOL_USER_HOME,
                zip_path=DEFAULT_DISTRIBUTION_PATH,
            ),
        )

    def test_explicit_locations_are_used(self) -> None:
        config = resolve_configuration(
            {
                "distributionUrl": "http://server/test/gradle.zip",
                "distributionBase": "testDistBase",
                "distributionPath": "testDistPath",
                "zipStoreBase": "testZipBase",
                "zipStorePath": "testZipPath",
                "unrelated": "ignored",
            },
            PROPS_FILE,
        )
        self.assertEqual(config.distribution_base, "testDistBase")
        self.assertEqual(config.distribution_path, "testDistPath")
        self.assertEqual(config.zip_base, "testZipBase")
        self.assertEqual(config.zip_path, "testZipPath")

    def test_locations_default_independently(self) -> None:
        config = resolve_configuration(
            {"distributionUrl": "http://server/test/gradle.zip", "zipStorePath": "custom/zips"},
            PROPS_FILE,
        )
        self.assertEqual(config.distribution_base, TOOL_USER_HOME)
        self.assertEqual(config.distribution_path, DEFAULT_DISTRIBUTION_PATH)
        self.assertEqual(config.zip_base, TOOL_USER_HOME)
        self.assertEqual(config.zip_path, "custom/zips")

    def test_legacy_format_builds_distribution_url(self) -> None:
        props = dict(LEGACY, distributionBase="oldDistBase", zipStorePath="oldZipPath")
        with self.assertLogs("wrapper_config.resolver", level=logging.WARNING) as logs:
            config = resolve_configuration(props, PROPS_FILE)

        self.assertEqual(
            config.distribution,
            "http://gradle.artifactoryonline.com/gradle/distributions/gradle-1.0-milestone-3-bin.zip",
        )
        self.assertEqual(config.distribution_base, "oldDistBase")
        self.assertEqual(config.distribution_path, DEFAULT_DISTRIBUTION_PATH)
        self.assertEqual(config.zip_base, TOOL_USER_HOME)
        self.assertEqual(config.zip_path, "oldZipPath")
        self.assertIn("deprecated", logs.output[0])

    def test_distribution_url_wins_over_legacy(self) -> None:
        props = dict(LEGACY, distributionUrl="http://server/new.zip")
        self.assertEqual(read_distribution_source(props, PROPS_FILE), DirectUrl("http://server/new.zip"))

    def test_empty_distribution_url_falls_back_to_legacy(self) -> None:
        props = dict(LEGACY, distributionUrl="")
        source = read_distribution_source(props, PROPS_FILE)
        self.assertIsInstance(source, LegacyCoordinates)

    def test_incomplete_legacy_keys_fail(self) -> None:
        props = dict(LEGACY)
        del props["distributionClassifier"]
        with self.assertRaises(ConfigurationError) as ctx:
            resolve_configuration(props, PROPS_FILE)
        self.assertEqual(
            str(ctx.exception),
            f"No value with key 'distributionUrl' specified in wrapper properties file '{PROPS_FILE}'.",
        )
        self.assertEqual(ctx.exception.path, str(PROPS_FILE))

    def test_relative_url_is_anchored_at_properties_directory(self) -> None:
        config = resolve_configuration({"distributionUrl": "dists/tool.zip"}, PROPS_FILE)
        self.assertEqual(config.distribution, (PROPS_FILE.parent / "dists/tool.zip").as_uri())

    def test_rooted_url_without_scheme_is_anchored_at_properties_directory(self) -> None:
        config = resolve_configuration({"distributionUrl": "/dists/tool.zip"}, PROPS_FILE)
        self.assertEqual(config.distribution, (PROPS_FILE.parent / "dists/tool.zip").as_uri())

    def test_relative_url_with_space_ends_with_raw_value(self) -> None:
        raw = "my dists/tool-1.0 bin.zip"
        config = resolve_configuration({"distributionUrl": raw}, PROPS_FILE)
        self.assertTrue(scheme_specific_part(config.distribution).endswith(raw))


def test_configuration_defaults_and_to_dict() -> None:
    config = Configuration.defaults()
    assert config.distribution is None
    assert config.to_dict() == {
        "distributionUrl": None,
        "distributionBase": TOOL_USER_HOME,
        "distributionPath": DEFAULT_DISTRIBUTION_PATH,
        "zipStoreBase": TOOL_USER_HOME,
        "zipStorePath": DEFAULT_DISTRIBUTION_PATH,
    }


if __name__ == "__main__":
    unittest.main()
