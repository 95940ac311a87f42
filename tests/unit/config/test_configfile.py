"""
Tests for the `modis/config/configfile.py` module.
"""

import os

import pytest
from pytest import MonkeyPatch

from modis.config import Config, configfile
from modis.config.configfile import (
    DEFAULT_PREFIX,
    default_config_info,
    find_config_file,
    get_config,
    get_default_config,
    get_prefix,
    initialize_config,
    is_debug,
    load_config,
    load_defaults,
)
from tests.fixture_types import FixtureStr


def write_app_yaml(directory: str, contents: str) -> str:
    """
    Write an `app.yaml` file into `directory`.

    Args:
        directory: Where to write the file.
        contents: The YAML text.

    Returns:
        The path to the file.
    """
    filepath = os.path.join(directory, "app.yaml")
    with open(filepath, "w") as app_file:
        app_file.write(contents)
    return filepath


@pytest.fixture
def empty_modis_home(monkeypatch: MonkeyPatch, tmp_path: str) -> FixtureStr:
    """
    Point `MODIS_HOME` at an empty directory and run from another empty directory.

    Args:
        monkeypatch: PyTest monkeypatch fixture.
        tmp_path: A temporary directory for the test.

    Returns:
        The working directory.
    """
    home = os.path.join(tmp_path, "home")
    workdir = os.path.join(tmp_path, "work")
    os.makedirs(home)
    os.makedirs(workdir)
    monkeypatch.setattr(configfile, "MODIS_HOME", home)
    monkeypatch.chdir(workdir)
    return workdir


class TestFindConfigFile:
    """Tests for the `find_config_file` function."""

    def test_explicit_directory(self, tmp_path: str):
        """
        Test finding `app.yaml` in a given directory.

        Args:
            tmp_path: A temporary directory for the test.
        """
        filepath = write_app_yaml(tmp_path, "modis: {}\n")

        assert find_config_file(str(tmp_path)) == filepath

    def test_explicit_directory_missing(self, tmp_path: str):
        """
        Test a directory without an `app.yaml`.

        Args:
            tmp_path: A temporary directory for the test.
        """
        assert find_config_file(str(tmp_path)) is None

    def test_cwd_first(self, empty_modis_home: FixtureStr):
        """
        Test that the working directory wins over `MODIS_HOME`.

        Args:
            empty_modis_home: The working directory.
        """
        write_app_yaml(configfile.MODIS_HOME, "modis: {}\n")
        local = write_app_yaml(empty_modis_home, "modis: {}\n")

        assert find_config_file() == local

    def test_modis_home(self, empty_modis_home: FixtureStr):
        """
        Test falling back to `MODIS_HOME`.

        Args:
            empty_modis_home: The working directory.
        """
        home_app = write_app_yaml(configfile.MODIS_HOME, "modis: {}\n")

        assert find_config_file() == home_app

    def test_nothing_found(self, empty_modis_home: FixtureStr):  # pylint: disable=unused-argument
        """
        Test that None is returned when there's no configuration anywhere.

        Args:
            empty_modis_home: The working directory.
        """
        assert find_config_file() is None


class TestLoading:
    """Tests for loading and defaulting the configuration."""

    def test_load_config_missing_file(self, tmp_path: str):
        """
        Test that a missing file loads as None.

        Args:
            tmp_path: A temporary directory for the test.
        """
        assert load_config(os.path.join(tmp_path, "app.yaml")) is None

    def test_load_config_empty_file(self, tmp_path: str):
        """
        Test that an empty file loads as an empty dictionary.

        Args:
            tmp_path: A temporary directory for the test.
        """
        assert load_config(write_app_yaml(tmp_path, "")) == {}

    def test_load_defaults_fills_gaps(self):
        """Test that missing settings are filled in and present ones are kept."""
        config = {"redis": {"server": "cache.local"}}

        load_defaults(config)

        assert config["redis"] == {"server": "cache.local", "name": "redis", "port": 6379, "db_num": 0}
        assert config["modis"] == {"prefix": DEFAULT_PREFIX}

    def test_load_defaults_replaces_null_section(self):
        """Test that a section left empty in YAML is treated as missing."""
        config = {"redis": None}

        load_defaults(config)

        assert config["redis"] == get_default_config()["redis"]

    def test_get_config_from_file(self, tmp_path: str):
        """
        Test reading a configuration file and applying defaults.

        Args:
            tmp_path: A temporary directory for the test.
        """
        write_app_yaml(tmp_path, "modis:\n  prefix: app\nredis:\n  port: 6380\n")

        config = get_config(str(tmp_path))

        assert config["modis"]["prefix"] == "app"
        assert config["redis"]["port"] == 6380
        assert config["redis"]["server"] == "localhost"

    def test_get_config_without_file(self, empty_modis_home: FixtureStr):  # pylint: disable=unused-argument
        """
        Test that the defaults are used when there's no file.

        Args:
            empty_modis_home: The working directory.
        """
        assert get_config() == get_default_config()

    def test_initialize_config_bad_yaml(self, monkeypatch: MonkeyPatch, tmp_path: str):
        """
        Test that an unreadable configuration falls back to the defaults.

        Args:
            monkeypatch: PyTest monkeypatch fixture.
            tmp_path: A temporary directory for the test.
        """
        write_app_yaml(tmp_path, "modis:\n  prefix: app\n")
        def unreadable(path):
            raise OSError(f"{path} is unreadable")

        monkeypatch.setattr(configfile, "get_config", unreadable)

        config = initialize_config(str(tmp_path))

        assert config is configfile.CONFIG
        assert config.modis.prefix == DEFAULT_PREFIX

    def test_initialize_config(self, tmp_path: str):
        """
        Test that initializing replaces `CONFIG`.

        Args:
            tmp_path: A temporary directory for the test.
        """
        write_app_yaml(tmp_path, "modis:\n  prefix: app\n")

        config = initialize_config(str(tmp_path))

        assert isinstance(config, Config)
        assert configfile.CONFIG.modis.prefix == "app"


class TestSettings:
    """Tests for reading individual settings."""

    def test_get_prefix_default(self):
        """Test the default key prefix."""
        assert get_prefix() == "modis"

    def test_get_prefix_configured(self, monkeypatch: MonkeyPatch):
        """
        Test a configured key prefix.

        Args:
            monkeypatch: PyTest monkeypatch fixture.
        """
        monkeypatch.setattr(configfile, "CONFIG", Config({"modis": {"prefix": "app"}}))

        assert get_prefix() == "app"

    def test_get_prefix_without_section(self, monkeypatch: MonkeyPatch):
        """
        Test that a configuration without a `modis` section uses the default prefix.

        Args:
            monkeypatch: PyTest monkeypatch fixture.
        """
        monkeypatch.setattr(configfile, "CONFIG", Config({}))

        assert get_prefix() == DEFAULT_PREFIX

    @pytest.mark.parametrize("value, expected", [("1", True), ("0", False)])
    def test_is_debug(self, monkeypatch: MonkeyPatch, value: str, expected: bool):
        """
        Test reading debug mode from the environment.

        Args:
            monkeypatch: PyTest monkeypatch fixture.
            value: The value of `MODIS_DEBUG`.
            expected: Whether debug mode should be on.
        """
        monkeypatch.setenv("MODIS_DEBUG", value)

        assert is_debug() is expected

    def test_is_debug_unset(self, monkeypatch: MonkeyPatch):
        """
        Test that debug mode is off by default.

        Args:
            monkeypatch: PyTest monkeypatch fixture.
        """
        monkeypatch.delenv("MODIS_DEBUG", raising=False)

        assert is_debug() is False

    def test_default_config_info(self, empty_modis_home: FixtureStr):  # pylint: disable=unused-argument
        """
        Test the summary shown by `modis info`.

        Args:
            empty_modis_home: The working directory.
        """
        info = default_config_info()

        assert info["config_file"] is None
        assert info["modis_home"] == configfile.MODIS_HOME
        assert info["modis_home_exists"] is True


class TestMalformedConfig:
    """Tests for configuration files that can't be used."""

    def test_load_config_rejects_non_mapping(self, tmp_path: str):
        """
        Test that a file whose top level isn't a mapping is rejected.

        Args:
            tmp_path: A temporary directory for the test.
        """
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(write_app_yaml(tmp_path, "- redis\n- modis\n"))

    @pytest.mark.parametrize(
        "contents",
        [
            "- redis\n- modis\n",
            "just a string\n",
            "modis: [unclosed\n",
        ],
    )
    def test_initialize_config_falls_back(self, tmp_path: str, contents: str):
        """
        Test that an unusable `app.yaml` leaves Modis on the default configuration.

        Args:
            tmp_path: A temporary directory for the test.
            contents: The text of the bad configuration file.
        """
        write_app_yaml(tmp_path, contents)

        config = initialize_config(str(tmp_path))

        assert config.modis.prefix == DEFAULT_PREFIX
        assert config.redis.server == "localhost"
