"""
Tests for the `modis/display.py` module.
"""

from argparse import Namespace

import pytest
from pytest import MonkeyPatch
from pytest_mock import MockerFixture
from redis.exceptions import ConnectionError as RedisConnectionError

from modis import display
from modis.config import Config, configfile


def test_check_server_access(mocker: MockerFixture):
    """
    Test reporting the server version.

    Args:
        mocker: PyTest mocker fixture.
    """
    redis_cls = mocker.patch("modis.managers.redis_connection.redis.Redis")
    redis_cls.return_value.info.return_value = {"redis_version": "7.2.4"}

    assert display.check_server_access() == {"redis version": "7.2.4"}


def test_check_server_access_error(mocker: MockerFixture):
    """
    Test reporting a server that can't be reached.

    Args:
        mocker: PyTest mocker fixture.
    """
    redis_cls = mocker.patch("modis.managers.redis_connection.redis.Redis")
    error = RedisConnectionError("refused")
    redis_cls.return_value.ping.side_effect = error

    assert display.check_server_access() == {"redis error": error}


def test_display_config_info(mocker: MockerFixture, capsys: pytest.CaptureFixture):
    """
    Test the configuration table.

    Args:
        mocker: PyTest mocker fixture.
        capsys: PyTest capsys fixture.
    """
    mocker.patch("modis.display.check_server_access", return_value={"redis version": "7.2.4"})

    display.display_config_info()

    out = capsys.readouterr().out
    assert "key prefix" in out
    assert "redis://localhost:6379/0" in out
    assert "7.2.4" in out


def test_display_config_info_misconfigured(
    mocker: MockerFixture, monkeypatch: MonkeyPatch, capsys: pytest.CaptureFixture
):
    """
    Test that a bad server name is reported without trying to connect.

    Args:
        mocker: PyTest mocker fixture.
        monkeypatch: PyTest monkeypatch fixture.
        capsys: PyTest capsys fixture.
    """
    monkeypatch.setattr(configfile, "CONFIG", Config({"redis": {"name": "memcached"}, "modis": {"prefix": "modis"}}))
    mock_check = mocker.patch("modis.display.check_server_access")

    display.display_config_info()

    out = capsys.readouterr().out
    assert "Redis server misconfigured." in out
    assert "Exceptions:" in out
    mock_check.assert_not_called()


def test_print_info(mocker: MockerFixture, capsys: pytest.CaptureFixture):
    """
    Test that `print_info` shows the configuration and the package versions.

    Args:
        mocker: PyTest mocker fixture.
        capsys: PyTest capsys fixture.
    """
    mock_config_info = mocker.patch("modis.display.display_config_info")
    mocker.patch("modis.display.get_package_versions", return_value="Python Packages\n")

    display.print_info(Namespace())

    mock_config_info.assert_called_once()
    out = capsys.readouterr().out
    assert "Python Configuration" in out
    assert "Python Packages" in out


def test_display_config_info_offline(mocker: MockerFixture, capsys: pytest.CaptureFixture):
    """
    Test that the server isn't contacted when the check is turned off.

    Args:
        mocker: PyTest mocker fixture.
        capsys: PyTest capsys fixture.
    """
    mock_check = mocker.patch("modis.display.check_server_access")

    display.display_config_info(check_server=False)

    mock_check.assert_not_called()
    assert "Checking server connection" not in capsys.readouterr().out


def test_print_info_offline(mocker: MockerFixture):
    """
    Test that `--offline` is passed through to the configuration report.

    Args:
        mocker: PyTest mocker fixture.
    """
    mock_config_info = mocker.patch("modis.display.display_config_info")
    mocker.patch("modis.display.get_package_versions", return_value="Python Packages\n")

    display.print_info(Namespace(offline=True))

    mock_config_info.assert_called_once_with(check_server=False)
