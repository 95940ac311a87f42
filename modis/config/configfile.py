##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
This module provides functionality for locating and loading the Modis
application configuration file, and for filling in default settings.

It houses the `CONFIG` object that's used throughout Modis' codebase.
"""
import logging
import os
from typing import Dict, Optional

import yaml

from modis.config import Config
from modis.config.config_filepaths import APP_FILENAME, MODIS_HOME
from modis.utils import load_yaml


LOG: logging.Logger = logging.getLogger(__name__)

CONFIG: Optional[Config] = None

DEFAULT_PREFIX: str = "modis"


def load_config(filepath: str) -> Optional[Dict]:
    """
    Reads a Modis YAML configuration file and returns its contents as a dictionary.

    Args:
        filepath: The path to the YAML configuration file.

    Returns:
        A dictionary containing the contents of the YAML file or None if file doesn't exist.

    Raises:
        ValueError: If the top level of the file isn't a mapping.
    """
    if not os.path.isfile(filepath):
        LOG.info(f"No app config file at {filepath}")
        return None
    LOG.info(f"Reading app config from file {filepath}")
    loaded = load_yaml(filepath)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{filepath} must contain a mapping of sections, not {type(loaded).__name__}.")
    return loaded


def find_config_file(path: str = None) -> Optional[str]:
    """
    Locate the Modis application configuration file (`app.yaml`).

    If no directory is provided, the current working directory is checked
    first, then the `MODIS_HOME` directory. If a `path` is explicitly
    provided, only that directory is checked.

    Args:
        path: A specific directory to look for `app.yaml`.

    Returns:
        The full path to the `app.yaml` file if found, otherwise `None`.
    """
    if path is None:
        local_app = os.path.join(os.getcwd(), APP_FILENAME)
        if os.path.isfile(local_app):
            return local_app

        path_app = os.path.join(MODIS_HOME, APP_FILENAME)
        if os.path.isfile(path_app):
            return path_app

        return None

    app_path = os.path.join(path, APP_FILENAME)
    if os.path.exists(app_path):
        return app_path

    return None


def get_default_config() -> Dict:
    """
    Creates the configuration used when no `app.yaml` can be found: a
    local, unauthenticated Redis server and the standard key prefix.

    Returns:
        A configuration dictionary with essential default values.
    """
    return {
        "redis": {
            "name": "redis",
            "server": "localhost",
            "port": 6379,
            "db_num": 0,
        },
        "modis": {"prefix": DEFAULT_PREFIX},
    }


def load_defaults(config: Dict):
    """
    Fill in any settings the configuration file left out.

    Args:
        config: The configuration dictionary to be updated with default values.
    """
    defaults = get_default_config()
    for section, values in defaults.items():
        if not isinstance(config.get(section), dict):
            config[section] = {}
        for key, val in values.items():
            config[section].setdefault(key, val)


def get_config(path: Optional[str] = None) -> Dict:
    """
    Loads a Modis configuration file and returns a dictionary containing the configuration data.

    Args:
        path: The directory path to search for the configuration file.
            If `None`, default search paths are used.

    Returns:
        A dictionary containing all the configuration data with defaults applied.
    """
    filepath: Optional[str] = find_config_file(path)
    if filepath is None:
        LOG.debug("No Modis config file found, using the default configuration.")
        config: Dict = {}
    else:
        config = load_config(filepath)
    load_defaults(config)
    return config


def is_debug() -> bool:
    """
    Determines whether the application is running in debug mode.

    Returns:
        True if `MODIS_DEBUG` is set to `1` in the environment, otherwise False.
    """
    if "MODIS_DEBUG" in os.environ and int(os.environ["MODIS_DEBUG"]) == 1:
        return True
    return False


def default_config_info() -> Dict:
    """
    Returns information about Modis' default configurations.

    Returns:
        A dictionary containing the location of the configuration file, the
            debug status, the Modis home directory, and whether it exists.
    """
    return {
        "config_file": find_config_file(),
        "is_debug": is_debug(),
        "modis_home": MODIS_HOME,
        "modis_home_exists": os.path.exists(MODIS_HOME),
    }


def get_prefix() -> str:
    """
    Get the library-wide prefix that starts every key Modis writes.

    Returns:
        The configured prefix, `modis` unless `app.yaml` says otherwise.
    """
    return getattr(getattr(CONFIG, "modis", None), "prefix", None) or DEFAULT_PREFIX


def initialize_config(path: Optional[str] = None) -> Config:
    """
    Initializes the Modis configuration and stores it in `CONFIG`.

    Args:
        path: Directory to look for the configuration file in.

    Returns:
        The initialized configuration object.
    """
    global CONFIG  # pylint: disable=global-statement

    try:
        CONFIG = Config(get_config(path))
    except (OSError, ValueError, yaml.YAMLError) as exc:
        LOG.warning(f"Error loading configuration: {exc}. Falling back to default configuration.")
        CONFIG = Config(get_default_config())
    return CONFIG


initialize_config()
