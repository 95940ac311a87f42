##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Manages formatting for displaying information to the console.
"""
import logging
from argparse import Namespace
from typing import Any, Dict

from redis.exceptions import RedisError
from tabulate import tabulate

from modis.utils import get_package_versions


LOG = logging.getLogger("modis")


def check_server_access() -> Dict[str, Any]:
    """
    Ping the configured Redis server and collect its version.

    Returns:
        A dictionary with either the server version or the error raised.
    """
    from modis.managers.redis_connection import RedisConnectionManager  # pylint: disable=C0415

    try:
        with RedisConnectionManager() as client:
            client.ping()
            return {"redis version": client.info().get("redis_version", "N/A")}
    except RedisError as exc:
        return {"redis error": exc}


def display_config_info(check_server: bool = True):
    """
    Prints the configuration Modis is using and whether Redis can be reached.

    Args:
        check_server: Ping the configured Redis server after printing the configuration.
    """
    from modis.config import redis_config  # pylint: disable=C0415
    from modis.config.configfile import default_config_info, get_prefix  # pylint: disable=C0415

    print("Modis Configuration")
    print("-" * 25)
    print("")

    conf = default_config_info()
    conf["key prefix"] = get_prefix()
    excpts = {}
    try:
        conf["redis server"] = redis_config.get_connection_string(include_password=False)
    except ValueError as e:  # pylint: disable=C0103
        conf["redis server"] = "Redis server misconfigured."
        excpts["redis server"] = e

    print(tabulate(conf.items(), tablefmt="presto"))

    if excpts:
        print("\nExceptions:")
        for key, val in excpts.items():
            print(f"{key}: {val}")
        return

    if not check_server:
        return

    print("\nChecking server connection:")
    print("-" * 28)
    print(tabulate(check_server_access().items(), tablefmt="presto"))


def print_info(args: Namespace):
    """
    Provide version information about python and packages along with the
    Modis configuration to facilitate user troubleshooting.

    Args:
        args: Parsed CLI arguments. `offline` skips the server check.
    """
    display_config_info(check_server=not getattr(args, "offline", False))

    print("")
    print("Python Configuration")
    print("-" * 25)
    print("")
    print(get_package_versions(["modis", "redis", "pyyaml", "coloredlogs", "tabulate"]))
