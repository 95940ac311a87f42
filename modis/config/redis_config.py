##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
This module builds Redis connection settings (connection URLs and client
keyword arguments) from the `redis` section of the application configuration.
"""
import logging
import os
from typing import Any, Dict, Optional
from urllib.parse import quote

from modis.config import configfile
from modis.config.config_filepaths import MODIS_HOME


LOG = logging.getLogger(__name__)

REDIS_NAMES = ["redis", "rediss"]


def get_backend_password(password_file: str) -> str:
    """
    Retrieves the Redis password from a file or returns the provided value.

    The file is looked for in the Modis home directory (`~/.modis`) first,
    then at the given path. If neither exists, `password_file` is treated as
    the password itself.

    Args:
        password_file: The file path or value for the password.

    Returns:
        The Redis password.
    """
    mod_pass = os.path.join(MODIS_HOME, password_file)
    expanded = os.path.expanduser(password_file)

    password_filepath = ""
    if os.path.exists(mod_pass):
        password_filepath = mod_pass
    elif os.path.exists(expanded):
        password_filepath = expanded

    if not password_filepath:
        LOG.debug("Password resolution: using direct value.")
        return password_file.strip()

    LOG.debug("Password resolution: using file.")
    with open(password_filepath, "r") as f:  # pylint: disable=C0103
        return f.readline().strip()


def _get_setting(name: str, default: Any = None) -> Any:
    """
    Read a setting from the `redis` section of the configuration.

    Args:
        name: The name of the setting.
        default: The value to return when the setting is missing.

    Returns:
        The configured value or `default`.
    """
    section = getattr(configfile.CONFIG, "redis", None)
    value = getattr(section, name, None)
    return default if value is None else value


def get_password() -> Optional[str]:
    """
    Get the configured Redis password, resolving password files.

    Returns:
        The password or None if no password is configured.
    """
    password = _get_setting("password")
    if password is None:
        return None
    try:
        return get_backend_password(str(password))
    except IOError:
        return str(password)


def get_connection_string(include_password: bool = True) -> str:
    """
    Constructs a redis:// or rediss:// connection URL from the configuration.

    Args:
        include_password: Whether to include the password in the URL. If
            False, the password is masked.

    Returns:
        The connection URL.

    Raises:
        ValueError: If the configured server name is not a Redis variant.
    """
    name = _get_setting("name", "redis")
    if name not in REDIS_NAMES:
        raise ValueError(f"Error: '{name}' is not a supported Redis server name. Use one of {REDIS_NAMES}.")

    server = _get_setting("server", "localhost")
    port = _get_setting("port", 6379)
    db_num = _get_setting("db_num", 0)
    username = _get_setting("username", "")

    password = get_password()
    credentials = ""
    if password is not None:
        shown = quote(password, safe="") if include_password else "******"
        credentials = f"{username}:{shown}@"
    elif username:
        credentials = f"{username}@"

    return f"{name}://{credentials}{server}:{port}/{db_num}"


def get_client_kwargs() -> Dict[str, Any]:
    """
    Build the keyword arguments used to construct a `redis.Redis` client.

    Returns:
        A dictionary of client settings.
    """
    redis_config = {
        "host": _get_setting("server", "localhost"),
        "port": int(_get_setting("port", 6379)),
        "db": int(_get_setting("db_num", 0)),
        "username": _get_setting("username"),
        "password": get_password(),
        "decode_responses": True,
    }

    if _get_setting("name", "redis") == "rediss":
        redis_config.update({"ssl": True, "ssl_cert_reqs": _get_setting("cert_reqs", "required")})

    return redis_config
