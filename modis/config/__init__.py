##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
The `config` package loads the `app.yaml` file that tells Modis how to reach
Redis and which prefix to put in front of every key.

Modules:
    config_filepaths.py: Where configuration files are looked for.
    configfile.py: Locating, loading, and defaulting the configuration.
    redis_config.py: Redis connection settings built from the configuration.
"""
from copy import copy
from types import SimpleNamespace
from typing import Dict, List, Optional

from modis.utils import nested_dict_to_namespaces


class Config:  # pylint: disable=R0903
    """
    The loaded Modis configuration. Each top-level section of `app.yaml`
    becomes a `SimpleNamespace`; a section the file leaves out is None.

    Attributes:
        redis (Optional[SimpleNamespace]): Connection settings (`name`, `server`, `port`, `db_num`, ...).
        modis (Optional[SimpleNamespace]): Library settings, currently just `prefix`.
    """

    fields: List[str] = ["redis", "modis"]

    def __init__(self, app_dict: Dict):
        """
        Args:
            app_dict: The parsed configuration, keyed by section name.
        """
        self.redis: Optional[SimpleNamespace] = None
        self.modis: Optional[SimpleNamespace] = None
        self.load_app_into_namespaces(app_dict)

    def __copy__(self) -> "Config":
        # Copy each section so settings changed on the copy don't leak back
        duplicate = Config({})
        for section in self.fields:
            setattr(duplicate, section, copy(getattr(self, section)))
        return duplicate

    def __str__(self) -> str:
        lines = ["config:"]
        for section in self.fields:
            lines.append(f"  {section}:")
            settings = getattr(self, section)
            if settings is None:
                lines.append("    None")
                continue
            lines.extend(f"    {key}: {value!r}" for key, value in vars(settings).items())
        return "\n".join(lines)

    def load_app_into_namespaces(self, app_dict: Dict):
        """
        Turn each known section of `app_dict` into a namespace on this object.
        Sections that are missing are left as they are.

        Args:
            app_dict: The parsed configuration, keyed by section name.
        """
        for section in self.fields:
            if section in app_dict:
                setattr(self, section, nested_dict_to_namespaces(app_dict[section]))
