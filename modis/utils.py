##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Module for project-wide utility functions.
"""
import logging
import re
import sys
from copy import deepcopy
from importlib import metadata
from types import SimpleNamespace
from typing import Dict, List

import yaml
from tabulate import tabulate


LOG = logging.getLogger(__name__)

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def load_yaml(filepath: str) -> Dict:
    """
    Safely read a YAML file and return its contents.

    Args:
        filepath: The file path to the YAML file to be read.

    Returns:
        A dict representing the contents of the YAML file.
    """
    with open(filepath, "r") as _file:
        return yaml.safe_load(_file)


def nested_dict_to_namespaces(dic: Dict) -> SimpleNamespace:
    """
    Convert a nested dictionary into a nested SimpleNamespace structure.

    Args:
        dic: The nested dictionary to be converted.

    Returns:
        A SimpleNamespace object representing the nested structure of the input dictionary.

    Raises:
        TypeError: If the input is not a dictionary.
    """

    def recurse(dic):
        if not isinstance(dic, dict):
            return dic
        for key, val in list(dic.items()):
            dic[key] = recurse(val)
        return SimpleNamespace(**dic)

    if not isinstance(dic, dict):
        raise TypeError(f"{dic} is not a dict")

    new_dic = deepcopy(dic)
    return recurse(new_dic)


def underscore(name: str) -> str:
    """
    Convert a CamelCase name to snake_case.

    Runs of capitals are treated as a single word, so `HTTPRequest` becomes
    `http_request` and `MockModel` becomes `mock_model`.

    Args:
        name: The name to convert.

    Returns:
        The snake_case version of `name`.
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.replace("-", "_").lower()


def qualname_to_namespace(qualname: str) -> str:
    """
    Turn a class's qualified name into a colon-separated namespace.

    Each nesting level becomes one segment, converted to snake_case. Anything
    up to and including the last `<locals>` marker is dropped so that classes
    defined inside functions get the same namespace as they would at module
    level.

    Args:
        qualname: The `__qualname__` of a class (e.g. `Outer.InnerModel`).

    Returns:
        The namespace (e.g. `outer:inner_model`).
    """
    segments = qualname.split(".")
    if "<locals>" in segments:
        last_locals = len(segments) - 1 - segments[::-1].index("<locals>")
        segments = segments[last_locals + 1 :]
    return ":".join(underscore(segment) for segment in segments)


def get_package_versions(package_list: List[str]) -> str:
    """
    Generate a formatted table of installed package versions.

    Args:
        package_list: A list of package names to check for installed versions.

    Returns:
        A formatted string representing a table of package names and their versions.
    """
    table = []
    for package in package_list:
        try:
            table.append([package, metadata.version(package)])
        except metadata.PackageNotFoundError:
            table.append([package, "Not installed"])

    table.insert(0, ["python", sys.version.split()[0]])
    table_str = tabulate(table, headers=["Package", "Version"], tablefmt="simple")
    return f"Python Packages\n\n{table_str}\n"
