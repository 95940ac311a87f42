##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
This module contains pytest fixtures to be used throughout the entire test suite.
"""
import os
from glob import glob

import pytest
from pytest import MonkeyPatch

from modis.config import Config, configfile
from tests.fixture_types import FixtureModification


#######################################
# Loading in Module Specific Fixtures #
#######################################

_tests_dir = os.path.dirname(os.path.abspath(__file__))
fixture_glob = os.path.join(_tests_dir, "fixtures", "**", "*.py")
pytest_plugins = [
    "tests." + os.path.relpath(fixture_file, _tests_dir).replace(os.sep, ".")[: -len(".py")]
    for fixture_file in glob(fixture_glob, recursive=True)
    if not fixture_file.endswith("__init__.py")
]


#######################################
######### Fixture Definitions #########
#######################################


@pytest.fixture(autouse=True)
def default_config(monkeypatch: MonkeyPatch) -> FixtureModification:
    """
    Run every test against the default configuration so that an `app.yaml`
    on the machine running the tests can't change key prefixes or servers.

    Args:
        monkeypatch: PyTest monkeypatch fixture.
    """
    monkeypatch.setattr(configfile, "CONFIG", Config(configfile.get_default_config()))
