#!/usr/bin/env python3
"""
Loading of argot settings, as a TomlGuard.

The packaged defaults are always loaded first,
then each given file is merged over them in order.
A pyproject.toml contributes its [tool.argot] table.

Merging is table by table: a file's [settings] table replaces the one below it.
Components read each key with `on_fail`, so keys a file leaves out keep their defaults.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
from importlib.resources import as_file
from typing import TYPE_CHECKING, Any, Final

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import argot.errors as AErr
from argot._interface import (DEFAULT_FILENAMES, PYPROJ_TOML, TOOL_PREFIX,
                              default_config_file)
from argot._structs.logger_spec import LoggerSpec
from argot.constants import LOGGER_ROOT

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def _load(path:pl.Path) -> TomlGuard:
    try:
        return TomlGuard.load(path)
    except (OSError, ValueError) as err:
        raise AErr.InvalidConfigError("Config could not be loaded: %s : %s", path, err) from err

def default_config() -> TomlGuard:
    with as_file(default_config_file) as path:
        return _load(path)

def load_config(*paths:pl.Path|str) -> TomlGuard:
    """ Load the defaults, with each path merged over them in order """
    config = default_config()
    for path in (pl.Path(x) for x in paths):
        if not path.is_file():
            raise AErr.MissingConfigError("No config found at: %s", path)

        logging.debug("Loading config: %s", path)
        loaded = _load(path)
        match path.name:
            case x if x == PYPROJ_TOML and loaded.on_fail(None).tool.argot() is None:
                raise AErr.MissingConfigError("Pyproject has no %s table: %s", TOOL_PREFIX, path)
            case x if x == PYPROJ_TOML:
                chopped = loaded.remove_prefix(TOOL_PREFIX)
            case _:
                chopped = loaded

        config = TomlGuard.merge(chopped, config, shadow=True)

    return config

def find_config(root:None|pl.Path=None) -> TomlGuard:
    """ Load the first of argot.toml or pyproject.toml with a [tool.argot] table, found in root """
    root = root or pl.Path.cwd()
    for name in DEFAULT_FILENAMES:
        target = root / name
        if not target.exists():
            continue
        try:
            return load_config(target)
        except AErr.MissingConfigError:
            logging.debug("No argot config in: %s", target)

    return default_config()

def setup_logging(config:TomlGuard) -> logmod.Logger:
    """ Apply the [logging] table of a config to the argot logger """
    spec = LoggerSpec.build(config.on_fail({}).logging(), name=LOGGER_ROOT)
    return spec.apply()
