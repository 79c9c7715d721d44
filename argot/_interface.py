#!/usr/bin/env python3
"""


"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
from importlib.resources import files
from typing import Final

# ##-- end stdlib imports

# Vars:
__version__ : Final[str] = "0.1.0"

# -- data
data_path                 = files("argot") / "__data"
default_config_file       = data_path / "default_config.toml"

TOOL_PREFIX        : Final[str]              = "tool.argot"
ARGOT_TOML         : Final[str]              = "argot.toml"
PYPROJ_TOML        : Final[str]              = "pyproject.toml"
DEFAULT_FILENAMES  : Final[tuple[str, ...]]  = (ARGOT_TOML, PYPROJ_TOML)
scenarios_file            = data_path / "scenarios.toml"
