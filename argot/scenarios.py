#!/usr/bin/env python3
"""
Worked schemas for a handful of toy commands:

  add 1 2
  sub --left 10.5 --right 5.0
  sqrt 16
  calc add
  date 2024-01-15

Dates aren't assumed to be built in here: the date command's argument
is the custom `iso_date` type, registered before the schemas load.

`parse(line)` gives the bound values as a plain dict,
or raises the ParseError describing why the line is rejected.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import datetime
import functools as ftz
import logging as logmod
from typing import Any, Final

# ##-- end stdlib imports

# ##-- 1st party imports
from argot._interface import scenarios_file
from argot.control.main import CommandLine
from argot.control.registry import SchemaRegistry
from argot.structs import CustomType, DateType

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

ISO_DATE : Final[CustomType] = CustomType("iso_date", DateType().convert, DateType.expected, pytype=datetime.date)

def build_registry() -> SchemaRegistry:
    """ A fresh, unfrozen, registry of the worked schemas """
    registry = SchemaRegistry()
    registry.register_type(ISO_DATE)
    registry.loads(scenarios_file.read_text())
    return registry

@ftz.cache
def command_line() -> CommandLine:
    return CommandLine(build_registry())

def parse(line:str) -> dict[str, Any]:
    return command_line().parse(line).to_dict()
