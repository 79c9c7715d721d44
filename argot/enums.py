#!/usr/bin/env python3
"""
These are the core enums used to convey information around argot.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum

# ##-- end stdlib imports

class ArgKind_e(enum.Enum):
    """ How an argument is matched against tokens """
    positional = enum.auto()
    named      = enum.auto()
    flag       = enum.auto()

class ValueKind_e(enum.Enum):
    """ The tag of a bound value """
    INTEGER  = enum.auto()
    DECIMAL  = enum.auto()
    STRING   = enum.auto()
    BOOLEAN  = enum.auto()
    ENUM     = enum.auto()
    DATE     = enum.auto()
    CUSTOM   = enum.auto()

class ParseErrorKind_e(enum.Enum):
    UnknownCommand     = enum.auto()
    MissingRequired    = enum.auto()
    TypeMismatch       = enum.auto()
    UnexpectedToken    = enum.auto()
    ExtraneousArgument = enum.auto()
    ValidationError    = enum.auto()
