#!/usr/bin/env python3
"""
The result of a successful parse.

Values are held as tagged ArgValue's, so callers can retrieve them
as their declared type, and fail predictably when asking for the wrong one.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import datetime
import logging as logmod
from collections.abc import Mapping
from dataclasses import InitVar, dataclass, field
from typing import TYPE_CHECKING, Any, Final, Iterator

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import argot.errors as AErr
from argot.enums import ValueKind_e

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(frozen=True)
class ArgValue:
    """ A single bound value, tagged with its kind.
    `multiple` marks the list of a variadic arg,
    `supplied` is False when the value came from a default.
    """
    kind     : ValueKind_e
    value    : Any
    multiple : bool = False
    supplied : bool = True

@dataclass(frozen=True, eq=False)
class ParsedArguments(Mapping):
    """ An immutable mapping of argument name -> plain value.
    Unsupplied args without defaults are absent, not None.

    Equality is Mapping equality, like a dict:
    only names and plain values are compared, the command and nested result are not.
    Like a dict, it is unhashable.
    """
    command : str
    bound   : Mapping[str, ArgValue]      = field(default_factory=dict)
    nested  : None|ParsedArguments        = None

    def __getitem__(self, key:str) -> Any:
        return self.bound[key].value

    def __iter__(self) -> Iterator[str]:
        return iter(self.bound)

    def __len__(self) -> int:
        return len(self.bound)

    def __contains__(self, key) -> bool:
        return key in self.bound

    def tagged(self, name:str) -> ArgValue:
        match self.bound.get(name, None):
            case None:
                raise AErr.ArgAccessError("No value bound for argument: %s", name)
            case ArgValue() as val:
                return val

    def get_as(self, name:str, kind:ValueKind_e, *, multiple:bool=False) -> Any:
        """ Get a value, failing if it isn't the expected kind """
        match self.tagged(name):
            case ArgValue(kind=found, multiple=many) if found != kind or many != multiple:
                raise AErr.ArgAccessError("Argument %s is a %s, not a %s", name, found.name, kind.name)
            case ArgValue(value=value):
                return value

    def get_int(self, name:str) -> int:
        return self.get_as(name, ValueKind_e.INTEGER)

    def get_decimal(self, name:str) -> float:
        return self.get_as(name, ValueKind_e.DECIMAL)

    def get_str(self, name:str) -> str:
        return self.get_as(name, ValueKind_e.STRING)

    def get_bool(self, name:str) -> bool:
        return self.get_as(name, ValueKind_e.BOOLEAN)

    def get_enum(self, name:str) -> str:
        return self.get_as(name, ValueKind_e.ENUM)

    def get_date(self, name:str) -> datetime.date:
        return self.get_as(name, ValueKind_e.DATE)

    def get_custom(self, name:str) -> Any:
        return self.get_as(name, ValueKind_e.CUSTOM)

    def get_list(self, name:str, kind:ValueKind_e) -> list:
        return self.get_as(name, kind, multiple=True)

    def non_default(self) -> set[str]:
        return {x for x, y in self.bound.items() if y.supplied}

    def to_dict(self) -> dict:
        return {x : y.value for x, y in self.bound.items()}

    def _as_table(self) -> dict:
        return {
            "name" : self.command,
            "args" : self.to_dict(),
            "sub"  : {} if self.nested is None else self.nested._as_table(),
            }

    def to_guard(self) -> TomlGuard:
        """ A nested guard of {name, args, sub} """
        return TomlGuard(self._as_table())

    def __repr__(self):
        return f"<ParsedArguments: {self.command} : {self.to_dict()}>"
