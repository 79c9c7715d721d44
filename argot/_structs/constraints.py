#!/usr/bin/env python3
"""
Domain constraints, checked after every token of a command has been converted.

Declared on an ArgSpec as:
"non_negative" | "positive" | {min=0, max=10} | {pattern="^a.+"} | a Constraint_p instance
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import re
from typing import Any, ClassVar, Final

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, ConfigDict, model_validator
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from argot._abstract.protocols import Constraint_p

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Bounds(BaseModel):
    """ Inclusive (by default) numeric bounds """
    model_config = ConfigDict(frozen=True, extra="forbid")

    min       : None|int|float = None
    max       : None|int|float = None
    exclusive : bool           = False

    @model_validator(mode="after")
    def _check_order(self) -> Bounds:
        if self.min is not None and self.max is not None and self.max < self.min:
            raise ValueError("Bounds max is less than min", self.min, self.max)
        return self

    def check(self, value:Any) -> None|str:
        match self.exclusive:
            case False if self.min is not None and value < self.min:
                return f"must be >= {self.min}"
            case False if self.max is not None and self.max < value:
                return f"must be <= {self.max}"
            case True if self.min is not None and value <= self.min:
                return f"must be > {self.min}"
            case True if self.max is not None and self.max <= value:
                return f"must be < {self.max}"
            case _:
                return None

    def __str__(self):
        return "bounds({}, {})".format(self.min, self.max)

class Pattern(BaseModel):
    """ The str() of the value must fully match a regex """
    model_config = ConfigDict(frozen=True, extra="forbid")

    pattern : str

    @model_validator(mode="after")
    def _check_compiles(self) -> Pattern:
        try:
            re.compile(self.pattern)
        except re.error as err:
            raise ValueError("Bad constraint pattern", self.pattern) from err
        return self

    def check(self, value:Any) -> None|str:
        if re.fullmatch(self.pattern, str(value)):
            return None
        return f"must match {self.pattern}"

    def __str__(self):
        return "pattern({})".format(self.pattern)

NAMED_CONSTRAINTS : Final[dict[str, Constraint_p]] = {
    "non_negative" : Bounds(min=0),
    "positive"     : Bounds(min=0, exclusive=True),
    "negative"     : Bounds(max=0, exclusive=True),
    }

def build_constraint(data:Any) -> Constraint_p:
    """ Build a constraint from its declaration """
    match data:
        case str() if data in NAMED_CONSTRAINTS:
            return NAMED_CONSTRAINTS[data]
        case str():
            raise ValueError("Unknown constraint", data)
        case TomlGuard():
            return build_constraint(dict(data._table()))
        case {"pattern": _}:
            return Pattern.model_validate(data)
        case dict():
            return Bounds.model_validate(data)
        case Constraint_p():
            return data
        case _:
            raise ValueError("Can't build a constraint from", data)
