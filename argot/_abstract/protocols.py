#!/usr/bin/env python3
"""
The structural types argot components rely on.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Protocol,
                    runtime_checkable)

# ##-- end stdlib imports

if TYPE_CHECKING:
    from argot.enums import ValueKind_e
    from argot._structs.parsed import ParsedArguments

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@runtime_checkable
class ValueType_p(Protocol):
    """ Converts a raw string token into a typed value.
      convert raises ValueError with a readable message on failure,
      `expected` describes the accepted textual form.
    """
    name     : str
    kind     : ValueKind_e
    expected : str

    def convert(self, raw:str) -> Any: ...

    def accepts(self, value:Any) -> bool: ...

@runtime_checkable
class Constraint_p(Protocol):
    """ A domain check applied to a converted value.
      check returns None when satisfied, or a description of the failure.
    """

    def check(self, value:Any) -> None|str: ...

@runtime_checkable
class Handler_p(Protocol):

    def __call__(self, args:ParsedArguments) -> Any: ...
