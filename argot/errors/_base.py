#!/usr/bin/env python3
"""
The roots of the argot error hierarchy.

UserError's are caused by the command line being parsed,
DeveloperError's by the code declaring schemas, or misusing results.
"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class ArgotError(Exception):
    """
      The base class for all Argot Errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific Argot Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)

class UserError(ArgotError):
    """ The input being parsed is at fault """
    pass

class DeveloperError(ArgotError):
    """ The code using argot is at fault, these are not recoverable """
    pass
