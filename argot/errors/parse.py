#!/usr/bin/env python3
"""
Errors raised while binding a command line against a schema.
Exactly one of these describes a failed parse.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

# ##-- 1st party imports
from argot.enums import ParseErrorKind_e

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"ParseError",
"UnknownCommand",
"MissingRequired",
"TypeMismatch",
"UnexpectedToken",
"ExtraneousArgument",
"ValidationError",

)
# ##-- end Generated Exports

from ._base import UserError

class ParseError(UserError):
    """ In the course of parsing CLI input, a failure occurred.

    args are the message and its % values,
    token, position and arg locate the failure where known.
    """
    general_msg                         = "Argot CLI Parsing Failure:"
    kind : ClassVar[ParseErrorKind_e]   = ParseErrorKind_e.UnexpectedToken

    def __init__(self, *args, token:None|str=None, position:None|int=None, arg:None|str=None):
        super().__init__(*args)
        self.token    = token
        self.position = position
        self.arg      = arg

class UnknownCommand(ParseError):
    """ The command, or subcommand, has no registered schema """
    kind = ParseErrorKind_e.UnknownCommand

class MissingRequired(ParseError):
    """ A required argument, or a named argument's value, was not supplied """
    kind = ParseErrorKind_e.MissingRequired

class TypeMismatch(ParseError):
    """ A token could not be converted to its argument's type """
    kind = ParseErrorKind_e.TypeMismatch

class UnexpectedToken(ParseError):
    """ A token is not recognised by the schema """
    kind = ParseErrorKind_e.UnexpectedToken

class ExtraneousArgument(ParseError):
    """ Tokens were left over after binding """
    kind = ParseErrorKind_e.ExtraneousArgument

class ValidationError(ParseError):
    """ A converted value failed a constraint """
    kind = ParseErrorKind_e.ValidationError
