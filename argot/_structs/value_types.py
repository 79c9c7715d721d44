#!/usr/bin/env python3
"""
Value types convert the raw string of a token into a typed value.

The builtin types are named: int, decimal, str, bool, enum, date.
Anything else implementing argot._abstract.protocols.ValueType_p
can be used in an ArgSpec directly, or registered by name with a SchemaRegistry,
CustomType wraps a plain parsing function as one.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import datetime
import logging as logmod
import math
import re
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Iterable,
                    Mapping)

# ##-- end stdlib imports

# ##-- 1st party imports
from argot._abstract.protocols import ValueType_p
from argot.constants import (DATE_FORMAT, DATE_STRPTIME, DEFAULT_INT_BITS,
                             FALSE_STRS, TRUE_STRS)
from argot.enums import ValueKind_e

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

INT_RE     : Final[re.Pattern] = re.compile(r"^[+-]?[0-9]+$")
DECIMAL_RE : Final[re.Pattern] = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?$")
DATE_RE    : Final[re.Pattern] = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

class ValueType:
    """ Base for the builtin value types """

    name     : ClassVar[str]
    kind     : ClassVar[ValueKind_e]
    expected : str = "a value"

    def convert(self, raw:str) -> Any:
        raise NotImplementedError()

    def accepts(self, value:Any) -> bool:
        return False

    def from_default(self, value:Any) -> Any:
        """ Defaults given as strings are converted,
        otherwise they need to already be of the right type
        """
        match value:
            case str():
                return self.convert(value)
            case _ if self.accepts(value):
                return value
            case _:
                raise ValueError(f"Default of {value!r} is not {self.expected}")

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"<{type(self).__name__}: {self.name}>"

    def __str__(self):
        return self.name

class IntegerType(ValueType):
    name     = "int"
    kind     = ValueKind_e.INTEGER
    expected = "an integer"

    def __init__(self, bits:int=DEFAULT_INT_BITS):
        self.bits   = bits
        self.lower  = -(2 ** (bits - 1))
        self.upper  = (2 ** (bits - 1)) - 1

    def convert(self, raw:str) -> int:
        if not INT_RE.match(raw):
            raise ValueError(f"not an integer: {raw}")
        val = int(raw)
        if not (self.lower <= val <= self.upper):
            raise ValueError(f"integer out of range [{self.lower}, {self.upper}]: {raw}")
        return val

    def accepts(self, value:Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)

class DecimalType(ValueType):
    name     = "decimal"
    kind     = ValueKind_e.DECIMAL
    expected = "a decimal number"

    def convert(self, raw:str) -> float:
        if not DECIMAL_RE.match(raw):
            raise ValueError(f"not a decimal number: {raw}")
        val = float(raw)
        if not math.isfinite(val):
            raise ValueError(f"decimal out of range: {raw}")
        return val

    def accepts(self, value:Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    def from_default(self, value:Any) -> float:
        return float(super().from_default(value))

class StringType(ValueType):
    name     = "str"
    kind     = ValueKind_e.STRING
    expected = "a string"

    def convert(self, raw:str) -> str:
        return raw

    def accepts(self, value:Any) -> bool:
        return isinstance(value, str)

class BooleanType(ValueType):
    name     = "bool"
    kind     = ValueKind_e.BOOLEAN
    expected = "a boolean (true/false)"

    def convert(self, raw:str) -> bool:
        match raw.lower():
            case x if x in TRUE_STRS:
                return True
            case x if x in FALSE_STRS:
                return False
            case _:
                raise ValueError(f"not a boolean: {raw}")

    def accepts(self, value:Any) -> bool:
        return isinstance(value, bool)

class EnumType(ValueType):
    """ Case sensitive membership in a fixed set of strings.
    The bound value is the matching tag itself.
    """
    name     = "enum"
    kind     = ValueKind_e.ENUM

    def __init__(self, choices:Iterable[str]):
        self.choices = tuple(choices)
        if not bool(self.choices):
            raise ValueError("Enumerations need at least one choice")

    @property
    def expected(self) -> str:
        return "one of: {}".format(", ".join(self.choices))

    def convert(self, raw:str) -> str:
        if raw not in self.choices:
            raise ValueError(f"'{raw}' is not {self.expected}")
        return raw

    def accepts(self, value:Any) -> bool:
        return value in self.choices

class DateType(ValueType):
    """ Calendar dates, in ISO-8601 yyyy-mm-dd form only """
    name     = "date"
    kind     = ValueKind_e.DATE
    expected = f"an ISO-8601 date ({DATE_FORMAT})"

    def convert(self, raw:str) -> datetime.date:
        if not DATE_RE.match(raw):
            raise ValueError(f"invalid date, expected format {DATE_FORMAT}: {raw}")
        try:
            return datetime.datetime.strptime(raw, DATE_STRPTIME).date()
        except ValueError as err:
            raise ValueError(f"invalid date, expected format {DATE_FORMAT}: {raw}") from err

    def accepts(self, value:Any) -> bool:
        return isinstance(value, datetime.date) and not isinstance(value, datetime.datetime)

class CustomType(ValueType):
    """ Wraps a parsing callable as a value type.

    eg: CustomType("path", pl.Path, "a file path", pytype=pl.Path)

    the parser signals failure by raising ValueError or TypeError.
    """
    kind = ValueKind_e.CUSTOM

    def __init__(self, name:str, parser:Callable[[str], Any], expected:str, *, pytype:None|type=None):
        self.name     = name
        self.parser   = parser
        self.expected = expected
        self.pytype   = pytype

    def convert(self, raw:str) -> Any:
        try:
            return self.parser(raw)
        except (ValueError, TypeError) as err:
            raise ValueError(f"invalid {self.name}, expected {self.expected}: {raw}") from err

    def accepts(self, value:Any) -> bool:
        if self.pytype is None:
            return True
        return isinstance(value, self.pytype)

    def __eq__(self, other) -> bool:
        match other:
            case CustomType():
                return self.name == other.name and self.parser is other.parser
            case _:
                return False

    def __hash__(self):
        return hash(self.name)

def resolve_type(val:Any, *, choices:None|Iterable[str]=None, registered:None|Mapping[str, ValueType_p]=None, int_bits:int=DEFAULT_INT_BITS) -> ValueType_p:
    """ Turn a type declaration from a spec into a value type instance.
    Accepts builtin type names, the matching python types, registered custom names,
    or an existing value type.
    """
    registered = registered or {}
    if isinstance(val, type):
        val = val.__name__

    match val:
        case str() if val in registered:
            return registered[val]
        case "int" | "integer":
            return IntegerType(bits=int_bits)
        case "float" | "decimal":
            return DecimalType()
        case "str" | "string":
            return StringType()
        case "bool" | "boolean":
            return BooleanType()
        case "enum" | "enumeration":
            return EnumType(choices or [])
        case "date":
            return DateType()
        case str():
            raise ValueError(f"Unknown value type: {val}")
        case ValueType_p():
            return val
        case _:
            raise ValueError(f"Can't use as a value type: {val!r}")
