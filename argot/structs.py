#!/usr/bin/env python3
"""
The public data structures of argot
"""
# ruff: noqa: F401
# Imports:
from __future__ import annotations

from argot._structs.arg_spec import ArgSpec
from argot._structs.constraints import Bounds, Pattern, build_constraint
from argot._structs.logger_spec import LoggerSpec
from argot._structs.parsed import ArgValue, ParsedArguments
from argot._structs.schema import CommandSchema
from argot._structs.value_types import (BooleanType, CustomType, DateType,
                                        DecimalType, EnumType, IntegerType,
                                        StringType, ValueType, resolve_type)
