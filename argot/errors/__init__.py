#!/usr/bin/env python3
"""
These are the argot specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import ArgotError, DeveloperError, UserError
from .config import ConfigError, InvalidConfigError, MissingConfigError
from .parse import (ExtraneousArgument, MissingRequired, ParseError,
                    TypeMismatch, UnexpectedToken, UnknownCommand,
                    ValidationError)
from .schema import (ArgAccessError, DuplicateSchemaError,
                     MalformedSchemaError, MissingHandlerError, SchemaError)

# ##-- end 1st party imports
