#!/usr/bin/env python3
"""
The set of known commands, their schemas, and optional handlers.

Registries are explicit objects, passed to whatever parses with them.
Register everything, then freeze, then parse.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
from dataclasses import dataclass
from typing import (TYPE_CHECKING, Any, Callable, Final, Iterator, Mapping,
                    TypeAlias)

# ##-- end stdlib imports

# ##-- 3rd party imports
import tomlguard
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import argot.errors as AErr
from argot._abstract import Handler_p, ValueType_p
from argot.constants import DEFAULT_INT_BITS
from argot.structs import CommandSchema

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

SchemaSource : TypeAlias = CommandSchema|TomlGuard|dict

@dataclass(frozen=True)
class RegisteredCommand:
    schema  : CommandSchema
    handler : None|Handler_p = None

class SchemaRegistry:
    """
    Maps command names to their schemas.

    value_types : extra named value types, usable as `type = "name"` in schema data.
    config      : a TomlGuard, providing settings.int_bits
    """

    def __init__(self, *, value_types:None|Mapping[str, ValueType_p]=None, config:None|TomlGuard=None):
        config              = config or TomlGuard({})
        self._commands      : dict[str, RegisteredCommand] = {}
        self._types         : dict[str, ValueType_p]       = dict(value_types or {})
        self._frozen        : bool                         = False
        self.int_bits       : int                          = config.on_fail(DEFAULT_INT_BITS, int).settings.int_bits()

    def __contains__(self, name:str) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self):
        return f"<SchemaRegistry ({len(self)}) : frozen={self._frozen}>"

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def value_types(self) -> Mapping[str, ValueType_p]:
        return dict(self._types)

    def freeze(self) -> None:
        """ Disallow further registration """
        logging.debug("Freezing registry with: %s", list(self._commands.keys()))
        self._frozen = True

    def register_type(self, value_type:ValueType_p) -> None:
        self._check_unfrozen()
        if not isinstance(value_type, ValueType_p):
            raise AErr.SchemaError("Not a value type: %s", value_type)
        if value_type.name in self._types:
            raise AErr.DuplicateSchemaError("Value type already registered: %s", value_type.name)

        self._types[value_type.name] = value_type

    def register(self, schema:SchemaSource, handler:None|Handler_p=None) -> CommandSchema:
        """ Build and add a schema, returning the built schema """
        self._check_unfrozen()
        if handler is not None and not callable(handler):
            raise AErr.SchemaError("Command handler is not callable: %s", handler)

        built = CommandSchema.build(schema, types=self._types, int_bits=self.int_bits)
        if built.name in self._commands:
            raise AErr.DuplicateSchemaError("Command already registered: %s", built.name)

        logging.debug("Registering command: %s", built.name)
        self._commands[built.name] = RegisteredCommand(built, handler)
        return built

    def command(self, data:SchemaSource) -> Callable[[Handler_p], Handler_p]:
        """ Decorator registering a function as the handler of a command

        @registry.command({"name": "add", "args": [...]})
        def add(args:ParsedArguments) -> int: ...
        """

        def _register(fn:Handler_p) -> Handler_p:
            self.register(data, handler=fn)
            return fn

        return _register

    def lookup(self, name:str) -> CommandSchema:
        match self._commands.get(name, None):
            case None:
                raise AErr.UnknownCommand("Unknown command: %s", name, token=name, position=0)
            case RegisteredCommand(schema=schema):
                return schema

    def handler_for(self, name:str) -> None|Handler_p:
        match self._commands.get(name, None):
            case None:
                raise AErr.UnknownCommand("Unknown command: %s", name, token=name, position=0)
            case RegisteredCommand(handler=handler):
                return handler

    def loads(self, text:str, *, handlers:None|Mapping[str, Handler_p]=None) -> list[CommandSchema]:
        """ Register every [[commands]] table of a toml document """
        try:
            data = tomlguard.read(text)
        except ValueError as err:
            raise AErr.MalformedSchemaError("Schema document is not valid toml: %s", err) from err

        return self._register_document(data, handlers=handlers)

    def load(self, path:pl.Path|str, *, handlers:None|Mapping[str, Handler_p]=None) -> list[CommandSchema]:
        path = pl.Path(path)
        if not path.is_file():
            raise AErr.MissingConfigError("No schema file found at: %s", path)

        logging.debug("Loading schemas from: %s", path)
        try:
            data = TomlGuard.load(path)
        except (OSError, ValueError) as err:
            raise AErr.MalformedSchemaError("Schema file could not be loaded: %s : %s", path, err) from err

        return self._register_document(data, handlers=handlers)

    def _register_document(self, data:TomlGuard, *, handlers:None|Mapping[str, Handler_p]=None) -> list[CommandSchema]:
        handlers = handlers or {}
        match data.on_fail([]).commands():
            case []:
                logging.warning("No [[commands]] found in schema document")
                return []
            case [*cmds]:
                pass
            case x:
                raise AErr.MalformedSchemaError("[[commands]] should be an array of tables: %s", x)

        built = []
        for cmd in cmds:
            schema = CommandSchema.build(cmd, types=self._types, int_bits=self.int_bits)
            built.append(self.register(schema, handler=handlers.get(schema.name, None)))

        return built

    def _check_unfrozen(self) -> None:
        if self._frozen:
            raise AErr.SchemaError("Registry is frozen, it can't be modified")
