#!/usr/bin/env python3
"""
CommandLine : the front door of argot.

Tokenizes a line, looks up its command in a registry,
binds the remaining tokens, and optionally runs the command's handler.

    registry = SchemaRegistry()
    registry.register({"name": "add", "args": [...]}, handler=add)
    cli      = CommandLine(registry)
    cli.parse("add 1 2")  -> ParsedArguments
    cli.run("add 1 2")    -> add(ParsedArguments)
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import argot.errors as AErr
from argot._abstract import ArgBinder_i, Handler_p, Tokenizer_i
from argot.constants import FLAG_PREFIX
from argot.control.registry import SchemaRegistry
from argot.parsers import ArgBinder, build_tokenizer
from argot.structs import ParsedArguments

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(frozen=True)
class Invocation:
    """ A parsed line, ready to be run """
    command : str
    args    : ParsedArguments
    handler : None|Handler_p = None

    def __call__(self) -> Any:
        if self.handler is None:
            raise AErr.MissingHandlerError("No handler registered for command: %s", self.command)

        return self.handler(self.args)

class CommandLine:
    """
    Parses lines against a registry.
    The registry is frozen on construction,
    and nothing is retained between parses.
    """

    def __init__(self, registry:SchemaRegistry, *, config:None|TomlGuard=None, tokenizer:None|Tokenizer_i=None, binder:None|ArgBinder_i=None):
        config           = config or TomlGuard({})
        self.registry    = registry
        self.tokenizer   = tokenizer or build_tokenizer(config)
        self.binder      = binder or ArgBinder(config)
        self.flag_prefix = config.on_fail(FLAG_PREFIX, str).settings.flag_prefix()
        self.registry.freeze()

    def parse(self, line:str) -> ParsedArguments:
        """ Parse a line, raising a ParseError on failure """
        return self.invocation(line).args

    def invocation(self, line:str) -> Invocation:
        name, tokens = self.tokenizer.split(line)
        logging.debug("Parsing command %r with: %s", name, tokens)
        schema       = self.registry.lookup(name)
        args         = self.binder.bind(schema, tokens)
        return Invocation(name, args, self.registry.handler_for(name))

    def run(self, line:str) -> Any:
        """ Parse a line, then call its command's handler with the result """
        invocation = self.invocation(line)
        logging.info("Running: %s", invocation.command)
        return invocation()

    def help(self, name:None|str=None) -> str:
        """ Help for a single command, or a summary of all of them """
        if name is not None:
            return self.registry.lookup(name).help(self.flag_prefix)

        lines = ["Commands:"]
        for cmd in sorted(self.registry):
            schema = self.registry.lookup(cmd)
            lines.append(f"  {schema.usage(self.flag_prefix)}")

        return "\n".join(lines)
