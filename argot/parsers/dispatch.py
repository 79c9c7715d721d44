#!/usr/bin/env python3
"""
Subcommand dispatch, mixed into the binder.

# {cmd} --{parent named args} {subcommand} {subcommand args...}

"""
##-- imports
from __future__ import annotations

import logging as logmod
from typing import TYPE_CHECKING

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import argot.errors as AErr
from argot.enums import ValueKind_e
from argot.structs import ArgValue, CommandSchema, ParsedArguments

class SubcommandDispatch_m:
    """
    Binds a schema that declares subcommands.
    The parent's named args come before the selector,
    every token after the selector belongs to the selected subcommand,
    and is bound recursively with `self.bind`.
    Failures from the nested bind are not caught, or rewrapped.
    """

    def _bind_subcommand(self, schema:CommandSchema, tokens:list[str]) -> ParsedArguments:
        selector         = schema.selector_spec()
        _, named, rest   = self._partition(schema, tokens, stop_at_positional=True)
        position         = len(tokens) - len(rest)
        match rest:
            case []:
                raise AErr.MissingRequired("No subcommand given for %s, expected %s", schema.name, selector.type_.expected,
                                           position=position, arg=schema.selector)
            case [choice, *_] if choice not in schema.subcommands:
                raise AErr.UnknownCommand("Unknown subcommand for %s: %s. Expected %s", schema.name, choice, selector.type_.expected,
                                          token=choice, position=position, arg=schema.selector)
            case [choice, *nested_tokens]:
                logging.info("Dispatching %s -> %s", schema.name, choice)

        parent = self._bind_flat(schema, [], named)
        nested = self.bind(schema.subcommands[choice], nested_tokens)
        bound  = {schema.selector : ArgValue(ValueKind_e.ENUM, choice)}
        bound.update(parent.bound)
        return ParsedArguments(command=schema.name, bound=bound, nested=nested)
