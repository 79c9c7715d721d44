#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import abc
import logging as logmod
from typing import TYPE_CHECKING, Sequence

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from abc import abstractmethod

if TYPE_CHECKING:
    from argot._structs.parsed import ParsedArguments
    from argot._structs.schema import CommandSchema

class Tokenizer_i(abc.ABC):
    """
    Splits a raw line into the command name, and its argument tokens
    """

    @abstractmethod
    def split(self, line:str) -> tuple[str, list[str]]:
        pass

class ArgBinder_i(abc.ABC):
    """
    A Single standard process point for turning the list of argument tokens,
    into a typed mapping, by matching against a command schema.
    """

    @abstractmethod
    def bind(self, schema:CommandSchema, tokens:Sequence[str]) -> ParsedArguments:
        pass
