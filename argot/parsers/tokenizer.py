#!/usr/bin/env python3
"""
Turns a raw command line into (command name, [argument tokens])
"""
##-- imports
from __future__ import annotations

import logging as logmod
import shlex
from typing import TYPE_CHECKING, Final

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from tomlguard import TomlGuard

import argot.errors as AErr
from argot._abstract import Tokenizer_i
from argot.constants import DEFAULT_TOKENIZER

class WhitespaceTokenizer(Tokenizer_i):
    """
    Splits on runs of whitespace, with no quoting.
    A blank line gives ("", []), which no registry will recognise.
    """

    def split(self, line:str) -> tuple[str, list[str]]:
        logging.debug("Tokenizing: %r", line)
        return self._head_and_tail(self._tokens(line))

    def _tokens(self, line:str) -> list[str]:
        return line.split()

    def _head_and_tail(self, tokens:list[str]) -> tuple[str, list[str]]:
        match tokens:
            case []:
                return "", []
            case [head, *tail]:
                return head, tail

class QuotedTokenizer(WhitespaceTokenizer):
    """
    Splits with posix shell quoting rules,
    so `say "hello world"` has one argument token.
    """

    def _tokens(self, line:str) -> list[str]:
        try:
            return shlex.split(line, posix=True)
        except ValueError as err:
            raise AErr.UnexpectedToken("Unbalanced quoting in: %s", line, token=line) from err

def build_tokenizer(config:None|TomlGuard=None) -> Tokenizer_i:
    """ Select the tokenizer named in settings.tokenizer """
    config = config or TomlGuard({})
    match config.on_fail(DEFAULT_TOKENIZER, str).settings.tokenizer():
        case "whitespace":
            return WhitespaceTokenizer()
        case "quoted" | "shlex":
            return QuotedTokenizer()
        case x:
            raise AErr.InvalidConfigError("Unknown tokenizer: %s", x)
