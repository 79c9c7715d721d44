#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import argot.errors as AErr
from argot._abstract import ArgBinder_i, Tokenizer_i
from argot.control.main import CommandLine, Invocation
from argot.control.registry import SchemaRegistry
from argot.parsers import QuotedTokenizer
from argot.structs import ParsedArguments

# ##-- end 1st party imports

logging = logmod.root

ADD  = {"name": "add",
        "args": [{"name": "left", "type": "int", "required": True},
                 {"name": "right", "type": "int", "required": True}]}

SAY  = {"name": "say", "desc": "Say something", "args": [{"name": "text", "required": True}]}

@pytest.fixture(scope="function")
def registry():
    reg = SchemaRegistry()

    @reg.command(ADD)
    def add(args):
        return args.get_int("left") + args.get_int("right")

    reg.register(SAY)
    return reg

class TestCommandLine:

    def test_initial(self, registry):
        obj = CommandLine(registry)
        assert(isinstance(obj.tokenizer, Tokenizer_i))
        assert(isinstance(obj.binder, ArgBinder_i))
        assert(registry.frozen)

    def test_parse(self, registry):
        result = CommandLine(registry).parse("add 1 2")
        assert(isinstance(result, ParsedArguments))
        assert(result.command == "add")
        assert(dict(result) == {"left": 1, "right": 2})

    def test_parse_unknown(self, registry):
        with pytest.raises(AErr.UnknownCommand) as ctx:
            CommandLine(registry).parse("mul 1 2")

        assert(ctx.value.token == "mul")

    def test_parse_blank(self, registry):
        with pytest.raises(AErr.UnknownCommand):
            CommandLine(registry).parse("   ")

    def test_parse_failure(self, registry):
        with pytest.raises(AErr.ParseError):
            CommandLine(registry).parse("add 1")

    def test_invocation(self, registry):
        result = CommandLine(registry).invocation("add 1 2")
        assert(isinstance(result, Invocation))
        assert(result.command == "add")
        assert(result() == 3)

    def test_run(self, registry):
        assert(CommandLine(registry).run("add 40 2") == 42)

    def test_run_without_handler(self, registry):
        with pytest.raises(AErr.MissingHandlerError):
            CommandLine(registry).run("say hello")

    def test_handler_receives_parsed(self, mocker):
        handler = mocker.Mock(return_value="done")
        reg     = SchemaRegistry()
        reg.register(SAY, handler=handler)
        assert(CommandLine(reg).run("say hello") == "done")
        handler.assert_called_once()
        assert(handler.call_args.args[0]["text"] == "hello")

    def test_quoted_config(self, registry):
        config = TomlGuard({"settings": {"tokenizer": "quoted"}})
        obj    = CommandLine(registry, config=config)
        assert(isinstance(obj.tokenizer, QuotedTokenizer))
        assert(obj.parse('say "hello world"')["text"] == "hello world")

    def test_custom_tokenizer(self, registry, mocker):
        tokenizer = mocker.MagicMock(spec=Tokenizer_i)
        tokenizer.split.return_value = ("add", ["3", "4"])
        result = CommandLine(registry, tokenizer=tokenizer).parse("anything")
        assert(dict(result) == {"left": 3, "right": 4})
        tokenizer.split.assert_called_once_with("anything")

    def test_repeatable(self, registry):
        obj = CommandLine(registry)
        assert(obj.parse("add 1 2") == obj.parse("add 1 2"))

class TestCommandLineHelp:

    def test_help_all(self, registry):
        text = CommandLine(registry).help()
        assert(text.splitlines()[0] == "Commands:")
        assert("add <left> <right>" in text)
        assert("say <text>" in text)

    def test_help_one(self, registry):
        text = CommandLine(registry).help("say")
        assert("Say something" in text)

    def test_help_unknown(self, registry):
        with pytest.raises(AErr.UnknownCommand):
            CommandLine(registry).help("blah")

    def test_help_uses_configured_prefix(self):
        reg = SchemaRegistry()
        reg.register({"name": "sub",
                      "args": [{"name": "right", "kind": "named", "type": "decimal", "required": True},
                               {"name": "quiet", "kind": "flag"}]})
        obj  = CommandLine(reg, config=TomlGuard({"settings": {"flag_prefix": "-"}}))
        text = obj.help("sub")
        assert(text.splitlines()[0] == "sub [-quiet] -right <decimal>")
        assert("--right" not in text)
        assert(obj.parse("sub -right 2.5")["right"] == 2.5)

    def test_help_all_uses_configured_prefix(self):
        reg = SchemaRegistry()
        reg.register({"name": "sub", "args": [{"name": "quiet", "kind": "flag"}]})
        text = CommandLine(reg, config=TomlGuard({"settings": {"flag_prefix": "+"}})).help()
        assert("sub [+quiet]" in text)
