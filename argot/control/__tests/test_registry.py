#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl

# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import argot.errors as AErr
from argot.control.registry import SchemaRegistry
from argot.enums import ValueKind_e
from argot.structs import CommandSchema, CustomType

# ##-- end 1st party imports

logging = logmod.root

ADD = {"name": "add",
       "args": [{"name": "left", "type": "int", "required": True},
                {"name": "right", "type": "int", "required": True}]}

SCHEMA_DOC = """
[[commands]]
name = "add"
args = [
    {name="left", type="int", required=true},
    {name="right", type="int", required=true},
]

[[commands]]
name = "open"
args = [ {name="where", type="hex", kind="named"} ]
"""

class TestSchemaRegistry:

    def test_initial(self):
        obj = SchemaRegistry()
        assert(len(obj) == 0)
        assert(not obj.frozen)

    def test_register(self):
        obj    = SchemaRegistry()
        schema = obj.register(ADD)
        assert(isinstance(schema, CommandSchema))
        assert("add" in obj)
        assert(obj.lookup("add") is schema)
        assert(list(obj) == ["add"])

    def test_register_schema(self):
        obj    = SchemaRegistry()
        schema = CommandSchema.build(ADD)
        assert(obj.register(schema) is schema)

    def test_register_guard(self):
        obj = SchemaRegistry()
        obj.register(TomlGuard(ADD))
        assert("add" in obj)

    def test_duplicate(self):
        obj = SchemaRegistry()
        obj.register(ADD)
        with pytest.raises(AErr.DuplicateSchemaError):
            obj.register(ADD)

    def test_malformed(self):
        obj = SchemaRegistry()
        with pytest.raises(AErr.MalformedSchemaError):
            obj.register({"name": "bad", "args": [{"name": "a", "type": "blah"}]})

        assert(len(obj) == 0)

    def test_lookup_unknown(self):
        obj = SchemaRegistry()
        with pytest.raises(AErr.UnknownCommand) as ctx:
            obj.lookup("blah")

        assert(ctx.value.token == "blah")

    def test_freeze(self):
        obj = SchemaRegistry()
        obj.register(ADD)
        obj.freeze()
        assert(obj.frozen)
        with pytest.raises(AErr.SchemaError):
            obj.register(dict(ADD, name="other"))

    def test_frozen_is_not_duplicate(self):
        obj = SchemaRegistry()
        obj.freeze()
        with pytest.raises(AErr.SchemaError) as ctx:
            obj.register(ADD)

        assert(not isinstance(ctx.value, AErr.DuplicateSchemaError))
        with pytest.raises(AErr.SchemaError) as ctx:
            obj.register_type(CustomType("hex", lambda x: int(x, 16), "a hex number"))

        assert(not isinstance(ctx.value, AErr.DuplicateSchemaError))

    def test_int_bits_from_config(self):
        obj    = SchemaRegistry(config=TomlGuard({"settings": {"int_bits": 16}}))
        schema = obj.register(ADD)
        assert(schema.positional[0].type_.bits == 16)

class TestSchemaRegistryHandlers:

    def test_handler(self, mocker):
        handler = mocker.Mock()
        obj     = SchemaRegistry()
        obj.register(ADD, handler=handler)
        assert(obj.handler_for("add") is handler)

    def test_no_handler(self):
        obj = SchemaRegistry()
        obj.register(ADD)
        assert(obj.handler_for("add") is None)

    def test_handler_unknown(self):
        with pytest.raises(AErr.UnknownCommand):
            SchemaRegistry().handler_for("blah")

    def test_handler_not_callable(self):
        with pytest.raises(AErr.SchemaError):
            SchemaRegistry().register(ADD, handler="blah")

    def test_decorator(self):
        obj = SchemaRegistry()

        @obj.command(ADD)
        def add(args):
            return args.get_int("left") + args.get_int("right")

        assert(obj.handler_for("add") is add)
        assert(callable(add))

class TestSchemaRegistryTypes:

    def test_register_type(self):
        obj = SchemaRegistry()
        obj.register_type(CustomType("hex", lambda x: int(x, 16), "a hex number"))
        schema = obj.register({"name": "open", "args": [{"name": "where", "type": "hex"}]})
        assert(schema.positional[0].value_kind is ValueKind_e.CUSTOM)

    def test_register_type_duplicate(self):
        obj = SchemaRegistry()
        obj.register_type(CustomType("hex", lambda x: int(x, 16), "a hex number"))
        with pytest.raises(AErr.DuplicateSchemaError):
            obj.register_type(CustomType("hex", lambda x: int(x, 16), "a hex number"))

    def test_register_not_a_type(self):
        with pytest.raises(AErr.SchemaError):
            SchemaRegistry().register_type("hex")

    def test_value_types_ctor(self):
        hexes = CustomType("hex", lambda x: int(x, 16), "a hex number")
        obj   = SchemaRegistry(value_types={"hex": hexes})
        assert(obj.value_types == {"hex": hexes})

class TestSchemaRegistryToml:

    def test_loads(self):
        obj    = SchemaRegistry(value_types={"hex": CustomType("hex", lambda x: int(x, 16), "a hex number")})
        result = obj.loads(SCHEMA_DOC)
        assert([x.name for x in result] == ["add", "open"])
        assert(set(obj) == {"add", "open"})

    def test_loads_handlers(self, mocker):
        handler = mocker.Mock()
        obj     = SchemaRegistry(value_types={"hex": CustomType("hex", lambda x: int(x, 16), "a hex number")})
        obj.loads(SCHEMA_DOC, handlers={"add": handler})
        assert(obj.handler_for("add") is handler)
        assert(obj.handler_for("open") is None)

    def test_loads_unknown_type(self):
        with pytest.raises(AErr.MalformedSchemaError):
            SchemaRegistry().loads(SCHEMA_DOC)

    def test_loads_bad_toml(self):
        with pytest.raises(AErr.MalformedSchemaError):
            SchemaRegistry().loads("[[commands]\nname=")

    def test_loads_empty(self):
        assert(SchemaRegistry().loads("") == [])

    def test_loads_bad_commands(self):
        with pytest.raises(AErr.MalformedSchemaError):
            SchemaRegistry().loads('commands = "blah"')

    def test_load(self, tmp_path):
        target = tmp_path / "schemas.toml"
        target.write_text(SCHEMA_DOC.split("[[commands]]\nname = \"open\"")[0])
        obj = SchemaRegistry()
        obj.load(target)
        assert("add" in obj)

    def test_load_missing(self, tmp_path):
        with pytest.raises(AErr.MissingConfigError):
            SchemaRegistry().load(tmp_path / "blah.toml")

    def test_load_invalid(self, tmp_path):
        target = tmp_path / "schemas.toml"
        target.write_text("[[commands]\nname=")
        with pytest.raises(AErr.MalformedSchemaError):
            SchemaRegistry().load(target)

    def test_load_handlers(self, tmp_path, mocker):
        handler = mocker.Mock()
        target  = tmp_path / "schemas.toml"
        target.write_text('[[commands]]\nname = "ping"\n')
        obj     = SchemaRegistry()
        obj.load(target, handlers={"ping": handler})
        assert(obj.handler_for("ping") is handler)
