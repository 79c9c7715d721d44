#!/usr/bin/env python3
"""
The declarative description of a command's arguments.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Iterable,
                    Iterator, Mapping)

# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz
import pydantic
from pydantic import BaseModel, ConfigDict, model_validator
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import argot.errors as AErr
from argot.constants import DEFAULT_INT_BITS, DEFAULT_SELECTOR, FLAG_PREFIX
from argot.enums import ArgKind_e
from argot._structs.arg_spec import ArgSpec

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class CommandSchema(BaseModel):
    """ A Command, its ordered positional args, its named args keyed by flag name,
    and possibly nested subcommands, selected by the first positional token.

    Build from data with CommandSchema.build:
    {
      name = "sub",
      args = [ {name="left", kind="named", type="decimal"}, ...],
      subcommands = [ {name=..., args=[...]}, ...],
    }
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    name        : str
    positional  : tuple[ArgSpec, ...]         = ()
    named       : dict[str, ArgSpec]          = {}
    subcommands : dict[str, CommandSchema]    = {}
    selector    : str                         = DEFAULT_SELECTOR
    desc        : str                         = ""

    @classmethod
    def build(cls, data:TomlGuard|dict|CommandSchema, *, types:None|Mapping=None, int_bits:int=DEFAULT_INT_BITS) -> CommandSchema:
        """ Build a schema from a flat list of args, recursively building subcommands """
        match data:
            case CommandSchema():
                return data
            case TomlGuard():
                return cls.build(dict(data._table()), types=types, int_bits=int_bits)
            case dict():
                pass
            case _:
                raise AErr.MalformedSchemaError("Can't build a CommandSchema from: %s", data)

        data                  = dict(data)
        args                  = [ArgSpec.build(x, types=types, int_bits=int_bits) for x in data.pop("args", [])]
        match list(mitz.duplicates_everseen(x.name for x in args)):
            case []:
                pass
            case [*dups]:
                raise AErr.MalformedSchemaError("Duplicated argument names in %s: %s", data.get("name", "?"), dups)

        named, positional     = mitz.partition(lambda x: x.positional, args)
        match data.pop("subcommands", []):
            case dict() | TomlGuard() as subs:
                subs = [CommandSchema.build(x, types=types, int_bits=int_bits) for x in subs.values()]
            case [*subs]:
                subs = [CommandSchema.build(x, types=types, int_bits=int_bits) for x in subs]
            case x:
                raise AErr.MalformedSchemaError("Subcommands should be a list: %s", x)

        data['positional']   = tuple(positional)
        data['named']        = {x.name : x for x in named}
        data['subcommands']  = {x.name : x for x in subs}
        if len(data['subcommands']) != len(subs):
            raise AErr.MalformedSchemaError("Duplicated subcommand names in: %s", data.get("name", "?"))

        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as err:
            raise AErr.MalformedSchemaError("Bad command schema: %s : %s", data.get("name", "?"), err) from err

    @model_validator(mode="after")
    def _check_invariants(self) -> CommandSchema:
        names = [x.name for x in self.positional] + list(self.named.keys())
        if bool(self.subcommands):
            names.append(self.selector)

        match list(mitz.duplicates_everseen(names)):
            case []:
                pass
            case [*dups]:
                raise ValueError("Argument names must be unique", dups)

        if any(not x.positional for x in self.positional):
            raise ValueError("Non-positional arg declared as positional")
        if any(x.positional for x in self.named.values()):
            raise ValueError("Positional arg declared as named")
        if any(key != spec.name for key, spec in self.named.items()):
            raise ValueError("Named args must be keyed by their name")
        if any(key != sub.name for key, sub in self.subcommands.items()):
            raise ValueError("Subcommands must be keyed by their name")
        if any(x.variadic for x in self.positional[:-1]):
            raise ValueError("Only the last positional arg can be variadic")
        if bool(self.subcommands) and bool(self.positional):
            raise ValueError("A command with subcommands selects them with its first positional, so can't declare positionals")

        optional_seen = False
        for spec in self.positional:
            match spec.required:
                case True if optional_seen:
                    raise ValueError("Required positional args must precede optional ones", spec.name)
                case False:
                    optional_seen = True
                case True:
                    pass

        return self

    @property
    def specs(self) -> Iterator[ArgSpec]:
        """ Every arg, positionals in order then named """
        yield from self.positional
        yield from self.named.values()

    @property
    def variadic(self) -> None|ArgSpec:
        match self.positional:
            case [*_, ArgSpec(variadic=True) as last]:
                return last
            case _:
                return None

    def selector_spec(self) -> None|ArgSpec:
        """ The subcommand selector as an enumerated positional arg """
        if not bool(self.subcommands):
            return None

        return ArgSpec(name=self.selector,
                       kind=ArgKind_e.positional,
                       type="enum",
                       choices=list(self.subcommands.keys()),
                       required=True,
                       desc="The subcommand to run")

    def get(self, name:str) -> None|ArgSpec:
        for spec in self.specs:
            if spec.name == name:
                return spec

        return None

    def usage(self, prefix:str=FLAG_PREFIX) -> str:
        parts = [self.name]
        parts += [x.usage_str(prefix) for x in sorted(self.named.values(), key=ArgSpec.key_func)]
        parts += [x.usage_str(prefix) for x in self.positional]
        if bool(self.subcommands):
            parts.append("{{{}}} ...".format("|".join(self.subcommands.keys())))

        return " ".join(parts)

    def help(self, prefix:str=FLAG_PREFIX) -> str:
        lines = [self.usage(prefix)]
        if self.desc:
            lines.append(self.desc)

        lines += [f"  {x.help_line(prefix)}" for x in self.specs]
        lines += [f"  {x.name:<15} : {x.desc}" for x in self.subcommands.values()]
        return "\n".join(lines)

    def __repr__(self):
        return f"<CommandSchema: {self.name}>"

CommandSchema.model_rebuild()
