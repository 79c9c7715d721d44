##-- imports
from __future__ import annotations

import logging as logmod
from dataclasses import dataclass, field
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Iterable,
                    Sequence, TypeAlias)

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from tomlguard import TomlGuard

import argot.errors as AErr
from argot._abstract import ArgBinder_i
from argot.constants import END_OF_FLAGS, FLAG_PREFIX, PARAM_ASSIGN_SEP
from argot.enums import ArgKind_e
from argot.parsers.dispatch import SubcommandDispatch_m
from argot.structs import ArgSpec, ArgValue, CommandSchema, ParsedArguments

Positional : TypeAlias = tuple[int, str]
Named      : TypeAlias = tuple[int, str, ArgSpec, str|bool]

@dataclass
class _RawBinding:
    """ The unconverted token(s) matched to a spec, and where they were """
    spec      : ArgSpec
    raw       : str|bool|list[str]
    positions : list[int] = field(default_factory=list)

    @property
    def position(self) -> None|int:
        match self.positions:
            case [x, *_]:
                return x
            case _:
                return None

class ArgBinder(SubcommandDispatch_m, ArgBinder_i):
    """
    Bind argument tokens to a command schema, by:
    1) partitioning tokens into positional and named,
    2) assigning positionals in declared order,
    3) assigning named args,
    4) filling defaults / failing on missing required args,
    5) converting raw tokens to typed values,
    6) checking constraints.

    Binding is all or nothing, the first failure is raised as a ParseError.
    No state is kept between calls to bind.

    # {cmd} {positional} --{named} {value} --{named}={value} --{flag} -- {positional}
    """

    def __init__(self, config:None|TomlGuard=None):
        config                = config or TomlGuard({})
        self.flag_prefix      = config.on_fail(FLAG_PREFIX, str).settings.flag_prefix()
        self.allow_assign     = config.on_fail(True, bool).settings.allow_assign()
        self.assign_sep       = config.on_fail(PARAM_ASSIGN_SEP, str).settings.assign_separator()

    def bind(self, schema:CommandSchema, tokens:Sequence[str]) -> ParsedArguments:
        tokens = list(tokens)
        logging.debug("Binding %s : %s", schema.name, tokens)
        try:
            if bool(schema.subcommands):
                return self._bind_subcommand(schema, tokens)

            positional, named, _ = self._partition(schema, tokens)
            return self._bind_flat(schema, positional, named)
        except AErr.ParseError as err:
            logging.info("Binding %s failed: %s : %s", schema.name, err.kind.name, err)
            raise

    def _bind_flat(self, schema:CommandSchema, positional:list[Positional], named:list[Named]) -> ParsedArguments:
        raw : dict[str, _RawBinding] = {}
        raw.update(self._assign_positional(schema, positional))
        raw.update(self._assign_named(named))
        values = self._resolve_unbound(schema, raw)
        values.update(self._convert(raw))
        self._validate(raw, values)

        ordered = {x.name : values[x.name] for x in schema.specs if x.name in values}
        logging.debug("Bound %s : %s", schema.name, list(ordered.keys()))
        return ParsedArguments(command=schema.name, bound=ordered)

    def _partition(self, schema:CommandSchema, tokens:list[str], *, stop_at_positional:bool=False) -> tuple[list[Positional], list[Named], list[str]]:
        """ Split tokens into positional and named, in first seen order.
          if stop_at_positional, return at the first positional token,
          with it and everything after it as the remainder.
        """
        positional  : list[Positional] = []
        named       : list[Named]      = []
        flags_ended                    = False
        idx                            = 0
        while idx < len(tokens):
            token = tokens[idx]
            match token:
                case _ if not flags_ended and token == END_OF_FLAGS:
                    logging.debug("End of flags at: %s", idx)
                    flags_ended  = True
                    idx         += 1
                case _ if flags_ended or not token.startswith(self.flag_prefix):
                    if stop_at_positional:
                        return positional, named, tokens[idx:]
                    positional.append((idx, token))
                    idx += 1
                case _:
                    spec, value, consumed = self._match_named(schema, tokens, idx)
                    named.append((idx, token, spec, value))
                    idx += consumed

        return positional, named, []

    def _match_named(self, schema:CommandSchema, tokens:list[str], idx:int) -> tuple[ArgSpec, str|bool, int]:
        """ Match the flag token at idx, returning its spec, its value, and how many tokens it used """
        token = tokens[idx]
        key   = token.removeprefix(self.flag_prefix)
        sep   = ""
        value = ""
        if self.allow_assign:
            key, sep, value = key.partition(self.assign_sep)

        has_next = idx + 1 < len(tokens) and not tokens[idx + 1].startswith(self.flag_prefix)
        match schema.named.get(key, None), bool(sep):
            case None, _:
                raise AErr.UnexpectedToken("Unrecognized argument for %s: %s", schema.name, token,
                                           token=token, position=idx)
            case ArgSpec(kind=ArgKind_e.flag) as spec, True:
                raise AErr.UnexpectedToken("Flag %s does not take a value: %s", spec.flag_str(self.flag_prefix), token,
                                           token=token, position=idx, arg=spec.name)
            case ArgSpec(kind=ArgKind_e.flag) as spec, False:
                return spec, True, 1
            case spec, True:
                return spec, value, 1
            case spec, False if has_next:
                return spec, tokens[idx + 1], 2
            case spec, False:
                raise AErr.MissingRequired("Expected a value after %s", token,
                                           token=token, position=idx, arg=spec.name)

    def _assign_positional(self, schema:CommandSchema, positional:list[Positional]) -> dict[str, _RawBinding]:
        result    = {}
        remaining = list(positional)
        for spec in schema.positional:
            match remaining:
                case []:
                    break
                case [*xs] if spec.variadic:
                    result[spec.name] = _RawBinding(spec, [x[1] for x in xs], [x[0] for x in xs])
                    remaining         = []
                case [(pos, token), *rest]:
                    result[spec.name] = _RawBinding(spec, token, [pos])
                    remaining         = rest

        match remaining:
            case []:
                pass
            case [(pos, token), *_]:
                raise AErr.ExtraneousArgument("Too many positional arguments for %s, unexpected: %s", schema.name, token,
                                              token=token, position=pos)

        for spec in schema.positional:
            if spec.required and spec.name not in result:
                raise AErr.MissingRequired("Missing required positional argument for %s: %s", schema.name, spec.name,
                                           position=len(positional), arg=spec.name)

        return result

    def _assign_named(self, named:list[Named]) -> dict[str, _RawBinding]:
        result = {}
        for pos, token, spec, value in named:
            if spec.name in result:
                raise AErr.ExtraneousArgument("Argument %s was given more than once", spec.flag_str(self.flag_prefix),
                                              token=token, position=pos, arg=spec.name)
            result[spec.name] = _RawBinding(spec, value, [pos])

        return result

    def _resolve_unbound(self, schema:CommandSchema, raw:dict[str, _RawBinding]) -> dict[str, ArgValue]:
        """ Required args must be bound, optional args take their default or are left absent """
        defaults = {}
        for spec in schema.specs:
            match spec:
                case _ if spec.name in raw:
                    pass
                case ArgSpec(required=True):
                    raise AErr.MissingRequired("Missing required argument for %s: %s", schema.name, spec.flag_str(self.flag_prefix) or spec.name,
                                               arg=spec.name)
                case ArgSpec() if spec.has_default:
                    defaults[spec.name] = ArgValue(spec.value_kind, spec.default, supplied=False)
                case _:
                    logging.debug("Leaving unbound: %s", spec.name)

        return defaults

    def _convert(self, raw:dict[str, _RawBinding]) -> dict[str, ArgValue]:
        values = {}
        for name, binding in raw.items():
            spec = binding.spec
            match binding.raw:
                case bool() as flag:
                    values[name] = ArgValue(spec.value_kind, flag)
                case list() as tokens:
                    converted    = [self._convert_one(spec, x, y) for x, y in zip(tokens, binding.positions, strict=True)]
                    values[name] = ArgValue(spec.value_kind, converted, multiple=True)
                case str() as token:
                    values[name] = ArgValue(spec.value_kind, self._convert_one(spec, token, binding.position))

        return values

    def _convert_one(self, spec:ArgSpec, token:str, position:None|int) -> Any:
        try:
            return spec.type_.convert(token)
        except ValueError as err:
            raise AErr.TypeMismatch("Argument %s expects %s: %s", spec.name, spec.type_.expected, err,
                                    token=token, position=position, arg=spec.name) from err

    def _validate(self, raw:dict[str, _RawBinding], values:dict[str, ArgValue]) -> None:
        """ Check constraints of supplied values, only once everything has converted """
        for name, binding in raw.items():
            match values[name], binding.raw:
                case ArgValue(multiple=True, value=xs), list() as tokens:
                    checking = list(zip(xs, tokens, binding.positions, strict=True))
                case ArgValue(value=x), str() as token:
                    checking = [(x, token, binding.position)]
                case ArgValue(value=x), _:
                    checking = [(x, binding.spec.flag_str(self.flag_prefix), binding.position)]

            for val, token, pos in checking:
                match binding.spec.check_constraints(val):
                    case None:
                        pass
                    case failure:
                        raise AErr.ValidationError("Argument %s %s, got: %s", name, failure, val,
                                                   token=token, position=pos, arg=name)
