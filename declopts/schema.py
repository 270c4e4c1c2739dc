#!/usr/bin/env python3
"""
The option schema, and its fluent builder.

  schema = (Schema()
            .add(int, "-f", "-first")
            .add(float, "-s", "-second"))
  result = schema.parse(["-first=2", "-s=3.14"])
  result["-f"]  # 2

Each 'add' returns a new schema. Earlier schemas, and results parsed from them,
are never modified.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import ValidationError
# ##-- end 3rd party imports

# ##-- 1st party imports
from declopts._interface import UNRECOGNIZED_MSG, ValueType_e
from declopts._structs.option_spec import OptionHandle, OptionSpec
from declopts.errors import DuplicateOption, SchemaError, UnknownOption
from declopts.parsers.converters import ConverterRegistry
from declopts.parsers.parser import OptionParser

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from typing import Any, Literal
    from collections.abc import Callable, Iterable, Iterator, Mapping
    from jgdv import Maybe
    from declopts._structs.parsed_value import ParsedValue
    from declopts._structs.token import Token
    from declopts.parsers.result import ParseResult

    type TypeDecl = ValueType_e|type|str
# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Schema:
    """ An immutable, ordered, sequence of OptionSpecs.

    Declaration order matters: name resolution takes the first match,
    and the converter table from 'finalize' is indexed in the same order.
    Option names must be unique across the whole schema.
    """

    def __init__(self, specs:Iterable[OptionSpec]=(), *, registry:Maybe[ConverterRegistry]=None):
        self._specs     = tuple(specs)
        self._registry  = registry or ConverterRegistry.default()

    @classmethod
    def build(cls, data:Iterable[Mapping], *, registry:Maybe[ConverterRegistry]=None) -> Schema:
        """ Build a schema from a list of {type, short, long} records, eg: from toml data """
        schema = cls(registry=registry)
        for record in data:
            match dict(record):
                case {"short": str(), "long": str()} as rec:
                    schema = schema._extend(cls._make_spec(rec))
                case x:
                    raise SchemaError("Option records need a short and long name: %s", x)

        return schema

    from_dicts = build

    def add(self, value_type:TypeDecl, short:str, long:str) -> Schema:
        """ Declare a new option, returning a new schema """
        return self._extend(self._make_spec({"short": short, "long": long, "type": value_type}))

    @overload
    def declare(self, value_type:type[bool]|Literal[ValueType_e.FLAG, "bool", "flag", "FLAG"], short:str, long:str) -> tuple[Schema, OptionHandle[bool]]: ...

    @overload
    def declare(self, value_type:type[int]|Literal[ValueType_e.INTEGER, "int", "integer", "INTEGER"], short:str, long:str) -> tuple[Schema, OptionHandle[int]]: ...

    @overload
    def declare(self, value_type:type[float]|Literal[ValueType_e.FLOAT, "float", "double", "FLOAT"], short:str, long:str) -> tuple[Schema, OptionHandle[float]]: ...

    @overload
    def declare(self, value_type:type[str]|Literal[ValueType_e.TEXT, "str", "text", "TEXT"], short:str, long:str) -> tuple[Schema, OptionHandle[str]]: ...

    @overload
    def declare(self, value_type:TypeDecl, short:str, long:str) -> tuple[Schema, OptionHandle[Any]]: ...

    def declare(self, value_type:TypeDecl, short:str, long:str) -> tuple[Schema, OptionHandle]:
        """ As 'add', but also returns a typed handle for the new option """
        schema = self.add(value_type, short, long)
        return schema, OptionHandle(schema[-1])

    def handle(self, name:str) -> OptionHandle:
        match self.lookup(name):
            case None:
                raise UnknownOption(UNRECOGNIZED_MSG, name, name=name)
            case OptionSpec() as spec:
                return OptionHandle(spec)

    @staticmethod
    def _make_spec(data:Mapping) -> OptionSpec:
        try:
            return OptionSpec.build(data)
        except ValidationError as err:
            raise SchemaError("Bad option declaration: %s : %s", dict(data), err) from err

    def _extend(self, spec:OptionSpec) -> Schema:
        match [x for x in dict.fromkeys(spec.names()) if x in self]:
            case []:
                logging.debug("Declaring: %s", repr(spec))
                return Schema((*self._specs, spec), registry=self._registry)
            case [*xs]:
                raise DuplicateOption("Option names already declared: %s", ", ".join(xs))

    def index(self, name:str) -> int:
        """ The position of the first spec with a short or long name equal to 'name'.
        Returns len(self) when nothing matches.
        """
        return next((i for i, spec in enumerate(self._specs) if spec.matches(name)), len(self._specs))

    def lookup(self, name:str) -> Maybe[OptionSpec]:
        match self.index(name):
            case int() as idx if idx < len(self._specs):
                return self._specs[idx]
            case _:
                return None

    def finalize(self) -> tuple[Callable[[Token], ParsedValue], ...]:
        """ The converter table, aligned with declaration order """
        return self._converters

    @ftz.cached_property
    def _converters(self) -> tuple[Callable[[Token], ParsedValue], ...]:
        return self._registry.table_for(self._specs)

    def parse(self, tokens:Iterable[str], *, strict:bool=False) -> ParseResult:
        return OptionParser(self).parse(tokens, strict=strict)

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs)

    def __getitem__(self, idx:int) -> OptionSpec:
        return self._specs[idx]

    def __contains__(self, val:str|OptionSpec|OptionHandle) -> bool:
        match val:
            case str():
                return self.index(val) < len(self._specs)
            case OptionHandle():
                return val.spec in self._specs
            case OptionSpec():
                return val in self._specs
            case _:
                return False

    def __eq__(self, other) -> bool:
        match other:
            case Schema():
                return self._specs == other._specs
            case _:
                return NotImplemented

    def __hash__(self) -> int:
        return hash(self._specs)

    def __repr__(self) -> str:
        return f"<Schema: {' '.join(str(x) for x in self._specs)}>"
