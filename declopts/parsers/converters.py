#!/usr/bin/env python3
"""
Conversion of a token's raw value text to a typed value, selected by value type tag.

Conversions are locale independent:
integers are an optional sign and ascii digits,
floats are decimal or scientific notation (no nan, inf, or underscores).
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
import math
import re
from types import MappingProxyType
# ##-- end stdlib imports

# ##-- 1st party imports
from declopts._interface import INVALID_VALUE_MSG, ValueType_e
from declopts._structs.parsed_value import ParsedValue
from declopts.errors import InvalidValue, SchemaError

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Final
    from collections.abc import Callable, Iterable, Mapping
    from jgdv import Maybe
    from declopts._interface import Converter_p, OptionSpec_p
    from declopts._structs.token import Token
# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

INT_RE    : Final[re.Pattern] = re.compile(r"[+-]?[0-9]+")
FLOAT_RE  : Final[re.Pattern] = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

def to_flag(value:Maybe[str]) -> bool:
    """ Flags are trip wires: presence is True, any value is ignored """
    return True

def to_text(value:Maybe[str]) -> str:
    if value is None:
        raise ValueError("Text options require a value")
    return value

def to_integer(value:Maybe[str]) -> int:
    match value:
        case None:
            raise ValueError("Integer options require a value")
        case str() if INT_RE.fullmatch(value):
            return int(value, 10)
        case _:
            raise ValueError("Not an integer", value)

def to_float(value:Maybe[str]) -> float:
    match value:
        case None:
            raise ValueError("Float options require a value")
        case str() if FLOAT_RE.fullmatch(value):
            result = float(value)
            if not math.isfinite(result):
                raise ValueError("Float out of range", value)
            return result
        case _:
            raise ValueError("Not a float", value)

DEFAULT_CONVERTERS : Final[Mapping[ValueType_e, Converter_p]] = MappingProxyType({
    ValueType_e.INTEGER : to_integer,
    ValueType_e.FLOAT   : to_float,
    ValueType_e.TEXT    : to_text,
    ValueType_e.FLAG    : to_flag,
})

class ConverterRegistry:
    """ A table of converters, one per value type tag.
    Used by schemas to build their position-aligned converter table.
    """

    def __init__(self, table:Maybe[Mapping[ValueType_e, Converter_p]]=None):
        merged = dict(DEFAULT_CONVERTERS)
        merged.update(table or {})
        missing = [x.name for x in ValueType_e if not callable(merged.get(x, None))]
        if bool(missing):
            raise SchemaError("Converter Registry lacks converters for: %s", missing)

        self._table = MappingProxyType(merged)

    @staticmethod
    @ftz.cache
    def default() -> ConverterRegistry:
        return ConverterRegistry()

    def __getitem__(self, value_type:ValueType_e) -> Converter_p:
        return self._table[value_type]

    def convert(self, value_type:ValueType_e, token:Token) -> ParsedValue:
        """ Convert the token's value part to a value of the given type.
        Raises InvalidValue on failure.
        """
        logging.debug("Converting: %s : %s", value_type.name, token.raw)
        try:
            value = self._table[value_type](token.value)
            return ParsedValue.of(value_type, value)
        except ValueError as err:
            # a pydantic ValidationError is a ValueError
            raise InvalidValue(INVALID_VALUE_MSG, token.raw, token=token.raw, name=token.name) from err

    def table_for(self, specs:Iterable[OptionSpec_p]) -> tuple[Callable[[Token], ParsedValue], ...]:
        """ Build the converter table for a sequence of specs, in the same order """
        return tuple(ftz.partial(self.convert, spec.value_type) for spec in specs)
