#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from types import MappingProxyType
# ##-- end stdlib imports

# ##-- 1st party imports
from declopts._interface import UNRECOGNIZED_MSG, ValueType_e
from declopts._structs.option_spec import OptionHandle, OptionSpec
from declopts._structs.parsed_value import ParsedValue
from declopts.errors import (MissingOption, ParseError, ParseErrors,
                             TypeMismatch, UnknownOption)

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any, Self
    from collections.abc import Iterable, Iterator, Mapping
    from jgdv import Maybe
    from declopts._interface import Schema_p
    from declopts._structs.option_spec import T

    type Key = str|OptionSpec|OptionHandle
# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParseResult:
    """ The immutable outcome of parsing one argument list.

    Holds an entry only for options that were supplied,
    keyed by the option's long name. Either alias, or a handle,
    can be used to retrieve a value.

    Recoverable parse failures are kept on 'errors',
    callers decide whether to abort with 'raise_for_errors'.
    """

    def __init__(self, schema:Schema_p, values:Mapping[str, ParsedValue], errors:Iterable[ParseError]=()):
        self._schema  = schema
        self._values  = MappingProxyType(dict(values))
        self._errors  = tuple(errors)

    @property
    def schema(self) -> Schema_p:
        return self._schema

    @property
    def errors(self) -> tuple[ParseError, ...]:
        return self._errors

    @property
    def ok(self) -> bool:
        return not bool(self._errors)

    def raise_for_errors(self) -> Self:
        match self._errors:
            case ():
                return self
            case (err,):
                raise err
            case errs:
                raise ParseErrors(errs)

    def _resolve(self, key:Key) -> OptionSpec:
        """ Map any key to its declared spec """
        match key:
            case OptionHandle(spec=spec) | (OptionSpec() as spec) if spec in self._schema:
                return spec
            case OptionHandle() | OptionSpec():
                raise UnknownOption(UNRECOGNIZED_MSG, str(key), name=key.canonical)
            case str():
                pass
            case x:
                raise TypeError("Bad ParseResult key", x)

        idx = self._schema.index(key)
        if len(self._schema) <= idx:
            raise UnknownOption(UNRECOGNIZED_MSG, key, name=key)

        return self._schema[idx]

    def value(self, key:Key) -> ParsedValue:
        """ The tagged value for the key, or MissingOption """
        spec = self._resolve(key)
        match self._values.get(spec.canonical, None):
            case None:
                raise MissingOption("Option was not supplied: %s", spec.canonical)
            case ParsedValue() as val:
                return val

    def get(self, key:Key|OptionHandle[T], expect:Maybe[ValueType_e|type|str]=None) -> T|Any:
        """ Get the value of an option.
        A handle checks against its declared type,
        otherwise 'expect' can be passed to check the stored type.
        """
        val = self.value(key)
        match key, expect:
            case OptionHandle(), None:
                expected = key.value_type
            case _, None:
                return val.value
            case _, _:
                expected = ValueType_e.build(expect)

        if val.tag is not expected:
            raise TypeMismatch("Option %s holds a %s, not a %s",
                               self._resolve(key).canonical, val.tag.name, expected.name)

        return val.value

    def maybe(self, key:Key, expect:Maybe[ValueType_e|type|str]=None) -> Any:
        """ As 'get', but returns None for options that weren't supplied """
        try:
            return self.get(key, expect)
        except MissingOption:
            return None

    def to_dict(self) -> dict[str, Any]:
        return {x: y.value for x, y in self._values.items()}

    def __getitem__(self, key:Key) -> Any:
        return self.get(key)

    def __contains__(self, key:Key) -> bool:
        try:
            spec = self._resolve(key)
        except (UnknownOption, TypeError):
            return False

        return spec.canonical in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other) -> bool:
        match other:
            case ParseResult():
                return dict(self._values) == dict(other._values) and self._errors == other._errors
            case _:
                return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"<ParseResult: {self.to_dict()} errors={len(self._errors)}>"
