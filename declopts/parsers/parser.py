#!/usr/bin/env python3
"""
The option parser engine.

Each raw token is split at its first '=',
resolved against the schema by exact name,
converted by the schema's converter table,
and stored under the option's long name.

Last write wins when an option is given more than once.
Unknown options and invalid values are logged as diagnostics,
collected on the result, and skipped.
With strict=True, the first failure is raised instead.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 1st party imports
from declopts._interface import UNRECOGNIZED_MSG
from declopts._structs.token import Token
from declopts.errors import ParseError, UnknownOption
from declopts.parsers.result import ParseResult

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from declopts._interface import Schema_p
    from declopts._structs.option_spec import OptionSpec
    from declopts._structs.parsed_value import ParsedValue
# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class OptionParser:
    """ Parses argument lists against a single schema.
    Holds no per-parse state, so one instance can be reused, and shared.
    """

    def __init__(self, schema:Schema_p):
        self._schema      = schema
        self._converters  = schema.finalize()

    @property
    def schema(self) -> Schema_p:
        return self._schema

    def parse_token(self, raw:str) -> tuple[OptionSpec, ParsedValue]:
        """ Resolve and convert a single token.
        Raises UnknownOption or InvalidValue.
        """
        token = Token.split(raw)
        match self._schema.index(token.name):
            case int() as idx if idx < len(self._converters):
                return self._schema[idx], self._converters[idx](token)
            case _:
                raise UnknownOption(UNRECOGNIZED_MSG, token.raw, token=token.raw, name=token.name)

    def parse(self, tokens:Iterable[str], *, strict:bool=False) -> ParseResult:
        """
          Parses the list of arguments against the schema.
        """
        logging.debug("Parsing args: %s", tokens)
        values  : dict[str, ParsedValue]  = {}
        errors  : list[ParseError]        = []
        for raw in tokens:
            try:
                spec, val = self.parse_token(raw)
            except ParseError as err:
                logging.warning("%s", err)
                if strict:
                    raise
                errors.append(err)
                continue

            if spec.canonical in values:
                logging.debug("Overwriting: %s : %s -> %s", spec.canonical, values[spec.canonical].value, val.value)
            else:
                logging.debug("Setting: %s = %s", spec.canonical, val.value)

            values[spec.canonical] = val

        return ParseResult(self._schema, values, errors)

def parse(schema:Schema_p, tokens:Iterable[str], *, strict:bool=False) -> ParseResult:
    return OptionParser(schema).parse(tokens, strict=strict)

def parse_argv(schema:Schema_p, argv:Sequence[str], *, strict:bool=False) -> ParseResult:
    """ Parse a full argv, skipping the program name at argv[0] """
    match argv:
        case str() | bytes():
            raise TypeError("argv must be a sequence of tokens, not a single string", argv)
        case []:
            return parse(schema, [], strict=strict)
        case [_, *rest]:
            return parse(schema, rest, strict=strict)
        case _:
            raise TypeError("argv must be a sequence of tokens", type(argv))
