#!/usr/bin/env python3
"""
The declopts demonstration cli.

Declares an integer option (-f, -first) and a float option (-s, -second),
parses the process args, and prints both values.

  $ python -m declopts -first=2 -s=3.14
  2 3.14

Diagnostics go to stderr. Exit codes are from declopts._interface.ExitCodes:
0 on success, 2 when any argument failed to parse.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
import sys
# ##-- end stdlib imports

# ##-- 3rd party imports
import stackprinter
# ##-- end 3rd party imports

# ##-- 1st party imports
import declopts.errors as derrs
from declopts import config as dconfig
from declopts._interface import LASTERR, ExitCodes, ValueType_e
from declopts.parsers.parser import parse_argv
from declopts.schema import Schema
from declopts.utils.log_config import DeclOptsLogConfig

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from jgdv import Maybe
    from declopts._structs.option_spec import OptionHandle
    from declopts.parsers.result import ParseResult
# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

MISSING_VAL : str = "-"

def example_schema() -> tuple[Schema, OptionHandle[int], OptionHandle[float]]:
    schema, first   = Schema().declare(ValueType_e.INTEGER, "-f", "-first")
    schema, second  = schema.declare(ValueType_e.FLOAT, "-s", "-second")
    return schema, first, second

class ErrorHandlers:
    """ Mixin for mapping errors to exit codes """

    def discriminate_exit(self, err:Exception) -> int:
        result : int
        match err:
            case derrs.ParseError():
                result = self._parse_exit(err)
            case derrs.ConfigError():
                result = self._config_error_exit(err)
            case derrs.SchemaError():
                result = self._schema_exit(err)
            case _:
                result = self.python_exit(err)
        ##--|
        return result

    def _parse_exit(self, err:derrs.ParseError) -> int:
        # Diagnostics have already been logged by the parser
        logging.debug("[%s] : %s", type(err).__name__, err)
        return ExitCodes.PARSE_FAIL

    def _config_error_exit(self, err:derrs.ConfigError) -> int:
        logging.error("[%s] : Config Error: %s", type(err).__name__, err)
        return ExitCodes.BAD_CONFIG

    def _schema_exit(self, err:derrs.SchemaError) -> int:
        logging.error("[%s] : Schema Error: %s", type(err).__name__, err)
        return ExitCodes.BAD_SCHEMA

    def python_exit(self, err:Exception) -> int:
        lasterr = pl.Path(LASTERR).resolve()
        try:
            lasterr.write_text(stackprinter.format(err))
        except OSError:
            logging.error("[%s] : Python Error:", type(err).__name__, exc_info=err)
        else:
            logging.error("[%s] : Python Error, full stacktrace written to %s", type(err).__name__, lasterr)

        return ExitCodes.PYTHON_FAIL

class DeclOptsMain(ErrorHandlers):
    """ declopts.main and the associated exit handlers

    loads the optional config, sets up logging,
    parses the args, and reports the values.
    """

    def __init__(self, *, args:Maybe[Sequence[str]]=None, root:Maybe[pl.Path]=None):
        self.raw_args     = list(sys.argv if args is None else args)
        self.root         = root
        self.result_code  = ExitCodes.SUCCESS
        self.log_config   = DeclOptsLogConfig()

    def main(self) -> int:
        try:
            config = dconfig.load(self.root)
            self.log_config.setup(config)
            strict = config.on_fail(False).parsing.strict()  # noqa: FBT003
            schema, first, second = example_schema()
            result = parse_argv(schema, self.raw_args, strict=bool(strict))
            self.report(result, first, second)
            result.raise_for_errors()
        except Exception as err:  # noqa: BLE001
            self.result_code = self.discriminate_exit(err)
        else:
            self.result_code = ExitCodes.SUCCESS
        finally:
            self.log_config.clear()

        return self.result_code

    def report(self, result:ParseResult, *handles:OptionHandle) -> None:
        values = [result.maybe(x) for x in handles]
        self.log_config.printer.info(" ".join(MISSING_VAL if x is None else str(x) for x in values))
