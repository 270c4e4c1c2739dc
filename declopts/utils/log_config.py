#!/usr/bin/env python3
"""
Logging setup for the declopts cli.

Two loggers are configured:
- the root stream logger, for diagnostics, writing to stderr.
- the printer, which replaces 'print', writing bare messages to stdout.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from collections.abc import Mapping
# ##-- end stdlib imports

# ##-- 1st party imports
from declopts._interface import PRINTER_NAME
from declopts._structs.logger_spec import LoggerSpec
from declopts.errors import ConfigError

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any, Final
    from jgdv.structs.chainguard import ChainGuard
# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

STREAM_DEFAULTS  : Final[dict] = {"level": "WARNING", "target": "stderr", "format": "{levelname:<8} : {message}"}
PRINTER_DEFAULTS : Final[dict] = {"level": "INFO", "target": "stdout", "format": "{message}", "propagate": False}

class DeclOptsLogConfig:
    """ Utility class to setup stderr and stdout logging.
      Creates a 'printer' logger, so instead of using `print`,
      the cli notifies the user through logging.
    """

    def __init__(self):
        self.stream_spec  = LoggerSpec.build(STREAM_DEFAULTS, name=LoggerSpec.RootName)
        self.printer_spec = LoggerSpec.build(PRINTER_DEFAULTS, name=PRINTER_NAME)
        self.stream_spec.apply()
        self.printer_spec.apply()
        logging.debug("Post Log Setup")

    def setup(self, config:ChainGuard) -> None:
        """ a setup that uses config values """
        self.clear()
        self.stream_spec  = self._build(config.on_fail({}).logging.stream(), STREAM_DEFAULTS, LoggerSpec.RootName)
        self.printer_spec = self._build(config.on_fail({}).logging.printer(), PRINTER_DEFAULTS, PRINTER_NAME)
        self.stream_spec.apply()
        self.printer_spec.apply()

    def _build(self, data:Any, defaults:dict, name:str) -> LoggerSpec:
        match data:
            case Mapping():
                merged = defaults | dict(data)
            case x:
                raise ConfigError("Logging config should be a table: %s : %s", name, x)

        try:
            return LoggerSpec.build(merged, name=name)
        except ValueError as err:
            raise ConfigError("Bad logging config: %s : %s", name, err) from err

    def clear(self) -> None:
        self.stream_spec.clear()
        self.printer_spec.clear()

    @property
    def printer(self) -> logmod.Logger:
        return self.printer_spec.get()
