#!/usr/bin/env python3
"""
declopts : declare typed command line options, then parse argument lists against them.

"""
# Imports:
from __future__ import annotations

from ._interface import __version__, ValueType_e, ExitCodes
from .structs import OptionSpec, OptionHandle, ParsedValue, Token
from .schema import Schema
from .parsers import ConverterRegistry, OptionParser, ParseResult, parse, parse_argv
from . import errors
