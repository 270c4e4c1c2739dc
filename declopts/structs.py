#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

from declopts._structs.option_spec import OptionSpec, OptionHandle
from declopts._structs.parsed_value import ParsedValue
from declopts._structs.token import Token
from declopts._structs.logger_spec import LoggerSpec
