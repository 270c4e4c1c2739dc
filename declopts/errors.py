#!/usr/bin/env python3
"""
These are the declopts specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from declopts._errors.base import DeclOptsError, ConfigError
from declopts._errors.schema import SchemaError, DuplicateOption
from declopts._errors.parse import ParseError, ParseErrors, UnknownOption, InvalidValue
from declopts._errors.access import AccessError, MissingOption, TypeMismatch

# ##-- end 1st party imports

__all__ = ( # noqa: RUF022
    "DeclOptsError",
    "ConfigError",
    "SchemaError",
    "DuplicateOption",
    "ParseError",
    "ParseErrors",
    "UnknownOption",
    "InvalidValue",
    "AccessError",
    "MissingOption",
    "TypeMismatch",
)
