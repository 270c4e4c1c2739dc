#!/usr/bin/env python3
"""
Constants, enums and protocols shared across declopts.

"""
# ruff: noqa:

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
from importlib.metadata import PackageNotFoundError, version
# ##-- end stdlib imports

# ##-- types
# isort: off
import abc
import collections.abc
from typing import TYPE_CHECKING, cast, assert_type, assert_never
from typing import Generic, NewType
# Protocols:
from typing import Protocol, runtime_checkable
# Typing Decorators:
from typing import no_type_check, final, override, overload

if TYPE_CHECKING:
    from typing import Final
    from typing import ClassVar, Any, LiteralString
    from typing import Never, Self, Literal
    from collections.abc import Iterable, Iterator, Callable, Generator
    from collections.abc import Sequence, Mapping, MutableMapping, Hashable
    from jgdv import Maybe

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
try:
    __version__ : Final[str] = version("declopts")
except PackageNotFoundError:
    __version__ = "0.0.0"

ASSIGN_SEP         : Final[str]              = "="
PRINTER_NAME       : Final[str]              = "_printer"
TOOL_PREFIX        : Final[str]              = "tool.declopts"
DECLOPTS_TOML      : Final[str]              = "declopts.toml"
PYPROJ_TOML        : Final[str]              = "pyproject.toml"
DEFAULT_FILENAMES  : Final[tuple[str, ...]]  = (DECLOPTS_TOML, PYPROJ_TOML)
LASTERR            : Final[str]              = "declopts.lasterror"

UNRECOGNIZED_MSG   : Final[str]              = "command line option %s not recognized"
INVALID_VALUE_MSG  : Final[str]              = "command line option %s provided invalid value"

##--|

class ValueType_e(enum.Enum):
    """ The closed set of option value types.
    Each member's value is the python type its parsed values have.
    """
    INTEGER = int
    FLOAT   = float
    TEXT    = str
    FLAG    = bool

    @property
    def pytype(self) -> type:
        return self.value

    @classmethod
    def build(cls, val:ValueType_e|type|str) -> ValueType_e:
        """ Coerce a type, type name, or tag name to a ValueType_e.
        Raises ValueError for anything outside the closed set.
        """
        match val:
            case ValueType_e():
                return val
            case type() if val is bool:
                return cls.FLAG
            case type() if val is int:
                return cls.INTEGER
            case type() if val is float:
                return cls.FLOAT
            case type() if val is str:
                return cls.TEXT
            case "int" | "integer" | "INTEGER":
                return cls.INTEGER
            case "float" | "FLOAT" | "double":
                return cls.FLOAT
            case "str" | "text" | "TEXT":
                return cls.TEXT
            case "bool" | "flag" | "FLAG":
                return cls.FLAG
            case _:
                raise ValueError("Unsupported option value type", val)

class ExitCodes(enum.IntEnum):
    SUCCESS          = 0
    PYTHON_FAIL      = 1
    PARSE_FAIL       = 2
    BAD_CONFIG       = 3
    BAD_SCHEMA       = 4

##--|

@runtime_checkable
class OptionSpec_p(Protocol):
    """ The minimal surface of a declared option """
    short      : str
    long       : str
    value_type : ValueType_e

    def names(self) -> tuple[str, ...]: ...

    @property
    def canonical(self) -> str: ...

@runtime_checkable
class Schema_p(Protocol):

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[OptionSpec_p]: ...

    def __getitem__(self, idx:int) -> OptionSpec_p: ...

    def __contains__(self, val:Any) -> bool: ...

    def index(self, name:str) -> int: ...

    def finalize(self) -> tuple[Callable, ...]: ...

@runtime_checkable
class Converter_p(Protocol):
    """ Maps the raw value part of a token to a typed value.
    Raises ValueError when the text cannot be converted.
    """

    def __call__(self, value:Maybe[str]) -> Any: ...
