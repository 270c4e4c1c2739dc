#!/usr/bin/env python3
"""
The tagged variant stored for each supplied option.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, ConfigDict, model_validator
# ##-- end 3rd party imports

# ##-- 1st party imports
from declopts._interface import ValueType_e

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Self
# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParsedValue(BaseModel):
    """ Exactly one of {int, float, str, bool}, discriminated by its tag.
    The value's type must be exactly the tag's python type,
    so True is not an INTEGER, and 2 is not a FLOAT.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    tag    : ValueType_e
    value  : bool|int|float|str

    @classmethod
    def of(cls, tag:ValueType_e, value:bool|int|float|str) -> ParsedValue:
        return cls(tag=tag, value=value)

    @model_validator(mode="after")
    def _check_tag(self) -> Self:
        if type(self.value) is not self.tag.pytype:
            raise ValueError("Value does not match its tag", self.tag.name, type(self.value).__name__)
        return self

    def __repr__(self) -> str:
        return f"<ParsedValue[{self.tag.name}]: {self.value!r}>"
