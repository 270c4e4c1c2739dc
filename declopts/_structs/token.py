#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass
# ##-- end stdlib imports

# ##-- 1st party imports
from declopts._interface import ASSIGN_SEP

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jgdv import Maybe
# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(frozen=True)
class Token:
    """ One raw argument, split at its first '='.
    value is None when there is no '=', and may be empty for 'name='.
    No quoting or escaping is interpreted.
    """
    raw    : str
    name   : str
    value  : Maybe[str] = None

    @classmethod
    def split(cls, raw:str) -> Token:
        name, sep, value = raw.partition(ASSIGN_SEP)
        if not sep:
            return cls(raw, name)

        return cls(raw, name, value)

    @property
    def has_value(self) -> bool:
        return self.value is not None
