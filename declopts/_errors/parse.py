#!/usr/bin/env python3
"""
These are the errors that can occur while parsing tokens.
They are recoverable: the parser collects them on the result,
and only raises them when asked to be strict.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from jgdv import Maybe
# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from .base import DeclOptsError

class ParseError(DeclOptsError):
    """ In the course of parsing CLI input, a failure occurred. """
    general_msg = "declopts CLI Parsing Failure:"

    def __init__(self, *args, token:Maybe[str]=None, name:Maybe[str]=None):
        super().__init__(*args)
        self.token = token
        self.name  = name

    def __eq__(self, other) -> bool:
        match other:
            case ParseError():
                return type(self) is type(other) and str(self) == str(other) and self.token == other.token
            case _:
                return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self), str(self), self.token))

class UnknownOption(ParseError):
    """ A token, or lookup key, named no declared option """
    general_msg = "declopts Unknown Option:"
    pass

class InvalidValue(ParseError):
    """ A token's value could not be converted to its option's type """
    general_msg = "declopts Invalid Value:"
    pass

class ParseErrors(ParseError):
    """ Aggregate of multiple parse errors """
    general_msg = "declopts CLI Parsing Failures:"

    def __init__(self, errors:Iterable[ParseError]):
        self.errors = tuple(errors)
        super().__init__("%s parse errors: %s", len(self.errors), "; ".join(str(x) for x in self.errors))
