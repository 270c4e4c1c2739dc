#!/usr/bin/env python3
"""
Errors raised when retrieving values from a parse result
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from .base import DeclOptsError

class AccessError(DeclOptsError):
    """ A lookup into a parse result failed """
    general_msg = "declopts Access Error:"
    pass

class MissingOption(AccessError, KeyError):
    """ The option is declared, but was not supplied """
    general_msg = "declopts Missing Option:"
    pass

class TypeMismatch(AccessError, TypeError):
    """ The requested type disagrees with the stored value's type """
    general_msg = "declopts Type Mismatch:"
    pass
