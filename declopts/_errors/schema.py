#!/usr/bin/env python3
"""
Errors raised while declaring a schema
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

class SchemaError(DeclOptsError):
    """ An option declaration was malformed """
    general_msg = "declopts Schema Error:"
    pass

class DuplicateOption(SchemaError):
    """ An option identifier was declared more than once """
    general_msg = "declopts Duplicate Option:"
    pass
