#!/usr/bin/env python3
"""



"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class DeclOptsError(Exception):
    """
      The base class for all declopts Errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific declopts Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)

class ConfigError(DeclOptsError):
    """ A configuration file could not be read """
    general_msg = "declopts Config Error:"
    pass
