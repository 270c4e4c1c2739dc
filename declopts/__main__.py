#!/usr/bin/env python3
"""
The declopts cli runner
"""
# Imports:
from __future__ import annotations

import sys
import logging as logmod

##-- logging
logging         = logmod.root
logging.setLevel(logmod.WARNING)
##-- end logging

def main():
    from declopts.main import DeclOptsMain
    main_obj = DeclOptsMain()
    sys.exit(main_obj.main())

if __name__ == "__main__":
    main()
