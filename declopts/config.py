#!/usr/bin/env python3
"""
Loading of the optional declopts toml config.

Looks in the working directory for 'declopts.toml',
then for a [tool.declopts] table in 'pyproject.toml'.

eg:
  [logging.stream]
  level = "INFO"

  [parsing]
  strict = true
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
import tomllib
# ##-- end stdlib imports

# ##-- 3rd party imports
from jgdv.structs.chainguard import ChainGuard
# ##-- end 3rd party imports

# ##-- 1st party imports
from declopts._interface import DEFAULT_FILENAMES, PYPROJ_TOML, TOOL_PREFIX
from declopts.errors import ConfigError

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

def _read_toml(path:pl.Path) -> dict:
    try:
        return tomllib.loads(path.read_text())
    except (tomllib.TOMLDecodeError, OSError) as err:
        raise ConfigError("Failed to read config file: %s : %s", path, err) from err

def _tool_table(data:dict) -> Maybe[dict]:
    """ Descend into the [tool.declopts] table of a pyproject """
    for key in TOOL_PREFIX.split("."):
        match data.get(key, None):
            case dict() as sub:
                data = sub
            case _:
                return None

    return data

def load(root:Maybe[pl.Path]=None) -> ChainGuard:
    """ Load the first config found in root (default: cwd).
    Returns an empty ChainGuard when there is none.
    """
    root = pl.Path(root or pl.Path.cwd())
    for name in DEFAULT_FILENAMES:
        target = root / name
        if not target.is_file():
            continue

        match name, _read_toml(target):
            case str() as x, dict() as data if x == PYPROJ_TOML:
                table = _tool_table(data)
            case _, dict() as data:
                table = data

        if table is None:
            logging.debug("No %s table in: %s", TOOL_PREFIX, target)
            continue

        logging.debug("Loaded Config: %s", target)
        return ChainGuard(table)

    logging.debug("No Config Found in: %s", root)
    return ChainGuard({})
