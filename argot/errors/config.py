#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import ArgotError

class ConfigError(ArgotError):
    """ Something went wrong loading a config file """
    general_msg = "Argot Config Error:"
    pass

class MissingConfigError(ConfigError):
    pass

class InvalidConfigError(ConfigError):
    pass
