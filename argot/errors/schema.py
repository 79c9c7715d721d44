#!/usr/bin/env python3
"""
Errors in declaring schemas.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import DeveloperError

class SchemaError(DeveloperError):
    """ A schema, or the registry holding it, is incorrectly set up """
    general_msg = "Argot Schema Failure:"
    pass

class MalformedSchemaError(SchemaError):
    """ A spec or schema definition breaks an invariant """
    pass

class DuplicateSchemaError(SchemaError):
    """ A command or value type name was registered twice.
    Registering after the registry was frozen is a plain SchemaError.
    """
    pass

class MissingHandlerError(DeveloperError):
    """ A command was run that has no handler registered """
    pass

class ArgAccessError(DeveloperError):
    """ A parsed value was requested as the wrong type, or isn't present """
    pass
