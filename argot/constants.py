##-- std imports
from __future__ import annotations

from typing import Final
##-- end std imports

FLAG_PREFIX            : Final[str]              = "--"
END_OF_FLAGS           : Final[str]              = "--"
PARAM_ASSIGN_SEP       : Final[str]              = "="
DEFAULT_SELECTOR       : Final[str]              = "subcommand"
DEFAULT_INT_BITS       : Final[int]              = 64
DEFAULT_TOKENIZER      : Final[str]              = "whitespace"

DATE_FORMAT            : Final[str]              = "yyyy-mm-dd"
DATE_STRPTIME          : Final[str]              = "%Y-%m-%d"

TRUE_STRS              : Final[frozenset[str]]   = frozenset({"true", "yes", "on", "1"})
FALSE_STRS             : Final[frozenset[str]]   = frozenset({"false", "no", "off", "0"})

LOGGER_ROOT            : Final[str]              = "argot"
