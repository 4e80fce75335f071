r"""
'    __________.__
'    \______   \  |   ____   ______ ______
'     |    |  _/  |  /  _ \ / ____//  ___/
'     |    |   \  |_(  <_> < <_|  |\___ \
'     |______  /____/\____/ \__   /____  >
'            \/                |__|    \/
"""

import logging

# expose the main class
from .sequence import Seq

# expose the factory functions
from .factories import (
    from_iterable,
    of,
    empty,
    from_range,
    repeat,
    seq,
    S
)

# expose the free-function forms of the block operations
from .functions import (
    each,
    match,
    select,
    reject,
    partition,
    map,
    reduce
)

# expose supporting types
from .types import (
    NULL,
    is_null,
    AbsentValueError
)

from .config import LoggingConfig, configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does; map and reduce would shadow builtins, so the
# free functions are reached as bloqs.map etc.
__all__ = [
    "Seq",
    "from_iterable",
    "of",
    "empty",
    "from_range",
    "repeat",
    "seq",
    "S",
    "NULL",
    "is_null",
    "AbsentValueError",
    "LoggingConfig",
    "configure_logging"
]
