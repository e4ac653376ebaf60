"""pyoptional: a type-safe container for values that may be missing.

Optional[T] holds either exactly one non-None value (Present) or nothing
(Absent), with chainable map / filter / flat_map and fallback retrieval.

Flat imports (preferred):
    from pyoptional import Optional, Present, Absent
    from pyoptional import optional_return, NoSuchElementError

Submodule imports (for organization):
    from pyoptional.types import Optional, Present, AbsentType
    from pyoptional.decorators import optional_return
    from pyoptional.codec import encode, decode
"""

# Config
from pyoptional._config import OptionalConfig, get_config, init

# Logging
from pyoptional._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook

# Decorators
from pyoptional.decorators import optional_return, optional_return_async

# Errors
from pyoptional.errors import (
    FlatMapContractViolationError,
    NoSuchElementError,
    NullPointerError,
    OptionalError,
)

# Types
from pyoptional.types import Absent, AbsentType, Optional, Present

__all__ = [
    # Types
    'Absent',
    'AbsentType',
    # Errors
    'FlatMapContractViolationError',
    'NoSuchElementError',
    'NullPointerError',
    'Optional',
    # Config
    'OptionalConfig',
    'OptionalError',
    'Present',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    # Decorators
    'optional_return',
    'optional_return_async',
    'remove_log_hook',
]
