"""
Symphony client - session-managed access to the pod REST API.
"""

import logging

from .core import *  # noqa: F403
from .core import __all__ as _core_all

# Silent unless the application configures logging (see setup_logging).
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = list(_core_all)
