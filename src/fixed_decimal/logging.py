"""
The package logger. Records are written to stderr and are not propagated to the root logger.
"""

import logging

logger = logging.getLogger("fixed_decimal")
logger.propagate = False
logger.setLevel(logging.INFO)

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
logger.addHandler(_handler)
