# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import SchemaError, StateValidationError, OracleLimitError
from .stops import Stop, INT64_MAX, INT64_MIN

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "OracleLimitError",
    # core models
    "Stop",
    "INT64_MAX",
    "INT64_MIN",
]
