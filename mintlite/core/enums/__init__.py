"""Core enums package.

Usage:
    from mintlite.core.enums import ErrorCode, Environment
"""

from mintlite.core.enums.environment import Environment
from mintlite.core.enums.error_code import ErrorCode

__all__ = [
    "Environment",
    "ErrorCode",
]
