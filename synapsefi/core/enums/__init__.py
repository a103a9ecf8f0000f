"""Core enums package.

Usage:
    from synapsefi.core.enums import ErrorCode, Environment
"""

from synapsefi.core.enums.environment import Environment
from synapsefi.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
