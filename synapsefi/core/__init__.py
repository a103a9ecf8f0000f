"""Core shared kernel.

Foundational pieces used across all layers:
- Result types for railway-oriented programming
- Base error class and error codes
- Constants and settings

The core module has NO dependencies on other layers.
"""

from synapsefi.core.enums import Environment, ErrorCode
from synapsefi.core.errors import DomainError
from synapsefi.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "Environment",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
