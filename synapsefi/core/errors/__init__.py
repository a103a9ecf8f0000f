"""Core errors package."""

from synapsefi.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
