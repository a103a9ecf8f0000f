"""Domain enums package."""

from synapsefi.domain.enums.http_method import HttpMethod

__all__ = ["HttpMethod"]
