"""Domain entities."""

from synapsefi.domain.entities.user import User

__all__ = ["User"]
