"""Synapse response mappers."""

from synapsefi.infrastructure.synapse.mappers.user_mapper import SynapseUserMapper

__all__ = ["SynapseUserMapper"]
