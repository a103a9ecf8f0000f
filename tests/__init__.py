"""Test suite for the synapsefi client.

Test structure:
- unit/: Unit tests - domain objects, builder, decoder and mapper in isolation
- integration/: Client tests against a mocked HTTP layer (pytest-httpx)

No test reaches the real Synapse API.
"""
