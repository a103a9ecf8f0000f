"""Infrastructure layer - adapters for external systems.

Structure:
- synapse/: HTTP client for the SynapseFI API
- logging/: structlog console adapter
"""
