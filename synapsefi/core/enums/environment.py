"""Synapse API environments.

Developer mode on a client configuration selects SANDBOX; otherwise calls
go to PRODUCTION. Each client carries its own environment, so sandbox and
production clients can live in the same process.
"""

from enum import Enum


class Environment(str, Enum):
    """Target environment of the remote API."""

    PRODUCTION = "production"
    SANDBOX = "sandbox"
