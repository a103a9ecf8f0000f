"""Domain layer - entities, value objects, errors and protocols.

Pure Python; no HTTP or logging backend dependencies.
"""
