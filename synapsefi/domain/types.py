"""Shared type aliases."""

from typing import Any, TypeAlias

GenericResponse: TypeAlias = dict[str, Any]
"""Decoded JSON object from any endpoint whose shape is not specially modeled."""
