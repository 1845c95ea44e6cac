"""Domain port definitions for adapters."""

from __future__ import annotations

from .store import ResourceDefinitionNotFoundError, ResourceDefinitionStore

__all__ = ["ResourceDefinitionNotFoundError", "ResourceDefinitionStore"]
