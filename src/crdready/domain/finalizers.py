"""Finalizer list editing for resource definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crdready.domain.model import ResourceDefinition


def has_finalizer(definition: ResourceDefinition, token: str) -> bool:
    return token in definition.finalizers


def add_finalizer(definition: ResourceDefinition, token: str) -> None:
    """Append ``token`` unless it is already present."""

    if token not in definition.finalizers:
        definition.finalizers.append(token)


def remove_finalizer(definition: ResourceDefinition, token: str) -> None:
    """Drop ``token`` if present, keeping the order of the remaining tokens."""

    definition.finalizers = [finalizer for finalizer in definition.finalizers if finalizer != token]


__all__ = ["add_finalizer", "has_finalizer", "remove_finalizer"]
