"""Port for reading resource definitions from the cluster store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from crdready.domain.model import ResourceDefinition


class ResourceDefinitionNotFoundError(LookupError):
    """Raised by stores when no definition with the requested name exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"CustomResourceDefinition {name} not found")
        self.name = name


@runtime_checkable
class ResourceDefinitionStore(Protocol):
    """Read-only access to the current snapshot of a resource definition."""

    def get(self, name: str) -> ResourceDefinition: ...


__all__ = ["ResourceDefinitionNotFoundError", "ResourceDefinitionStore"]
