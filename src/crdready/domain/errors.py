"""Errors surfaced while waiting for resource definitions to be established."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class EstablishmentError(RuntimeError):
    """Base class for failures attributed to a single resource definition."""

    def __init__(self, message: str, *, name: str) -> None:
        super().__init__(message)
        self.name = name


class NamingConflictError(EstablishmentError):
    """The store rejected the definition's names; waiting will not help."""

    def __init__(self, name: str, *, reason: str) -> None:
        super().__init__(
            f"Due to the naming conflict {reason}, the CustomResourceDefinition {name} "
            "will never become established",
            name=name,
        )
        self.reason = reason


class EstablishmentTimeoutError(EstablishmentError):
    def __init__(self, name: str, *, attempts: int) -> None:
        super().__init__(
            f"CustomResourceDefinition {name} was not established within a reasonable "
            "amount of time.",
            name=name,
        )
        self.attempts = attempts


class ResourceDefinitionFetchError(EstablishmentError):
    """The store could not serve the definition's current status."""

    def __init__(self, name: str, *, cause: BaseException) -> None:
        super().__init__(f"Failed to fetch CustomResourceDefinition {name}: {cause}", name=name)
        self.cause = cause


class AggregateEstablishmentError(RuntimeError):
    """Collects per-definition failures in ascending definition-name order.

    The string form is every wrapped message on its own line.
    """

    def __init__(self, errors: Iterable[EstablishmentError]) -> None:
        self.errors: tuple[EstablishmentError, ...] = tuple(
            sorted(errors, key=lambda error: error.name)
        )
        super().__init__("\n".join(str(error) for error in self.errors))

    def __str__(self) -> str:
        return "\n".join(str(error) for error in self.errors)


__all__ = [
    "AggregateEstablishmentError",
    "EstablishmentError",
    "EstablishmentTimeoutError",
    "NamingConflictError",
    "ResourceDefinitionFetchError",
]
