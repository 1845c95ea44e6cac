"""Public interface for the Kubernetes adapter."""

from __future__ import annotations

from .client import CRD_COLLECTION_PATH, KubernetesAPIError, KubernetesResourceDefinitionStore
from .schema import ConditionPayload, CustomResourceDefinitionPayload
from .translator import parse_condition, parse_resource_definition

__all__ = [
    "CRD_COLLECTION_PATH",
    "ConditionPayload",
    "CustomResourceDefinitionPayload",
    "KubernetesAPIError",
    "KubernetesResourceDefinitionStore",
    "parse_condition",
    "parse_resource_definition",
]
