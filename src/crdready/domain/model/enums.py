"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ConditionType(StrEnum):
    ESTABLISHED = "Established"
    NAMES_ACCEPTED = "NamesAccepted"
    NON_STRUCTURAL_SCHEMA = "NonStructuralSchema"
    TERMINATING = "Terminating"
    KUBERNETES_API_APPROVAL_POLICY_CONFORMANT = "KubernetesAPIApprovalPolicyConformant"


class ConditionStatus(StrEnum):
    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"
