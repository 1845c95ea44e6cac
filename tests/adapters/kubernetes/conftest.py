from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def crd_payload() -> dict[str, Any]:
    return {
        "apiVersion": "apiextensions.k8s.io/v1",
        "kind": "CustomResourceDefinition",
        "metadata": {
            "name": "foos.bar.io",
            "uid": "4b6f0d1e-0000-4000-8000-000000000000",
            "finalizers": ["customresourcecleanup.apiextensions.k8s.io"],
        },
        "spec": {
            "group": "bar.io",
            "names": {"plural": "foos", "kind": "Foo"},
            "scope": "Namespaced",
        },
        "status": {
            "acceptedNames": {"plural": "foos", "kind": "Foo"},
            "conditions": [
                {
                    "type": "NamesAccepted",
                    "status": "True",
                    "lastTransitionTime": "2024-05-01T12:00:00Z",
                    "reason": "NoConflicts",
                    "message": "no conflicts found",
                },
                {
                    "type": "Established",
                    "status": "True",
                    "lastTransitionTime": "2024-05-01T12:00:01Z",
                    "reason": "InitialNamesAccepted",
                    "message": "the initial names have been accepted",
                },
            ],
            "storedVersions": ["v1"],
        },
    }
