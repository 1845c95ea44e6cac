from __future__ import annotations

import pytest

from crdready.domain.backoff import BackoffConfig
from tests.helpers.resource_definitions import RecordingSleep


@pytest.fixture
def fast_backoff() -> BackoffConfig:
    return BackoffConfig(max_attempts=3, initial_interval=0.001, factor=2.0)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture(autouse=True)
def _clear_crdready_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CRDREADY_API_SERVER",
        "CRDREADY_TOKEN",
        "CRDREADY_CA_FILE",
        "CRDREADY_INSECURE_SKIP_TLS_VERIFY",
        "CRDREADY_MAX_ATTEMPTS",
        "CRDREADY_INITIAL_INTERVAL",
        "CRDREADY_BACKOFF_FACTOR",
    ):
        monkeypatch.delenv(name, raising=False)
