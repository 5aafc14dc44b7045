"""Root conftest: isolate each test from the runner environment."""

import os

import pytest
import structlog

from openai_costs.log import clear_secrets


@pytest.fixture(autouse=True)
def _clean_action_env(monkeypatch: pytest.MonkeyPatch):
    # The suite may itself run inside an Actions job.
    for key in list(os.environ):
        if key.startswith(("INPUT_", "GITHUB_")):
            monkeypatch.delenv(key)
    clear_secrets()
    yield
    clear_secrets()
    structlog.reset_defaults()
