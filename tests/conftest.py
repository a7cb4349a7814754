# ruff: noqa: E402

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import forge_init.log as forge_log

GIT_IDENTITY = {
    "GIT_AUTHOR_NAME": "Test User",
    "GIT_AUTHOR_EMAIL": "test@example.com",
    "GIT_COMMITTER_NAME": "Test User",
    "GIT_COMMITTER_EMAIL": "test@example.com",
}
ISOLATED_ENV_VARS = (
    "FORGE_INIT_LOG_LEVEL",
    "FORGE_INIT_NO_COLOR",
    "FORGE_INIT_GIT",
    "FOUNDRY_SRC",
    "FOUNDRY_OUT",
    "FOUNDRY_LIBS",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for key, value in GIT_IDENTITY.items():
        monkeypatch.setenv(key, value)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("LC_ALL", "C")
    for key in ISOLATED_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(forge_log, "_state", forge_log._LogState())
