"""Shared fixtures for CLI tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

_CONFIG = """\
secret: ${A2A_TEST_SECRET}
agent:
  name: Test Assistant
  version: "2.0.0"
  skills:
    - id: general
      name: General Assistant
      description: Answers questions
remote_agents:
  vaelor:
    url: https://vaelor.example.com
    token: vt
    alias: Vaelor
"""


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("A2A_TEST_SECRET", "s3cret")
    path = tmp_path / "bridge.yaml"
    path.write_text(_CONFIG)
    return path
