"""Pytest bootstrap for local source imports.

The ``pytest`` console script can run with a sys.path that excludes the
repository root. Ensure ``import lazyinquire`` resolves to the local package,
and keep the developer's real user config out of every test.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)

if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    from lazyinquire import config
    from lazyinquire.ui import render_config

    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "lazyinquire-config.json")
    monkeypatch.delenv("NO_COLOR", raising=False)
    render_config.set_global_render_config(None)
    yield
    render_config.set_global_render_config(None)
