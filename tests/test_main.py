"""
Startup announcement of the server entry point, with uvicorn's socket binding stubbed.
"""
from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import pytest
import uvicorn

# Makes the mockapi package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mockapi.__main__ import MockServer, build_server  # noqa: E402
from mockapi.core import config as core_config  # noqa: E402


@pytest.fixture()
def server(monkeypatch):
    monkeypatch.setenv("PORT", "4321")
    core_config.get_settings.cache_clear()
    yield build_server(core_config.get_settings())
    core_config.get_settings.cache_clear()


def test_build_server_uses_settings_port(server):
    assert isinstance(server, MockServer)
    assert server.config.port == 4321


def test_running_line_logged_after_bind(server, monkeypatch, caplog):
    async def bound(self, sockets=None):
        self.started = True

    monkeypatch.setattr(uvicorn.Server, "startup", bound)
    with caplog.at_level(logging.INFO, logger="mockapi"):
        asyncio.run(server.startup())
    assert "Mock server is running on http://localhost:4321" in caplog.text


def test_no_running_line_when_bind_fails(server, monkeypatch, caplog):
    async def bind_failed(self, sockets=None):
        raise SystemExit(1)

    monkeypatch.setattr(uvicorn.Server, "startup", bind_failed)
    with caplog.at_level(logging.INFO, logger="mockapi"):
        with pytest.raises(SystemExit):
            asyncio.run(server.startup())
    assert "Mock server is running" not in caplog.text
