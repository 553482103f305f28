"""
Run the mock server:

    python -m mockapi          # listens on $PORT (default 3000)
"""

from __future__ import annotations

import logging

import uvicorn

from mockapi.core.config import Settings, get_settings
from mockapi.core.logging_setup import setup_logging

logger = logging.getLogger("mockapi")


class MockServer(uvicorn.Server):
    """uvicorn.Server that announces itself once the listening socket is bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started and not self.should_exit:
            logger.info("Mock server is running on http://localhost:%s", self.config.port)


def build_server(settings: Settings) -> MockServer:
    config = uvicorn.Config(
        "mockapi.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return MockServer(config)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    build_server(settings).run()


if __name__ == "__main__":
    main()
