# pswitcher/server.py
import logging

import uvicorn

log = logging.getLogger(__name__)


class ServerHandle:
    """Owns the uvicorn listener so /close can stop it."""

    def __init__(self, app, host: str, port: int, log_level: str = "info"):
        self.host = host
        self.port = port
        self.server = uvicorn.Server(
            uvicorn.Config(app, host=host, port=port, log_level=log_level.lower())
        )

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def started(self) -> bool:
        return self.server.started

    def serve(self) -> None:
        log.info("Serving API and web UI on %s", self.url)
        self.server.run()
        log.info("Listener on %s stopped", self.url)

    def shutdown(self) -> None:
        log.info("Shutdown requested for %s", self.url)
        self.server.should_exit = True
