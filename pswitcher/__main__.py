# pswitcher/__main__.py
import argparse
import logging
import sys
import threading
import time
from pathlib import Path

from pswitcher.config import load_settings
from pswitcher.main import create_app
from pswitcher.server import ServerHandle
from pswitcher.services.store import ProfileStore
from pswitcher.services.switcher import GitSwitcher

log = logging.getLogger("pswitcher")


def parse_args(argv=None):
    ap = argparse.ArgumentParser(prog="pswitcher", description="Switch between stored git identities.")
    ap.add_argument("--host", help="Host to listen on")
    ap.add_argument("--port", type=int, help="Port to listen on")
    ap.add_argument("--db", help="Profile JSON file")
    ap.add_argument("--window", action=argparse.BooleanOptionalAction, default=True,
                    help="Open the UI in an embedded window")
    return ap.parse_args(argv)


def _wait_started(handle: ServerHandle, thread: threading.Thread) -> bool:
    while thread.is_alive():
        if handle.started:
            return True
        time.sleep(0.05)
    return handle.started


def open_window(handle: ServerHandle, webview) -> None:
    thread = threading.Thread(target=handle.serve, daemon=True)
    thread.start()
    if not _wait_started(handle, thread):
        log.error("Can't start the server on %s", handle.url)
        sys.exit(1)

    webview.create_window("Git Profile Switcher", handle.url + "/web/index.html",
                          width=550, height=400, resizable=True)
    webview.start()
    handle.shutdown()
    thread.join(timeout=5)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())
    except ValueError as e:
        log.error("Invalid configuration: %s", e)
        sys.exit(1)

    if args.host is not None:
        settings.host = args.host
    if args.port is not None:
        settings.port = args.port
    if args.db is not None:
        settings.db_path = Path(args.db).expanduser()

    app = create_app(
        ProfileStore(settings.db_path),
        settings.web_dir,
        switcher=GitSwitcher(settings.git, settings.git_scope),
    )
    handle = ServerHandle(app, settings.host, settings.port, settings.log_level)
    app.state.server = handle
    log.info("Profiles stored in %s", settings.db_path)

    if args.window:
        try:
            import webview
        except ImportError as e:
            log.error("Can't open the window (%s), serving headless on %s", e, handle.url)
        else:
            open_window(handle, webview)
            return

    handle.serve()
    if not handle.started:
        sys.exit(1)


if __name__ == "__main__":
    main()
