# pswitcher/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.staticfiles import StaticFiles

from pswitcher.routers import profiles
from pswitcher.services.errors import ProfileError
from pswitcher.services.store import ProfileStore
from pswitcher.services.switcher import GitSwitcher

log = logging.getLogger(__name__)


def create_app(store: ProfileStore, web_dir, switcher=None, server=None) -> FastAPI:
    app = FastAPI(title="Git Profile Switcher")
    app.state.store = store
    app.state.switcher = switcher or GitSwitcher()
    # set by the CLI once the listener exists
    app.state.server = server

    @app.exception_handler(ProfileError)
    async def profile_error(request: Request, exc: ProfileError):
        log.warning("%s %s failed: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=500)

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            return PlainTextResponse("Invalid request method", status_code=405)
        return await http_exception_handler(request, exc)

    app.include_router(profiles.router, tags=["profiles"])

    # serve the frontend
    app.mount("/web", StaticFiles(directory=str(web_dir), html=True), name="web")
    return app
