# pswitcher/routers/profiles.py
from fastapi import APIRouter, BackgroundTasks, Depends, Form, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from pswitcher.models import Profile
from pswitcher.services.store import ProfileStore

router = APIRouter()

UPDATE_NOT_FOUND = "Can't find the profile to update"


def get_store(request: Request) -> ProfileStore:
    return request.app.state.store


@router.get("/list")
def list_profiles(store: ProfileStore = Depends(get_store)):
    return JSONResponse([p.model_dump() for p in store.get_profiles()])


@router.post("/add")
def add_profile(name: str = Form(""), email: str = Form(""),
                store: ProfileStore = Depends(get_store)):
    store.add_profile(Profile(name=name, email=email), allow_update=False)
    return Response()


@router.post("/update")
def update_profile(name: str = Form(""), email: str = Form(""),
                   store: ProfileStore = Depends(get_store)):
    # probed up front so the UI gets a fixed message; add_profile checks again
    if not store.has_profile(name):
        return PlainTextResponse(UPDATE_NOT_FOUND, status_code=500)
    store.add_profile(Profile(name=name, email=email), allow_update=True)
    return Response()


@router.post("/switch")
def switch_profile(request: Request, background: BackgroundTasks, name: str = Form(""),
                   store: ProfileStore = Depends(get_store)):
    profile = store.get_profile(name)
    # outcome of the git call is not reported back to the caller
    background.add_task(request.app.state.switcher.apply, profile)
    return Response()


@router.get("/close")
def close(request: Request, background: BackgroundTasks):
    handle = request.app.state.server
    if handle is not None:
        background.add_task(handle.shutdown)
    return Response()
