import pytest
from fastapi.testclient import TestClient

from pswitcher.main import create_app
from pswitcher.services.store import ProfileStore


class RecordingSwitcher:
    def __init__(self):
        self.applied = []

    def apply(self, profile):
        self.applied.append(profile)


class FakeServer:
    def __init__(self):
        self.stopped = False

    def shutdown(self):
        self.stopped = True


@pytest.fixture
def store(tmp_path):
    return ProfileStore(tmp_path / "profiles.json")


@pytest.fixture
def web_dir(tmp_path):
    d = tmp_path / "web"
    d.mkdir()
    (d / "index.html").write_text("<h1>profiles</h1>", encoding="utf-8")
    return d


@pytest.fixture
def switcher():
    return RecordingSwitcher()


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def client(store, web_dir, switcher, server):
    app = create_app(store, web_dir, switcher=switcher, server=server)
    return TestClient(app)
