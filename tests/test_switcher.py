import subprocess

from pswitcher.models import Profile
from pswitcher.services.switcher import GitSwitcher


class Done:
    def __init__(self, returncode=0, stderr=""):
        self.returncode = returncode
        self.stdout = ""
        self.stderr = stderr


def test_apply_sets_name_and_email(monkeypatch):
    calls = []
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kw: calls.append(cmd) or Done())
    GitSwitcher().apply(Profile(name="alice", email="a@x.com"))
    assert calls == [
        ["git", "config", "--global", "user.name", "alice"],
        ["git", "config", "--global", "user.email", "a@x.com"],
    ]


def test_apply_stops_after_failure(monkeypatch, caplog):
    calls = []
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kw: calls.append(cmd) or Done(1, "locked"))
    GitSwitcher(scope="").apply(Profile(name="alice", email="a@x.com"))
    assert calls == [["git", "config", "user.name", "alice"]]
    assert "locked" in caplog.text


def test_missing_git_binary_is_logged(caplog):
    GitSwitcher(git="/nonexistent/git").apply(Profile(name="alice", email="a@x.com"))
    assert "Can't run /nonexistent/git" in caplog.text
