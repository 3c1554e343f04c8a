# pswitcher/services/switcher.py
import logging
import subprocess

from pswitcher.models import Profile

log = logging.getLogger(__name__)


class GitSwitcher:
    """Applies a profile as the git identity (user.name / user.email).

    Runs after the /switch response has been sent; failures are only logged.
    """

    def __init__(self, git: str = "git", scope: str = "--global"):
        self.git = git
        self.scope = scope

    def _set(self, key: str, value: str) -> bool:
        cmd = [self.git, "config"]
        if self.scope:
            cmd.append(self.scope)
        cmd += [key, value]
        try:
            proc = subprocess.run(cmd, text=True, capture_output=True, check=False)
        except OSError as e:
            log.error("Can't run %s: %s", self.git, e)
            return False
        if proc.returncode != 0:
            out = proc.stderr.strip() or proc.stdout.strip()
            log.error("git config %s failed (%s): %s", key, proc.returncode, out)
            return False
        return True

    def apply(self, profile: Profile) -> None:
        if self._set("user.name", profile.name) and self._set("user.email", profile.email):
            log.info("Switched git identity to %s <%s>", profile.name, profile.email)
