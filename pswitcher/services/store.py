# pswitcher/services/store.py
import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from pswitcher.models import Profile
from .errors import DuplicateError, NotFoundError, StorageError

log = logging.getLogger(__name__)


class ProfileStore:
    """Profiles kept as a JSON array in a single file.

    Nothing is cached: every call reads the whole file and every mutation
    rewrites it. Writes are not transactional and take no lock, so a crash
    mid-write or two concurrent writers can corrupt the file.
    A missing file reads as an empty store. Keys other than name and email
    are kept as they are when the file is rewritten.
    """

    def __init__(self, path):
        self.path = Path(path).expanduser()

    def get_profiles(self) -> List[Profile]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Can't read {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise StorageError(f"Malformed profile file {self.path}: {e}") from e
        if not isinstance(raw, list):
            raise StorageError(f"Malformed profile file {self.path}: expected a list")
        try:
            return [Profile.model_validate(item) for item in raw]
        except ValidationError as e:
            raise StorageError(f"Malformed profile file {self.path}: {e}") from e

    def save_profiles(self, profiles: List[Profile]) -> None:
        data = [p.model_dump() for p in profiles]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Can't write {self.path}: {e}") from e

    def get_profile(self, name: str) -> Profile:
        for p in self.get_profiles():
            if p.name == name:
                return p
        raise NotFoundError(f"Profile '{name}' not found")

    def has_profile(self, name: str) -> bool:
        return any(p.name == name for p in self.get_profiles())

    def add_profile(self, profile: Profile, allow_update: bool = False) -> None:
        profiles = self.get_profiles()
        idx = next((i for i, p in enumerate(profiles) if p.name == profile.name), None)

        if allow_update:
            if idx is None:
                raise NotFoundError(f"Profile '{profile.name}' not found")
            profiles[idx] = profiles[idx].model_copy(update={"email": profile.email})
            log.info("Updated profile %s", profile.name)
        else:
            if idx is not None:
                raise DuplicateError(f"Profile '{profile.name}' already exists")
            profiles.append(Profile(name=profile.name, email=profile.email))
            log.info("Added profile %s", profile.name)

        self.save_profiles(profiles)
