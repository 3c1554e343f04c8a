# pswitcher/services/errors.py


class ProfileError(Exception):
    """Base class for profile store failures; surfaced to the UI as HTTP 500."""


class StorageError(ProfileError):
    """Backing file is unreadable, unwritable or malformed."""


class NotFoundError(ProfileError):
    pass


class DuplicateError(ProfileError):
    pass
