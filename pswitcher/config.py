# pswitcher/config.py
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 9000
    db_path: Path = Path.home() / ".pswitcher" / "profiles.json"
    web_dir: Path = ROOT / "web"
    git: str = "git"
    git_scope: str = "--global"
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Settings from the environment, after pulling in a local .env if present."""
    load_dotenv()
    env = {
        "host": os.environ.get("PSWITCHER_HOST"),
        "port": os.environ.get("PSWITCHER_PORT"),
        "db_path": os.environ.get("PSWITCHER_DB"),
        "web_dir": os.environ.get("PSWITCHER_WEB_DIR"),
        "git": os.environ.get("PSWITCHER_GIT"),
        "git_scope": os.environ.get("PSWITCHER_GIT_SCOPE"),
        "log_level": os.environ.get("PSWITCHER_LOG_LEVEL"),
    }
    settings = Settings(**{k: v for k, v in env.items() if v is not None})
    settings.db_path = settings.db_path.expanduser()
    return settings
