# pswitcher/models.py
from pydantic import BaseModel, ConfigDict


class Profile(BaseModel):
    # unknown keys in the profile file are carried through rewrites
    model_config = ConfigDict(extra="allow")

    name: str
    email: str
