"""Configuration entry model for a single target."""

from pydantic import BaseModel, ConfigDict


class TargetEntry(BaseModel):
    """One `<os>-<arch>` entry of DotnetToolWrapper.json."""

    model_config = ConfigDict(extra="ignore")

    program: str
