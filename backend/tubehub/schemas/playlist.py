"""Playlist Schemas — Pydantic models for playlist request bodies.

Invariants:
    - Both schemas accept missing fields: the "Name is required" rule lives in
      core/playlist_rules.py so every surface reports it the same way
    - PlaylistUpdate.provided_fields() only returns keys the client actually sent
"""

from pydantic import BaseModel, ConfigDict, Field


class PlaylistCreate(BaseModel):
    """Playlist creation payload."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    description: str | None = Field(None, max_length=5000)


class PlaylistUpdate(BaseModel):
    """Partial playlist update — unknown keys are ignored."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    description: str | None = Field(None, max_length=5000)

    def provided_fields(self) -> dict:
        return self.model_dump(exclude_unset=True)
