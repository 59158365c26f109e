"""
Fingerprint model — how to recognize a project type on disk.

Fingerprints live in ``ionkit/core/data/fingerprints.yml``, one entry
per project type.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Fingerprint(BaseModel):
    """How to detect a project type in a directory.

    A directory matches when every criterion that is set holds:
    the manifest lists one of ``dependencies_any_of`` (in
    ``dependencies`` or ``devDependencies``), and at least one of
    ``files_any_of`` exists.  A fingerprint with no criteria never
    matches.
    """

    manifest: str = "package.json"
    dependencies_any_of: list[str] = Field(default_factory=list)
    files_any_of: list[str] = Field(default_factory=list)
    description: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.dependencies_any_of and not self.files_any_of
