"""
schemas/blob.py
----------------

Opaque binary payload tagged with its media type. The client returns
a :class:`Blob` for images, audio, video, archives and office
documents, and accepts one as a request body that is sent unchanged.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Blob(BaseModel):
    data: bytes = b""
    type: str = ""  # media type, e.g. ``image/png``

    model_config = ConfigDict(frozen=True)

    @property
    def size(self) -> int:
        return len(self.data)
