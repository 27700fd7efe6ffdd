"""
Schemas for documents and groups used by the cycling system.

A Document stands for one open editor buffer. Its identity string is the
backing file path when there is one, otherwise the buffer's display name,
so unsaved and special buffers (``*scratch*``) take part in grouping too.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Direction(str, Enum):
    """Direction of travel through a group's rotation."""
    FORWARD = "forward"
    BACKWARD = "backward"


class Document(BaseModel):
    """An open editor buffer."""
    name: str                    # Display name, always present
    path: Optional[str] = None   # Backing file, if any

    model_config = {"frozen": True}

    @property
    def identity(self) -> str:
        return self.path if self.path is not None else self.name

    def __str__(self) -> str:
        return self.identity


class DocumentGroup(BaseModel):
    """All open documents sharing one digest, sorted by identity."""
    digest: str
    members: List[Document] = Field(default_factory=list)

    @property
    def identities(self) -> List[str]:
        return [doc.identity for doc in self.members]
