"""
namecycle: cycle through open documents that share a base name.

``/src/foo.c``, ``/include/foo.h`` and ``/doc/foo.org`` all digest to ``foo``;
advance and retreat step through them in identity order, wrapping around.
"""

from namecycle.cycle.digest import digest
from namecycle.cycle.grouping import group, group_all, document_identity
from namecycle.cycle.navigator import next_document, rotation
from namecycle.cycle.schemas import Direction, Document, DocumentGroup
from namecycle.cycle.session import (
    EditorEnvironment, CycleCommands, advance, retreat, cycle
)

__version__ = "0.1.0"

__all__ = [
    "digest", "group", "group_all", "document_identity",
    "next_document", "rotation",
    "Direction", "Document", "DocumentGroup",
    "EditorEnvironment", "CycleCommands", "advance", "retreat", "cycle",
]
