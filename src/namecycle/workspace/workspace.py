"""
In-memory editor workspace.

This module provides a Workspace that keeps a list of open documents and a
current document, implementing the EditorEnvironment protocol. It backs the
CLI and can stand in for an editor wherever one is not available.
"""

import logging
from typing import Dict, Iterable, List, Optional, Union

from namecycle.core.settings import PATH_SEPARATORS
from namecycle.cycle.digest import base_name
from namecycle.cycle.schemas import Document

logger = logging.getLogger(__name__)


class DocumentNotOpenError(ValueError):
    """The document is not open in this workspace."""


class DuplicateDocumentError(ValueError):
    """Another open document already has this identity."""


class NoCurrentDocumentError(ValueError):
    """The workspace has no open documents."""


def make_document(identity: str) -> Document:
    """
    Build a Document from an identity string.

    Identities containing a path separator are file-backed and take their
    base name as display name; anything else (``*scratch*``) is a buffer
    with no file.
    """
    if any(sep in identity for sep in PATH_SEPARATORS):
        return Document(name=base_name(identity) or identity, path=identity)
    return Document(name=identity)


class Workspace:
    """
    Manager for the open documents of one editing session.

    Documents are kept in the order they were opened, keyed by identity.
    """

    def __init__(self, identities: Optional[Iterable[str]] = None):
        self._documents: Dict[str, Document] = {}
        self._current: Optional[str] = None
        if identities:
            self.open_many(identities)

    # EditorEnvironment protocol

    def get_identity(self, doc: Document) -> str:
        return doc.identity

    def list_open_documents(self) -> List[Document]:
        return list(self._documents.values())

    def get_current_document(self) -> Document:
        if self._current is None:
            raise NoCurrentDocumentError("No document is open")
        return self._documents[self._current]

    def activate_document(self, doc: Union[Document, str]) -> None:
        key = self._key(doc)
        self._current = key
        logger.debug("Activated %s", key)

    # Workspace management

    def open(self, name_or_path: str, path: Optional[str] = None) -> Document:
        """
        Open a document, or re-activate it if already open.

        Args:
            name_or_path: Identity string, or the display name when ``path``
                is given
            path: Optional backing file

        Returns:
            The open document
        """
        if path is not None:
            doc = Document(name=name_or_path, path=path)
        else:
            doc = make_document(name_or_path)

        existing = self._documents.get(doc.identity)
        if existing is not None:
            self._current = existing.identity
            return existing

        self._documents[doc.identity] = doc
        if self._current is None:
            self._current = doc.identity
        logger.debug("Opened %s", doc.identity)
        return doc

    def open_many(self, identities: Iterable[str]) -> List[Document]:
        current = self._current
        docs = [self.open(identity) for identity in identities]
        # Re-opening an existing identity activates it; restore the focus.
        if current is not None:
            self._current = current
        elif docs:
            self._current = docs[0].identity
        return docs

    def close(self, doc: Union[Document, str]) -> None:
        """
        Close a document. If it was current, the document opened just
        before it becomes current (or the next one, if it was first).
        """
        key = self._key(doc)
        order = list(self._documents)
        index = order.index(key)
        del self._documents[key]
        logger.debug("Closed %s", key)

        if self._current == key:
            remaining = list(self._documents)
            if not remaining:
                self._current = None
            else:
                self._current = remaining[max(index - 1, 0)]

    def rename(self, doc: Union[Document, str], new_identity: str) -> Document:
        """Give an open document a new identity, keeping its position."""
        key = self._key(doc)
        renamed = make_document(new_identity)
        if renamed.identity != key and renamed.identity in self._documents:
            raise DuplicateDocumentError(f"'{new_identity}' is already open")

        self._documents = {
            (renamed.identity if k == key else k): (renamed if k == key else v)
            for k, v in self._documents.items()
        }
        if self._current == key:
            self._current = renamed.identity
        logger.debug("Renamed %s -> %s", key, renamed.identity)
        return renamed

    def find(self, identity: str) -> Optional[Document]:
        return self._documents.get(identity)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc: Union[Document, str]) -> bool:
        identity = doc.identity if isinstance(doc, Document) else doc
        return identity in self._documents

    def _key(self, doc: Union[Document, str]) -> str:
        identity = doc.identity if isinstance(doc, Document) else doc
        if identity not in self._documents:
            raise DocumentNotOpenError(f"'{identity}' is not open")
        return identity
