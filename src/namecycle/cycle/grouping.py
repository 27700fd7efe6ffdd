"""
Group resolver: find the open documents that share a reference's digest.
"""

import logging
from itertools import groupby
from typing import Any, Callable, List, Sequence

from namecycle.cycle.digest import digest
from namecycle.cycle.schemas import DocumentGroup

logger = logging.getLogger(__name__)


def document_identity(doc: Any) -> str:
    """
    Default identity accessor.

    Documents expose ``identity``; anything else (plain strings in
    particular) is its own identity.
    """
    identity = getattr(doc, "identity", None)
    if isinstance(identity, str):
        return identity
    return str(doc)


def group(
    reference: Any,
    all_open: Sequence[Any],
    identity: Callable[[Any], str] = document_identity
) -> List[Any]:
    """
    Return the documents of ``all_open`` whose digest matches the reference.

    Args:
        reference: The document whose group is wanted
        all_open: Snapshot of every open document
        identity: Accessor returning a document's identity string

    Returns:
        The matching documents, sorted ascending by identity (code point
        order). The reference is always a member.
    """
    ref_identity = identity(reference)
    key = digest(ref_identity)

    members = [doc for doc in all_open if digest(identity(doc)) == key]
    if not any(identity(doc) == ref_identity for doc in members):
        members.append(reference)

    members.sort(key=identity)
    logger.debug("Group %r for %s has %d member(s)", key, ref_identity, len(members))
    return members


def group_all(
    all_open: Sequence[Any],
    identity: Callable[[Any], str] = document_identity
) -> List[DocumentGroup]:
    """
    Partition a document snapshot into its digest groups.

    Groups are ordered by digest and members by identity. Members must be
    ``Document`` instances; other handles go through ``group``.
    """
    def sort_key(doc):
        return digest(identity(doc)), identity(doc)

    ordered = sorted(all_open, key=sort_key)
    return [
        DocumentGroup(digest=key, members=list(docs))
        for key, docs in groupby(ordered, key=lambda doc: digest(identity(doc)))
    ]
