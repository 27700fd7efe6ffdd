"""
Circular navigation through an ordered group.

The group is turned into a rotation (its order followed by its first element
again) so that stepping past the last member lands on the first one.
"""

import logging
from typing import Any, Callable, List, Optional, Sequence

from namecycle.cycle.grouping import document_identity
from namecycle.cycle.schemas import Direction

logger = logging.getLogger(__name__)


def rotation(ordered_group: Sequence[Any]) -> List[Any]:
    """Return the group order with its first element appended at the end."""
    items = list(ordered_group)
    if items:
        items.append(items[0])
    return items


def next_document(
    reference: Any,
    ordered_group: Sequence[Any],
    direction: Direction = Direction.FORWARD,
    identity: Callable[[Any], str] = document_identity
) -> Optional[Any]:
    """
    Find the neighbour of ``reference`` in ``ordered_group``.

    Args:
        reference: The document to step away from
        ordered_group: The group, sorted ascending by identity
        direction: FORWARD for the successor, BACKWARD for the predecessor
        identity: Accessor returning a document's identity string

    Returns:
        The neighbouring document, wrapping around at either end. For a
        singleton group this is the reference itself. None when the group
        is empty or does not contain the reference.
    """
    direction = Direction(direction)
    items = list(ordered_group)
    if direction is Direction.BACKWARD:
        items.reverse()

    ref_identity = identity(reference)
    remaining = iter(rotation(items))
    for doc in remaining:
        if identity(doc) == ref_identity:
            return next(remaining, None)

    logger.debug("%s is not in its group; no neighbour", ref_identity)
    return None
