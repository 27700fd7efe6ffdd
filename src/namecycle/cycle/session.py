"""
Session entry points: advance and retreat against a live editor.

The editor is reached only through the EditorEnvironment protocol. Every call
re-reads the open documents, so buffers opened, closed or renamed between
calls are picked up without any stored cursor to fall out of sync.
"""

import logging
from typing import Any, Optional, Protocol, Sequence

from namecycle.cycle.grouping import group
from namecycle.cycle.navigator import next_document
from namecycle.cycle.schemas import Direction

logger = logging.getLogger(__name__)


class EditorEnvironment(Protocol):
    """What the hosting editor has to provide."""

    def get_identity(self, doc: Any) -> str:
        """Backing file path of ``doc``, or its display name."""
        ...

    def list_open_documents(self) -> Sequence[Any]:
        ...

    def get_current_document(self) -> Any:
        ...

    def activate_document(self, doc: Any) -> None:
        ...


def cycle(env: EditorEnvironment, direction: Direction) -> Optional[Any]:
    """
    Move to the neighbour of the current document within its group.

    Returns:
        The document that was activated, or None when nothing changed
        (singleton group, or the neighbour is the current document).

    Errors raised by the environment propagate unchanged.
    """
    current = env.get_current_document()
    members = group(current, env.list_open_documents(), identity=env.get_identity)
    target = next_document(current, members, direction, identity=env.get_identity)

    if target is None or env.get_identity(target) == env.get_identity(current):
        logger.debug("No %s move from %s", Direction(direction).value, env.get_identity(current))
        return None

    logger.debug(
        "Cycling %s: %s -> %s",
        Direction(direction).value, env.get_identity(current), env.get_identity(target)
    )
    env.activate_document(target)
    return target


def advance(env: EditorEnvironment) -> None:
    """Activate the next document with the same base name."""
    cycle(env, Direction.FORWARD)


def retreat(env: EditorEnvironment) -> None:
    """Activate the previous document with the same base name."""
    cycle(env, Direction.BACKWARD)


class CycleCommands:
    """
    The two zero-argument commands bound to one environment.

    Key bindings and menu entries call ``advance`` / ``retreat`` without
    arguments; this class carries the environment for them.
    """

    def __init__(self, env: EditorEnvironment):
        self.env = env

    def advance(self) -> None:
        advance(self.env)

    def retreat(self) -> None:
        retreat(self.env)
