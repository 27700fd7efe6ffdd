"""
Minor mode: the on/off switch and key bindings for same-name cycling.

The cycling core has no enabled state of its own. This layer owns the
toggle and routes bound key sequences to the advance/retreat commands while
enabled.
"""

import logging
from typing import Callable, Dict, Optional

from namecycle.core.config import Settings, settings as default_settings
from namecycle.cycle.session import CycleCommands, EditorEnvironment

logger = logging.getLogger(__name__)

Command = Callable[[], None]


class SameNameMode:
    """
    Enable/disable lifecycle for one editor environment.

    The editor forwards key sequences to ``handle_key``; a key is consumed
    only while the mode is enabled and the key is bound.
    """

    def __init__(self, env: EditorEnvironment, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.commands = CycleCommands(env)
        self.keymap: Dict[str, Command] = {
            self.settings.advance_key: self.commands.advance,
            self.settings.retreat_key: self.commands.retreat,
        }
        self._enabled = False
        if self.settings.enabled_by_default:
            self.enable()

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        if self._enabled:
            return
        self._enabled = True
        logger.info(
            "Same-name cycling enabled (%s)",
            ", ".join(sorted(self.keymap))
        )

    def disable(self) -> None:
        if not self._enabled:
            return
        self._enabled = False
        logger.info("Same-name cycling disabled")

    def toggle(self) -> bool:
        """Flip the mode and return the new state."""
        if self._enabled:
            self.disable()
        else:
            self.enable()
        return self._enabled

    def handle_key(self, key: str) -> bool:
        """
        Run the command bound to ``key``.

        Returns:
            True if the key was consumed, False if the editor should handle it
        """
        if not self._enabled:
            return False
        command = self.keymap.get(key)
        if command is None:
            return False
        command()
        return True
