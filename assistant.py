"""
Explicit signal channel between the Help page and the AI assistant panel.

The host wires receivers with ``connect``; the Help page calls ``emit``.
The signal carries no payload and the assistant's behaviour is outside
this module.
"""

from __future__ import annotations

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

Receiver = Callable[[], None]


class AssistantChannel:
    """A named, payload-free signal with explicitly connected receivers."""

    def __init__(self, name: str = "open-assistant"):
        self.name = name
        self._receivers: List[Receiver] = []

    def connect(self, receiver: Receiver) -> Receiver:
        """Register *receiver*; returns it so this works as a decorator."""
        if receiver not in self._receivers:
            self._receivers.append(receiver)
        return receiver

    def disconnect(self, receiver: Receiver) -> None:
        if receiver in self._receivers:
            self._receivers.remove(receiver)

    @property
    def receivers(self) -> List[Receiver]:
        return list(self._receivers)

    def emit(self) -> int:
        """Call every receiver in connection order.  Returns the count."""
        logger.info("Signal '%s' emitted to %d receiver(s)", self.name, len(self._receivers))
        for receiver in list(self._receivers):
            receiver()
        return len(self._receivers)
