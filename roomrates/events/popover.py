"""Scoped outside-click subscription for transient popovers (date picker, row menus).

The pointer listener is attached to the bus only while the popover is open.
Every close path (explicit close, a selection, leaving a ``with`` block)
runs the same release step, so the listener never outlives the popover.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Optional

from roomrates.events.Event_Bus import EventBus, UI_POINTER_DOWN, UI_POPOVER_CLOSED

logger = logging.getLogger(__name__)


class PopoverSubscription:
    def __init__(self, bus: EventBus, name: str, on_close: Optional[Callable[[str], None]] = None):
        self._bus = bus
        self.name = name
        self._on_close = on_close
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self) -> "PopoverSubscription":
        if self._open:
            return self
        self._bus.subscribe(UI_POINTER_DOWN, self._handle_pointer)
        self._open = True
        logger.debug("Popover %s opened", self.name)
        return self

    def close(self, reason: str = "explicit") -> bool:
        """Release the listener. Returns False when already closed."""
        if not self._open:
            return False
        self._bus.unsubscribe(UI_POINTER_DOWN, self._handle_pointer)
        self._open = False
        logger.debug("Popover %s closed (%s)", self.name, reason)
        self._bus.publish(UI_POPOVER_CLOSED, {"popover": self.name, "reason": reason})
        if self._on_close is not None:
            self._on_close(reason)
        return True

    def select(self, value: Any, on_select: Callable[[Any], None]) -> None:
        """Deliver a selection then close; the listener is released even if on_select raises."""
        try:
            on_select(value)
        finally:
            self.close("selection")

    def _handle_pointer(self, event_name: str, payload: Any):
        inside = bool(payload.get("inside")) if isinstance(payload, dict) else False
        if not inside:
            self.close("outside")

    def __enter__(self) -> "PopoverSubscription":
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close("unmount")
        return False
