"""Event types, event masks and per-window hook tables."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


class EventType(enum.IntEnum):
    """Core event type numbers."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


MAX_EVENT = 36


class EventMask(enum.IntFlag):
    """Event selection bits."""

    NONE = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    EXPOSURE = 1 << 15
    STRUCTURE_NOTIFY = 1 << 17


@dataclass(frozen=True)
class Event:
    """One input event delivered to a window.

    ``close_request`` marks a window-manager request to close the window.
    ``count`` is the number of expose events still to follow.
    """

    type: int
    keycode: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    close_request: bool = False


Hook = Callable[..., Any]


@dataclass
class _Slot:
    func: Hook | None = None
    param: Any = None
    mask: int = 0


@dataclass
class HookTable:
    """Callbacks registered on a window, one slot per event type."""

    slots: list[_Slot] = field(default_factory=lambda: [_Slot() for _ in range(MAX_EVENT)])

    def _slot(self, event_type: int) -> _Slot:
        if not 0 <= int(event_type) < MAX_EVENT:
            raise ValueError(f"event type {event_type} out of range 0..{MAX_EVENT - 1}")
        return self.slots[int(event_type)]

    def hook(self, event_type: int, mask: int, func: Hook | None, param: Any = None) -> None:
        """Register ``func`` for ``event_type``, selecting events with ``mask``."""
        slot = self._slot(event_type)
        slot.func, slot.param, slot.mask = func, param, int(mask)

    def key_hook(self, func: Hook | None, param: Any = None) -> None:
        """Register a handler for key releases: ``func(keycode, param)``."""
        self.hook(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, func, param)

    def mouse_hook(self, func: Hook | None, param: Any = None) -> None:
        """Register a handler for button presses: ``func(button, x, y, param)``."""
        self.hook(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, func, param)

    def expose_hook(self, func: Hook | None, param: Any = None) -> None:
        """Register a handler for exposure: ``func(param)``."""
        self.hook(EventType.EXPOSE, EventMask.EXPOSURE, func, param)

    def event_mask(self) -> int:
        """Return the union of the masks of all slots."""
        mask = 0
        for slot in self.slots:
            mask |= slot.mask
        return mask

    def dispatch(self, event: Event) -> None:
        """Call the handlers that ``event`` concerns."""
        if event.close_request:
            destroy = self.slots[EventType.DESTROY_NOTIFY]
            if destroy.func is not None:
                destroy.func(destroy.param)
        if not 0 <= event.type < MAX_EVENT:
            return
        slot = self.slots[event.type]
        func = slot.func
        if func is None:
            return
        kind = event.type
        if kind < EventType.KEY_PRESS:
            return
        if kind in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            func(event.keycode, slot.param)
        elif kind in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            func(event.button, event.x, event.y, slot.param)
        elif kind == EventType.MOTION_NOTIFY:
            func(event.x, event.y, slot.param)
        elif kind == EventType.EXPOSE:
            if event.count == 0:
                func(slot.param)
        else:
            func(slot.param)