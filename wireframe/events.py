"""Windows, an event queue and the loop that dispatches events to hooks."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Optional

from .image import Image

Callback = Callable[..., Any]


class EventType(IntEnum):
    """Event numbers as used by the X protocol."""

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


@dataclass
class Event:
    """An event addressed to a window.

    ``delete_window`` marks a client message asking for the window to close.
    """

    type: EventType
    window: Optional["Window"] = None
    keycode: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    delete_window: bool = False

    def __post_init__(self) -> None:
        self.type = EventType(self.type)


class Window:
    """A window with a pixel canvas and one hook per event type."""

    def __init__(self, width: int, height: int, title: str = "") -> None:
        self.width = width
        self.height = height
        self.title = title
        self.canvas = Image(width, height)
        self.hooks: dict[EventType, Callback] = {}
        self.texts: list[tuple[int, int, int, str]] = []
        self.font: str | None = None
        self.pointer = (0, 0)
        self.cursor_visible = True

    def hook(self, event_type: EventType | int, callback: Callback | None) -> None:
        """Call ``callback`` for events of ``event_type``; ``None`` removes it."""
        kind = EventType(event_type)
        if callback is None:
            self.hooks.pop(kind, None)
        else:
            self.hooks[kind] = callback

    def key_hook(self, callback: Callback | None) -> None:
        """Hook key releases; the callback receives the key code."""
        self.hook(EventType.KEY_RELEASE, callback)

    def mouse_hook(self, callback: Callback | None) -> None:
        """Hook button presses; the callback receives (button, x, y)."""
        self.hook(EventType.BUTTON_PRESS, callback)

    def expose_hook(self, callback: Callback | None) -> None:
        """Hook exposures; the callback receives no arguments."""
        self.hook(EventType.EXPOSE, callback)

    def dispatch(self, event: Event) -> None:
        """Call the hooks registered for ``event``."""
        if event.type == EventType.CLIENT_MESSAGE and event.delete_window:
            on_destroy = self.hooks.get(EventType.DESTROY_NOTIFY)
            if on_destroy is not None:
                on_destroy()
        callback = self.hooks.get(event.type)
        if callback is None:
            return
        kind = event.type
        if kind in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            callback(event.keycode)
        elif kind in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            callback(event.button, event.x, event.y)
        elif kind == EventType.MOTION_NOTIFY:
            callback(event.x, event.y)
        elif kind == EventType.EXPOSE:
            if event.count == 0:
                callback()
        else:
            callback()


class Display:
    """A set of windows sharing one event queue."""

    def __init__(self, screen_width: int = 1920, screen_height: int = 1080) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self._windows: list[Window] = []
        self._queue: deque[Event] = deque()
        self._loop_hook: Callback | None = None
        self._ended = False

    @property
    def windows(self) -> tuple[Window, ...]:
        """Open windows, most recently created first."""
        return tuple(self._windows)

    @property
    def pending(self) -> int:
        """Number of queued events."""
        return len(self._queue)

    def new_window(self, width: int, height: int, title: str = "") -> Window:
        """Open a window; its first exposure is queued ahead of other events."""
        window = Window(width, height, title)
        self._windows.insert(0, window)
        self._queue.appendleft(Event(EventType.EXPOSE, window=window))
        return window

    def destroy_window(self, window: Window) -> None:
        """Close ``window``; raises ``ValueError`` if it is not open here."""
        for index, candidate in enumerate(self._windows):
            if candidate is window:
                del self._windows[index]
                return
        raise ValueError("window is not open on this display")

    def loop_hook(self, callback: Callback | None) -> None:
        """Call ``callback`` whenever the event queue has been drained."""
        self._loop_hook = callback

    def post(self, event: Event) -> None:
        """Queue ``event`` for the loop."""
        self._queue.append(event)

    def _find(self, window: Window | None) -> Window | None:
        return next((w for w in self._windows if w is window), None)

    def loop(self) -> None:
        """Dispatch events until no window is open or ``loop_end`` is called.

        Without a loop hook nothing can queue further events once the queue
        is empty, so the loop returns then.
        """
        while self._windows and not self._ended:
            while not self._ended and (self._loop_hook is None or self._queue):
                if not self._queue:
                    return
                event = self._queue.popleft()
                window = self._find(event.window)
                if window is not None:
                    window.dispatch(event)
            if self._loop_hook is not None:
                self._loop_hook()

    def loop_end(self) -> None:
        """Make the running loop stop."""
        self._ended = True

    def screen_size(self) -> tuple[int, int]:
        """Return the screen size as (width, height)."""
        return self.screen_width, self.screen_height

    def pixel_put(self, window: Window, x: int, y: int, color: int) -> None:
        """Draw one pixel in ``window``; pixels outside it are dropped."""
        if 0 <= x < window.width and 0 <= y < window.height:
            window.canvas.set_pixel(x, y, color & 0xFFFFFF)

    def put_image_to_window(self, window: Window, image: Image, x: int, y: int) -> None:
        """Copy ``image`` into ``window`` with its corner at (x, y)."""
        window.canvas.blit(image, x, y)

    def string_put(self, window: Window, x: int, y: int, color: int, text: str) -> None:
        """Record ``text`` drawn at (x, y) in ``color``."""
        window.texts.append((x, y, color & 0xFFFFFF, text))

    def set_font(self, window: Window, name: str) -> None:
        """Select the font used for text in ``window``."""
        window.font = name

    def mouse_move(self, window: Window, x: int, y: int) -> None:
        """Move the pointer to (x, y) relative to ``window``."""
        window.pointer = (x, y)

    def mouse_get_pos(self, window: Window) -> tuple[int, int]:
        """Return the pointer position relative to ``window``."""
        return window.pointer

    def mouse_hide(self, window: Window) -> None:
        """Hide the pointer over ``window``."""
        window.cursor_visible = False

    def mouse_show(self, window: Window) -> None:
        """Show the pointer over ``window``."""
        window.cursor_visible = True