"""
Keyboard bindings.

Keys are bound by name; the window translates pygame key codes
into names and feeds them to ``Keyboard.key_down``.
"""

import logging
from typing import Callable, Dict, Optional

import pygame

logger = logging.getLogger(__name__)

KEY_CODES: Dict[str, int] = {
    "space": pygame.K_SPACE,
    "return": pygame.K_RETURN,
    "up": pygame.K_UP,
    "w": pygame.K_w,
}

KEY_NAMES: Dict[int, str] = {code: name for name, code in KEY_CODES.items()}


class Signal:
    """A list of callbacks dispatched together."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], None]] = []

    def add(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def dispatch(self) -> None:
        for callback in list(self._callbacks):
            callback()

    def remove_all(self) -> None:
        self._callbacks.clear()


class Key:
    """A bound key with a press signal."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.is_down = False
        self.on_down = Signal()

    def _press(self) -> None:
        """Called by the keyboard when this key goes down."""
        if not self.is_down:
            self.is_down = True
            self.on_down.dispatch()

    def _release(self) -> None:
        self.is_down = False


class Keyboard:
    """Named key bindings."""

    def __init__(self) -> None:
        self._keys: Dict[str, Key] = {}

    def add_key(self, name: str) -> Optional[Key]:
        """Bind a key by name. Returns None for names the keyboard does not know."""
        name = name.lower()
        if name not in KEY_CODES:
            logger.warning(f"Unknown key name: {name}")
            return None
        if name not in self._keys:
            self._keys[name] = Key(name)
        return self._keys[name]

    def key_down(self, name: str) -> bool:
        """Press a key by name. Returns True if it was bound."""
        key = self._keys.get(name)
        if key is None:
            return False
        key._press()
        return True

    def key_up(self, name: str) -> None:
        key = self._keys.get(name)
        if key is not None:
            key._release()

    def reset(self) -> None:
        """Drop every binding."""
        for key in self._keys.values():
            key.on_down.remove_all()
        self._keys.clear()
