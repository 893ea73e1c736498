"""Keyboard and mouse state gathered from window messages, sampled once per frame."""

from __future__ import annotations

from enum import IntEnum

from terrascene.vector import Vector2

_KEY_COUNT = 256
_VK_LBUTTON = 0x01
_VK_RBUTTON = 0x02
_VK_MBUTTON = 0x04


class Message(IntEnum):
    """Window message codes the handler understands."""

    INPUT = 0x00FF
    KEY_DOWN = 0x0100
    KEY_UP = 0x0101
    MOUSE_MOVE = 0x0200
    LBUTTON_DOWN = 0x0201
    LBUTTON_UP = 0x0202
    RBUTTON_DOWN = 0x0204
    RBUTTON_UP = 0x0205
    MBUTTON_DOWN = 0x0207
    MBUTTON_UP = 0x0208


_BUTTON_EVENTS = {
    Message.LBUTTON_DOWN: (_VK_LBUTTON, True),
    Message.LBUTTON_UP: (_VK_LBUTTON, False),
    Message.RBUTTON_DOWN: (_VK_RBUTTON, True),
    Message.RBUTTON_UP: (_VK_RBUTTON, False),
    Message.MBUTTON_DOWN: (_VK_MBUTTON, True),
    Message.MBUTTON_UP: (_VK_MBUTTON, False),
}


def _signed_word(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _key_index(key: int | str) -> int:
    index = ord(key) if isinstance(key, str) else int(key)
    if not 0 <= index < _KEY_COUNT:
        raise IndexError(f"key code {key!r} out of range 0..{_KEY_COUNT - 1}")
    return index


class InputHandler:
    """Collects events as they arrive; ``update`` publishes them as this frame's state.

    Keys may be given as virtual-key codes or single characters such as ``"W"``.
    """

    def __init__(self) -> None:
        self._current = [False] * _KEY_COUNT
        self._previous = [False] * _KEY_COUNT
        self._incoming = [False] * _KEY_COUNT
        self._pending_delta = Vector2(0, 0)
        self._delta = Vector2(0, 0)
        self._current_position = Vector2(0, 0)
        self._incoming_position = Vector2(0, 0)

    def handle_event(self, message: int, w_param: int, l_param) -> bool:
        """Record one window message; return True if it was an input message.

        For ``MOUSE_MOVE`` the client position is packed into ``l_param`` as
        signed 16-bit x (low word) and y (high word). For ``INPUT``, ``l_param``
        is the raw mouse motion ``(dx, dy)``, or None for non-mouse devices.
        """
        try:
            kind = Message(message)
        except ValueError:
            return False

        if kind is Message.KEY_DOWN:
            self._incoming[_key_index(w_param)] = True
        elif kind is Message.KEY_UP:
            self._incoming[_key_index(w_param)] = False
        elif kind in _BUTTON_EVENTS:
            button, down = _BUTTON_EVENTS[kind]
            self._incoming[button] = down
        elif kind is Message.MOUSE_MOVE:
            self._incoming_position = Vector2(
                _signed_word(l_param), _signed_word(l_param >> 16)
            )
        elif kind is Message.INPUT and l_param is not None:
            dx, dy = l_param
            self._pending_delta += Vector2(dx, dy)
        return True

    def is_key_down(self, key: int | str) -> bool:
        return self._current[_key_index(key)]

    def is_key_pressed(self, key: int | str) -> bool:
        """True only on the frame the key went down."""
        index = _key_index(key)
        return self._current[index] and not self._previous[index]

    def is_key_released(self, key: int | str) -> bool:
        """True only on the frame the key went up."""
        index = _key_index(key)
        return self._previous[index] and not self._current[index]

    def is_button_down(self, button: int) -> bool:
        return self._current[_key_index(button)]

    @property
    def mouse_position(self) -> Vector2:
        return Vector2(self._current_position.x, self._current_position.y)

    @property
    def mouse_delta(self) -> Vector2:
        """Raw mouse motion accumulated over the last frame."""
        return Vector2(self._delta.x, self._delta.y)

    def update(self) -> None:
        """Publish the events gathered since the previous call as the frame's state."""
        self._previous = self._current
        self._current = list(self._incoming)
        self._current_position = Vector2(self._incoming_position.x, self._incoming_position.y)
        self._delta = self._pending_delta
        self._pending_delta = Vector2(0, 0)