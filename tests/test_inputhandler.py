import pytest

from terrascene.inputhandler import InputHandler, Message
from terrascene.vector import Vector2


def test_key_down_visible_after_update():
    handler = InputHandler()
    assert handler.handle_event(Message.KEY_DOWN, ord("W"), 0) is True
    assert handler.is_key_down("W") is False
    handler.update()
    assert handler.is_key_down("W") is True
    assert handler.is_key_down(ord("W")) is True


def test_pressed_only_on_first_frame():
    handler = InputHandler()
    handler.handle_event(Message.KEY_DOWN, ord("A"), 0)
    handler.update()
    assert handler.is_key_pressed("A") is True
    handler.update()
    assert handler.is_key_pressed("A") is False
    assert handler.is_key_down("A") is True


def test_released_only_on_release_frame():
    handler = InputHandler()
    handler.handle_event(Message.KEY_DOWN, ord("S"), 0)
    handler.update()
    handler.handle_event(Message.KEY_UP, ord("S"), 0)
    handler.update()
    assert handler.is_key_released("S") is True
    assert handler.is_key_down("S") is False
    handler.update()
    assert handler.is_key_released("S") is False


def test_right_button():
    handler = InputHandler()
    handler.handle_event(Message.RBUTTON_DOWN, 0, 0)
    handler.update()
    assert handler.is_button_down(2) is True
    handler.handle_event(Message.RBUTTON_UP, 0, 0)
    handler.update()
    assert handler.is_button_down(2) is False


def test_mouse_move_unpacks_signed_words():
    handler = InputHandler()
    handler.handle_event(Message.MOUSE_MOVE, 0, (300 << 16) | 0xFFFF)
    handler.update()
    assert handler.mouse_position == Vector2(-1, 300)


def test_raw_input_accumulates_until_update():
    handler = InputHandler()
    handler.handle_event(Message.INPUT, 0, (3, 4))
    handler.handle_event(Message.INPUT, 0, (5, -7))
    handler.handle_event(Message.INPUT, 0, None)
    handler.update()
    assert handler.mouse_delta == Vector2(3 + 5, 4 - 7)
    handler.update()
    assert handler.mouse_delta == Vector2(0, 0)


def test_unknown_message_is_not_handled():
    handler = InputHandler()
    assert handler.handle_event(0x0010, 0, 0) is False


def test_key_code_out_of_range():
    handler = InputHandler()
    with pytest.raises(IndexError):
        handler.handle_event(Message.KEY_DOWN, 256, 0)
    with pytest.raises(IndexError):
        handler.is_key_down(-1)