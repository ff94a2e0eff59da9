import string

import pytest

from ptsd.keycode import Keycode


def test_pinned_scancodes():
    assert Keycode(4) is Keycode.A
    assert Keycode(41) is Keycode.ESCAPE
    assert Keycode(44) is Keycode.SPACE


def test_unknown_and_mouse_values_from_source():
    assert Keycode(0) is Keycode.UNKNOWN
    assert Keycode(513) is Keycode.MOUSE_LB
    assert Keycode(514) is Keycode.MOUSE_MB
    assert Keycode(515) is Keycode.MOUSE_RB


def test_letters_are_contiguous_and_ordered():
    start = int(Keycode.A)
    names = [Keycode(start + offset).name for offset in range(26)]
    assert names == list(string.ascii_uppercase)


def test_digits_run_one_to_nine_then_zero():
    start = int(Keycode.NUM_1)
    names = [Keycode(start + offset).name for offset in range(10)]
    assert names == [f"NUM_{d}" for d in "1234567890"]
    assert Keycode(int(Keycode.Z) + 1) is Keycode.NUM_1


def test_mouse_buttons_follow_scancode_bound():
    bound = int(Keycode.NUM_SCANCODES)
    assert Keycode(bound + 1) is Keycode.MOUSE_LB
    assert Keycode(bound + 2) is Keycode.MOUSE_MB
    assert Keycode(bound + 3) is Keycode.MOUSE_RB
    keyboard = [Keycode(int(k)) for k in Keycode if not k.name.startswith("MOUSE_")]
    assert max(int(k) for k in keyboard) == bound


def test_values_are_unique():
    looked_up = [Keycode(int(k)) for k in Keycode]
    assert len(set(looked_up)) == len(Keycode.__members__)


@pytest.mark.parametrize("key", list(Keycode))
def test_round_trip_from_int(key):
    assert Keycode(int(key)) is key


def test_unassigned_value_rejected():
    with pytest.raises(ValueError):
        Keycode(int(Keycode.MOUSE_RB) + 1)