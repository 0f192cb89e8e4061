from datetime import timedelta

import pytest

from lockstep.actions import (
    ELEMENT_KEY,
    ElementReference,
    KeyDown,
    Pause,
    PointerMove,
    encode_action,
    encode_element,
    is_valid_for,
    key_down,
    key_up,
    pause,
    pointer_down,
    pointer_move,
    pointer_up,
)
from lockstep.commontypes import UnresolvedReferenceError, ValidationError
from lockstep.devices import KeyDevice, PointerDevice, PointerKind, SourceType


@pytest.fixture
def mouse():
    return PointerDevice(kind=PointerKind.MOUSE, name="mouse1", primary=True)


@pytest.fixture
def keyboard():
    return KeyDevice()


@pytest.mark.parametrize(
    "kwargs",
    (
        {"x": -1},
        {"y": -1},
        {"duration": -1},
        {"duration": "-250ms"},
        {"duration": timedelta(microseconds=-1)},
    ),
)
def test_pointer_move_rejects_negative_values(mouse, kwargs):
    with pytest.raises(ValidationError):
        pointer_move(mouse, **kwargs)


@pytest.mark.parametrize("factory", (pointer_down, pointer_up))
def test_pointer_press_rejects_negative_button(mouse, factory):
    with pytest.raises(ValidationError):
        factory(mouse, -1)


@pytest.mark.parametrize("button", (True, False, 1.0, "0", None))
@pytest.mark.parametrize("factory", (pointer_down, pointer_up))
def test_pointer_press_rejects_non_integer_button(mouse, factory, button):
    with pytest.raises(ValidationError):
        factory(mouse, button)


@pytest.mark.parametrize(
    "kwargs",
    (
        {"x": 1.5},
        {"y": 1.5},
        {"x": 2.0},
        {"x": True},
        {"y": False},
        {"x": "3"},
    ),
)
def test_pointer_move_rejects_non_integer_offsets(mouse, kwargs):
    with pytest.raises(ValidationError):
        pointer_move(mouse, **kwargs)


def test_pause_rejects_negative_duration(mouse):
    with pytest.raises(ValidationError):
        pause(mouse, -5)


@pytest.mark.parametrize("value", ("", "ab", 97, None))
def test_key_value_must_be_one_code_point(keyboard, value):
    with pytest.raises(ValidationError):
        key_down(keyboard, value)
    with pytest.raises(ValidationError):
        key_up(keyboard, value)


def test_key_value_accepts_astral_code_point(keyboard):
    assert encode_action(key_down(keyboard, "\U0001f600")) == {"type": "keyDown", "value": "\U0001f600"}


def test_construction_does_not_check_capability(keyboard, mouse):
    # a mismatched action is only rejected once it is attached to a sequence
    move = pointer_move(keyboard, 0, None, 1, 1)
    assert move.device is keyboard
    press = key_down(mouse, "a")
    assert press.device is mouse


def test_actions_are_immutable(mouse):
    action = pointer_down(mouse, 0)
    with pytest.raises(AttributeError):
        action.button = 1


@pytest.mark.parametrize(
    "action_factory,source_type,expected",
    (
        (lambda d: pause(d), SourceType.KEY, True),
        (lambda d: pause(d), SourceType.POINTER, True),
        (lambda d: key_down(d, "a"), SourceType.KEY, True),
        (lambda d: key_up(d, "a"), SourceType.KEY, True),
        (lambda d: key_down(d, "a"), SourceType.POINTER, False),
        (lambda d: pointer_move(d), SourceType.POINTER, True),
        (lambda d: pointer_down(d), SourceType.POINTER, True),
        (lambda d: pointer_up(d), SourceType.POINTER, True),
        (lambda d: pointer_move(d), SourceType.KEY, False),
        (lambda d: pointer_down(d), SourceType.KEY, False),
    ),
)
def test_is_valid_for(mouse, action_factory, source_type, expected):
    assert is_valid_for(action_factory(mouse), source_type) is expected


def test_encode_actions(mouse, keyboard):
    target = ElementReference("abc-123")
    assert encode_action(pause(mouse, "1.5s")) == {"type": "pause", "duration": 1500}
    assert encode_action(Pause(device=mouse, duration=timedelta())) == {"type": "pause", "duration": 0}
    assert encode_action(key_down(keyboard, "a")) == {"type": "keyDown", "value": "a"}
    assert encode_action(key_up(keyboard, "a")) == {"type": "keyUp", "value": "a"}
    assert encode_action(pointer_down(mouse, 2)) == {"type": "pointerDown", "button": 2}
    assert encode_action(pointer_up(mouse, 0)) == {"type": "pointerUp", "button": 0}
    assert encode_action(pointer_move(mouse, 250, target, 1, 2)) == {
        "type": "pointerMove",
        "duration": 250,
        "element": {ELEMENT_KEY: "abc-123"},
        "x": 1,
        "y": 2,
    }
    assert encode_action(PointerMove(device=mouse, duration=timedelta(), target=None, x=0, y=0))["element"] is None


def test_encode_action_rejects_non_actions(keyboard):
    with pytest.raises(TypeError):
        encode_action(keyboard)


class LostElement:
    def wire_reference(self):
        raise UnresolvedReferenceError("element went away")


def test_encode_element():
    assert encode_element(None) is None
    assert encode_element({"some": "ref"}) == {"some": "ref"}
    assert encode_element(ElementReference("x")) == {ELEMENT_KEY: "x"}
    with pytest.raises(UnresolvedReferenceError):
        encode_element(LostElement())


def test_actions_compare_by_value(keyboard):
    assert KeyDown(device=keyboard, value="a") == key_down(keyboard, "a")
    assert key_down(keyboard, "a") != key_down(KeyDevice(), "a")
