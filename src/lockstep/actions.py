# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import datetime
import typing

import msgspec

from .commontypes import ValidationError
from .devices import InputDevice, SourceType
from .durations import as_duration, to_wire_millis

# W3C WebDriver's key for a web element reference
ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"


def _check_duration(duration: datetime.timedelta):
    if duration < datetime.timedelta():
        raise ValidationError(f"Duration must be 0 or greater: {duration!r}")


def _check_non_negative(name: str, value: int):
    # bool is an int subclass, but would encode as true/false
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer: {value!r}")
    if value < 0:
        raise ValidationError(f"{name} must be 0 or greater: {value}")


class Pause(msgspec.Struct, frozen=True):
    device: InputDevice
    duration: datetime.timedelta

    def __post_init__(self):
        _check_duration(self.duration)


class KeyDown(msgspec.Struct, frozen=True):
    device: InputDevice
    value: str

    def __post_init__(self):
        _check_code_point(self.value)


class KeyUp(msgspec.Struct, frozen=True):
    device: InputDevice
    value: str

    def __post_init__(self):
        _check_code_point(self.value)


class PointerMove(msgspec.Struct, frozen=True):
    device: InputDevice
    duration: datetime.timedelta
    target: typing.Any
    x: int
    y: int

    def __post_init__(self):
        _check_non_negative("X value", self.x)
        _check_non_negative("Y value", self.y)
        _check_duration(self.duration)


class PointerDown(msgspec.Struct, frozen=True):
    device: InputDevice
    button: int

    def __post_init__(self):
        _check_non_negative("Button", self.button)


class PointerUp(msgspec.Struct, frozen=True):
    device: InputDevice
    button: int

    def __post_init__(self):
        _check_non_negative("Button", self.button)


Action = Pause | KeyDown | KeyUp | PointerMove | PointerDown | PointerUp


def _check_code_point(value: str):
    if not isinstance(value, str) or len(value) != 1:
        raise ValidationError(f"Key value must be a single code point: {value!r}")


def pause(device: InputDevice, duration: datetime.timedelta | int | str = 0):
    return Pause(device=device, duration=as_duration(duration))


def key_down(device: InputDevice, value: str):
    return KeyDown(device=device, value=value)


def key_up(device: InputDevice, value: str):
    return KeyUp(device=device, value=value)


def pointer_move(
    device: InputDevice,
    duration: datetime.timedelta | int | str = 0,
    target: typing.Any = None,
    x: int = 0,
    y: int = 0,
):
    return PointerMove(device=device, duration=as_duration(duration), target=target, x=x, y=y)


def pointer_down(device: InputDevice, button: int = 0):
    return PointerDown(device=device, button=button)


def pointer_up(device: InputDevice, button: int = 0):
    return PointerUp(device=device, button=button)


def is_valid_for(action: Action, source_type: SourceType) -> bool:
    match action:
        case Pause():
            return True
        case KeyDown() | KeyUp():
            return source_type is SourceType.KEY
        case PointerMove() | PointerDown() | PointerUp():
            return source_type is SourceType.POINTER
    return False


class ElementReference(msgspec.Struct, frozen=True):
    """A reference to an element already known to the remote endpoint."""

    element_id: str

    def wire_reference(self):
        return {ELEMENT_KEY: self.element_id}


def encode_element(target: typing.Any):
    """Encode a pointer-move target.

    Targets that know how to resolve themselves expose wire_reference(); whatever that raises
    (usually UnresolvedReferenceError) is left to propagate.
    """
    if target is None:
        return None
    wire_reference = getattr(target, "wire_reference", None)
    if callable(wire_reference):
        return wire_reference()
    return target


def encode_action(action: Action) -> dict[str, typing.Any]:
    match action:
        case Pause(duration=duration):
            return {"type": "pause", "duration": to_wire_millis(duration)}
        case KeyDown(value=value):
            return {"type": "keyDown", "value": value}
        case KeyUp(value=value):
            return {"type": "keyUp", "value": value}
        case PointerMove(duration=duration, target=target, x=x, y=y):
            return {
                "type": "pointerMove",
                "duration": to_wire_millis(duration),
                "element": encode_element(target),
                "x": x,
                "y": y,
            }
        case PointerDown(button=button):
            return {"type": "pointerDown", "button": button}
        case PointerUp(button=button):
            return {"type": "pointerUp", "button": button}
    raise TypeError(f"Not an action: {action!r}")
