# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import enum
import typing

import msgspec
import timeflake

if typing.TYPE_CHECKING:
    from .settings import Settings


@enum.unique
class SourceType(enum.Enum):
    KEY = "key"
    POINTER = "pointer"


@enum.unique
class PointerKind(enum.Enum):
    MOUSE = "mouse"
    PEN = "pen"
    TOUCH = "touch"


def _random_name():
    return str(timeflake.random())


# Devices compare by identity (eq=False): two pointers built with the same
# parameters are still two separate timelines.
class KeyDevice(msgspec.Struct, frozen=True, eq=False):
    @property
    def source_type(self):
        return SourceType.KEY

    def encode(self) -> dict[str, typing.Any]:
        return {"type": self.source_type.value}


class PointerDevice(msgspec.Struct, frozen=True, eq=False):
    kind: PointerKind = PointerKind.MOUSE
    name: str = msgspec.field(default_factory=_random_name)
    primary: bool = False

    @property
    def source_type(self):
        return SourceType.POINTER

    def encode(self) -> dict[str, typing.Any]:
        return {
            "type": self.source_type.value,
            "id": self.name,
            "parameters": {"pointerType": self.kind.value, "primary": self.primary},
        }


InputDevice = KeyDevice | PointerDevice


class DefaultDevices(typing.NamedTuple):
    keyboard: KeyDevice
    pointer: PointerDevice


def default_devices(settings: typing.Optional[Settings] = None) -> DefaultDevices:
    """Build a fresh keyboard and primary pointer.

    Each call returns new devices, so two calls never share a timeline.
    """
    if settings is None:
        from .settings import Settings

        settings = Settings.defaults()
    return DefaultDevices(
        keyboard=KeyDevice(),
        pointer=PointerDevice(kind=settings.pointer_kind, name=settings.pointer_name, primary=settings.pointer_primary),
    )
