# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from .actions import (
    Action,
    ElementReference,
    KeyDown,
    KeyUp,
    Pause,
    PointerDown,
    PointerMove,
    PointerUp,
    key_down,
    key_up,
    pause,
    pointer_down,
    pointer_move,
    pointer_up,
)
from .commontypes import (
    DuplicateDeviceError,
    LockstepError,
    Point,
    TypeMismatchError,
    UnresolvedReferenceError,
    ValidationError,
)
from .composer import Composer
from .devices import DefaultDevices, KeyDevice, PointerDevice, PointerKind, SourceType, default_devices
from .sequence import Sequence

__all__ = [
    "Action",
    "Composer",
    "DefaultDevices",
    "DuplicateDeviceError",
    "ElementReference",
    "KeyDevice",
    "KeyDown",
    "KeyUp",
    "LockstepError",
    "Pause",
    "Point",
    "PointerDevice",
    "PointerDown",
    "PointerKind",
    "PointerMove",
    "PointerUp",
    "Sequence",
    "SourceType",
    "TypeMismatchError",
    "UnresolvedReferenceError",
    "ValidationError",
    "default_devices",
    "key_down",
    "key_up",
    "pause",
    "pointer_down",
    "pointer_move",
    "pointer_up",
]
