# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import msgspec


class Point(msgspec.Struct, frozen=True):
    x: int
    y: int


class LockstepError(Exception):
    pass


class ValidationError(LockstepError, ValueError):
    "An action was built with a value outside its allowed range."


class TypeMismatchError(LockstepError, TypeError):
    "An action was attached to a device that cannot perform it."


class DuplicateDeviceError(LockstepError):
    def __init__(self, actions):
        self.actions = tuple(actions)
        super().__init__(f"You may only add one action per input device per tick: {list(self.actions)!r}")


class UnresolvedReferenceError(LockstepError, LookupError):
    """Raised by element-location collaborators when a pointer target cannot be resolved.

    Nothing in this package catches it; it reaches whoever asked for the encoded payload.
    """
