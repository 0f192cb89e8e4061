# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import datetime
import typing

from .actions import Action, Pause, encode_action, is_valid_for
from .commontypes import TypeMismatchError
from .devices import InputDevice


class Sequence(collections.abc.Sized, collections.abc.Iterable):
    """The timeline of a single device; index N holds the device's action for tick N."""

    def __init__(self, device: InputDevice, initial_length: int = 0):
        self.device = device
        self._actions: list[Action] = []
        for _ in range(initial_length):
            self.append(Pause(device=device, duration=datetime.timedelta()))

    def check(self, action: Action):
        if action.device is not self.device:
            raise TypeMismatchError(f"Action {action!r} belongs to a different device than {self.device!r}")
        if not is_valid_for(action, self.device.source_type):
            raise TypeMismatchError(f"{type(action).__name__} is not valid for a {self.device.source_type.value} device")

    def append(self, action: Action):
        self.check(action)
        self._actions.append(action)
        return self

    def __len__(self):
        return len(self._actions)

    def __iter__(self):
        return iter(self._actions)

    def __getitem__(self, index):
        return self._actions[index]

    def encode(self) -> dict[str, typing.Any]:
        encoded = self.device.encode()
        encoded["actions"] = [encode_action(action) for action in self._actions]
        return encoded
