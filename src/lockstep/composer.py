# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import datetime
import logging
import typing

import msgspec

from .actions import Action, Pause, is_valid_for
from .commontypes import DuplicateDeviceError, TypeMismatchError
from .devices import InputDevice
from .sequence import Sequence

logger = logging.getLogger(__name__)


class Composer:
    """Builds time-aligned action sequences for several input devices at once.

    Every call to tick() advances every tracked device by exactly one step: devices named in
    the call get their action, the rest get a zero-length pause. A device seen for the first
    time is back-filled with pauses so that it lines up with the devices already tracked.

    Not safe for concurrent use; callers sharing one instance between threads must serialize access.
    """

    def __init__(self):
        # handle -> Sequence; handles are handed out in first-reference order
        self._arena: list[Sequence] = []
        self._handles: dict[InputDevice, int] = {}
        self._encoder = msgspec.json.Encoder()

    def __len__(self):
        return max((len(sequence) for sequence in self._arena), default=0)

    def __contains__(self, device):
        return device in self._handles

    @property
    def devices(self) -> tuple[InputDevice, ...]:
        return tuple(sequence.device for sequence in self._arena)

    def sequence_for(self, device: InputDevice) -> Sequence:
        return self._arena[self._handles[device]]

    def _resolve(self, device: InputDevice) -> Sequence:
        handle = self._handles.get(device)
        if handle is not None:
            return self._arena[handle]
        longest = len(self)
        sequence = Sequence(device, longest)
        self._handles[device] = len(self._arena)
        self._arena.append(sequence)
        logger.debug("Tracking %r as handle %d, padded with %d pauses", device, self._handles[device], longest)
        return sequence

    def tick(self, *actions: Action) -> Composer:
        seen: set[InputDevice] = set()
        for action in actions:
            if action.device in seen:
                raise DuplicateDeviceError(actions)
            seen.add(action.device)

        # Check everything before touching any sequence, so a rejected tick leaves no trace.
        for action in actions:
            if action.device in self._handles:
                self.sequence_for(action.device).check(action)
            elif not is_valid_for(action, action.device.source_type):
                raise TypeMismatchError(
                    f"{type(action).__name__} is not valid for a {action.device.source_type.value} device"
                )

        # Pad new devices against the lengths from before this tick.
        sequences = [self._resolve(action.device) for action in actions]
        for sequence, action in zip(sequences, actions):
            sequence.append(action)

        for sequence in self._arena:
            if sequence.device not in seen:
                sequence.append(Pause(device=sequence.device, duration=datetime.timedelta()))

        logger.debug("Tick %d: %d explicit actions across %d devices", len(self), len(actions), len(self._arena))
        return self

    def encode(self) -> dict[str, typing.Any]:
        return {"actions": [sequence.encode() for sequence in self._arena]}

    def to_json(self) -> bytes:
        return self._encoder.encode(self.encode())
