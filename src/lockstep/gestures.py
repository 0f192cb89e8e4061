# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Common gestures expressed as plain ticks.

Nothing here reaches into the composer; each helper is just a series of tick() calls that any
caller could have written by hand.
"""
from __future__ import annotations

import typing

from .actions import key_down, key_up, pointer_down, pointer_move, pointer_up
from .settings import Settings

if typing.TYPE_CHECKING:
    from .composer import Composer
    from .devices import KeyDevice, PointerDevice


def _move_to(composer: Composer, pointer: PointerDevice, target: typing.Any, settings: Settings):
    offset = settings.click_offset
    composer.tick(pointer_move(pointer, settings.click_move_duration, target, offset.x, offset.y))


def click(
    composer: Composer,
    pointer: PointerDevice,
    target: typing.Any = None,
    *,
    settings: typing.Optional[Settings] = None,
    button: typing.Optional[int] = None,
):
    if settings is None:
        settings = Settings.defaults()
    if button is None:
        button = settings.click_button
    _move_to(composer, pointer, target, settings)
    composer.tick(pointer_down(pointer, button))
    composer.tick(pointer_up(pointer, button))
    return composer


def double_click(
    composer: Composer,
    pointer: PointerDevice,
    target: typing.Any = None,
    *,
    settings: typing.Optional[Settings] = None,
    button: typing.Optional[int] = None,
):
    if settings is None:
        settings = Settings.defaults()
    if button is None:
        button = settings.click_button
    _move_to(composer, pointer, target, settings)
    for _ in range(2):
        composer.tick(pointer_down(pointer, button))
        composer.tick(pointer_up(pointer, button))
    return composer


def drag_and_drop(
    composer: Composer,
    pointer: PointerDevice,
    source: typing.Any,
    destination: typing.Any,
    *,
    settings: typing.Optional[Settings] = None,
):
    if settings is None:
        settings = Settings.defaults()
    _move_to(composer, pointer, source, settings)
    composer.tick(pointer_down(pointer, settings.click_button))
    _move_to(composer, pointer, destination, settings)
    composer.tick(pointer_up(pointer, settings.click_button))
    return composer


def type_text(composer: Composer, keyboard: KeyDevice, text: str):
    # one tick per key transition; str iteration yields code points
    for character in text:
        composer.tick(key_down(keyboard, character))
        composer.tick(key_up(keyboard, character))
    return composer
