# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import dataclasses
import datetime
import json
import pathlib
import typing

import cattrs
import tomli

from .commontypes import Point
from .devices import PointerKind
from .durations import as_duration, format_duration

DEFAULTS = {
    "pointer_name": "default mouse",
    "pointer_kind": "mouse",
    "pointer_primary": True,
    "click_move_duration": "250ms",
    "click_offset": {"x": 1, "y": 1},
    "click_button": 0,
}


settings_converter = cattrs.Converter()
settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))
settings_converter.register_unstructure_hook(datetime.timedelta, format_duration)
settings_converter.register_structure_hook(datetime.timedelta, lambda d, _: as_duration(d))
settings_converter.register_unstructure_hook(PointerKind, lambda k: k.value)
settings_converter.register_structure_hook(PointerKind, lambda v, _: PointerKind(v))
settings_converter.register_unstructure_hook(Point, lambda p: {"x": p.x, "y": p.y})
settings_converter.register_structure_hook(Point, lambda d, _: Point(x=d["x"], y=d["y"]))


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: typing.Optional[pathlib.Path] = None
    pointer_name: str
    pointer_kind: PointerKind
    pointer_primary: bool
    click_move_duration: datetime.timedelta
    click_offset: Point
    click_button: int

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        if dest is None:
            raise ValueError("No path to save settings to")
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as f:
            json.dump(raw, f, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        if src.suffix == ".toml":
            with src.open("rb") as f:
                loaded = tomli.load(f)
        else:
            with src.open() as f:
                loaded = json.load(f)
        raw = DEFAULTS | loaded
        raw["_path"] = src
        return settings_converter.structure(raw, cls)

    @classmethod
    def defaults(cls):
        return settings_converter.structure(dict(DEFAULTS), cls)
