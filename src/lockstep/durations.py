# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Duration handling for action timings.

Durations are kept as timedeltas and only turned into whole milliseconds when encoded for the wire.
Strings use a subset of Go's Duration format: "250ms", "1.5s", "2m", "1s500ms".
"""
import datetime
import decimal

from .commontypes import ValidationError

MILLISECOND = datetime.timedelta(milliseconds=1)

UNITS = {
    # "ms" must be tried before "m"
    "ms": MILLISECOND,
    "s": datetime.timedelta(seconds=1),
    "m": datetime.timedelta(minutes=1),
}


def parse_duration(val: str) -> datetime.timedelta:
    sign = 1
    if val.startswith("-"):
        sign = -1
        val = val[1:]
    if len(val) == 0:
        raise ValidationError("Empty duration string")
    if val == "0":
        return datetime.timedelta()

    accum = datetime.timedelta()
    while val:
        numberpart = ""
        while val and (val[0].isdigit() or val[0] == "."):
            numberpart += val[0]
            val = val[1:]
        if not numberpart:
            raise ValidationError("Invalid duration string; expected number")
        if not numberpart[0].isdigit():
            raise ValidationError("Invalid duration string; expected leading digit")
        try:
            number = decimal.Decimal(numberpart)
        except decimal.InvalidOperation as exc:
            raise ValidationError(f"Invalid duration string; bad number {numberpart!r}") from exc
        for unitstr, unit in UNITS.items():
            if val.startswith(unitstr):
                val = val[len(unitstr) :]
                break
        else:
            raise ValidationError("Invalid duration string; expected unit")
        num, denom = number.as_integer_ratio()
        accum += num * unit / denom

    return sign * accum


def format_duration(val: datetime.timedelta) -> str:
    if val == datetime.timedelta():
        return "0"
    sign = "-" if val < datetime.timedelta() else ""
    val = abs(val)
    if val < UNITS["s"]:
        millis = decimal.Decimal(val.microseconds) / 1000
        return f"{sign}{millis.normalize():f}ms"
    parts = [sign]
    minutes, val = divmod(val, UNITS["m"])
    if minutes:
        parts.append(f"{minutes}m")
    if val:
        seconds = decimal.Decimal(val.seconds) + decimal.Decimal(val.microseconds) / 1000000
        parts.append(f"{seconds.normalize():f}s")
    return "".join(parts)


def as_duration(value: datetime.timedelta | int | str) -> datetime.timedelta:
    """Coerce a timedelta, a count of milliseconds, or a duration string into a timedelta.

    No range check happens here; negative results are left for the action constructors to reject.
    """
    if isinstance(value, datetime.timedelta):
        return value
    # bool is an int subclass, but True is never a sensible duration
    if isinstance(value, bool):
        raise ValidationError(f"Not a duration: {value!r}")
    if isinstance(value, int):
        return value * MILLISECOND
    if isinstance(value, str):
        return parse_duration(value)
    raise ValidationError(f"Not a duration: {value!r}")


def to_wire_millis(val: datetime.timedelta) -> int:
    return val // MILLISECOND
