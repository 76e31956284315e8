"""Rendering of Python values as literals for generated Go source."""

from __future__ import annotations

import dataclasses
import math
import numbers
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

_MICROSECOND = 1
_SECOND = 1_000_000 * _MICROSECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

_GO_TYPE_NAMES: dict[type, str] = {
    str: "string",
    bool: "bool",
    int: "int",
    float: "float64",
    complex: "complex128",
    bytes: "[]uint8",
    bytearray: "[]uint8",
    timedelta: "time.Duration",
    datetime: "time.Time",
}


def _shortest_decimal(number: float) -> Decimal:
    return Decimal(repr(number)).normalize()


def _format_fixed(number: float) -> str:
    """Shortest decimal representation without an exponent."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    return format(_shortest_decimal(number), "f")


def _format_general(number: float) -> str:
    """Shortest representation, switching to an exponent outside [1e-4, 1e6)."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"
    sign, digits, exponent = _shortest_decimal(number).as_tuple()
    decimal_exponent = len(digits) + exponent - 1
    if -4 <= decimal_exponent < 6:
        return format(_shortest_decimal(number), "f")
    text = "".join(map(str, digits))
    mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
    exp_sign = "-" if decimal_exponent < 0 else "+"
    prefix = "-" if sign else ""
    return f"{prefix}{mantissa}e{exp_sign}{abs(decimal_exponent):02d}"


def _in_units(microseconds: int, unit: int) -> float:
    whole, rest = divmod(abs(microseconds), unit)
    value = whole + rest / unit
    return -value if microseconds < 0 else value


def _duration_literal(duration: timedelta) -> str:
    micros = duration // timedelta(microseconds=1)
    hours = _in_units(micros, _HOUR)
    minutes = _in_units(micros, _MINUTE)
    seconds = _in_units(micros, _SECOND)
    for value, unit in ((hours, "time.Hour"), (minutes, "time.Minute"), (seconds, "time.Second")):
        if abs(value) >= 1 and value == math.trunc(value):
            return f"{unit} * {value:.0f}"
    if abs(hours) >= 1:
        return f"time.Hour * {_format_fixed(hours)}"
    if abs(minutes) >= 1:
        return f"time.Minute * {_format_fixed(minutes)}"
    if seconds != 0:
        return f"time.Second * {_format_fixed(seconds)}"
    return ""


def _rfc3339(moment: datetime) -> str:
    stamp = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    offset = moment.utcoffset()
    if not offset:
        return stamp + "Z"
    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{stamp}{sign}{hours:02d}:{minutes:02d}"


def _has_own_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def _plain(value: Any) -> str:
    """Render a value the way a generic value formatter would."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_general(value)
    if isinstance(value, (bytes, bytearray)):
        return "[" + " ".join(str(b) for b in value) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_plain(item) for item in value) + "]"
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda kv: _plain(kv[0]))
        return "map[" + " ".join(f"{_plain(k)}:{_plain(v)}" for k, v in items) + "]"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = dataclasses.fields(value)
        return "{" + " ".join(_plain(getattr(value, f.name)) for f in fields) + "}"
    return str(value)


def ify(value: Any) -> str:
    """Render a value as a literal suitable for generated source."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (bytes, bytearray, memoryview)):
        return '"' + bytes(value).decode("utf-8", errors="replace") + '"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return _rfc3339(value)
    if isinstance(value, timedelta):
        return _duration_literal(value)
    if isinstance(value, (int, float, complex, list, tuple, dict)) or value is None:
        return _plain(value)
    if _has_own_str(value):
        return f'"{value}"'
    return _plain(value)


def ifiable_numeric(number: numbers.Real) -> str:
    """Render a number, using scientific notation for very large or small values."""
    if isinstance(number, bool) or not isinstance(number, numbers.Real):
        raise TypeError(f"expected a number, got {type(number).__name__}")
    value = float(number)
    magnitude = abs(value)
    if magnitude >= 1e6 or 0 < magnitude < 1e-6:
        return f"{value:.2e}"
    return _format_fixed(value)


def as_type(value: Any) -> str:
    """Name the generated-code type that corresponds to a value."""
    if value is None:
        return "<nil>"
    return _GO_TYPE_NAMES.get(type(value), type(value).__name__)