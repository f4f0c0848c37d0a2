from __future__ import annotations

import math
import re
from dataclasses import dataclass

from candlelight.config import MAX_BRIGHTNESS, MIN_BRIGHTNESS

_ABSOLUTE_RE = re.compile(r"^\+?[0-9]+$")
_FLOAT_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


class InvalidValue(ValueError):
    pass


@dataclass(frozen=True)
class Limits:
    minimum: int = MIN_BRIGHTNESS
    maximum: int = MAX_BRIGHTNESS

    def percent(self, value: int) -> float:
        return 100.0 * value / self.maximum


def _invalid(val: str, detail: str | None = None) -> InvalidValue:
    msg = f"The argument '{val}' isn't a valid value"
    if detail:
        msg = f"{msg} ({detail})"
    return InvalidValue(msg)


def _raw_value(val: str, limits: Limits) -> int:
    if val.endswith("%"):
        prefix = val[:-1]
        if not _FLOAT_RE.match(prefix):
            raise _invalid(val)
        pct = float(prefix)
        if not math.isfinite(pct):
            raise _invalid(val)
        return int(pct * limits.maximum / 100.0)

    if not _ABSOLUTE_RE.match(val):
        raise _invalid(val)
    return int(val)


def parse_input_value(val: str, limits: Limits = Limits()) -> int:
    """Convert an absolute (``"4321"``) or percentage (``"57.6%"``) argument.

    Percentages are scaled to the absolute range and truncated toward zero.
    Zero is coerced to the minimum rather than rejected.
    """

    v = _raw_value(val, limits)
    if v == 0:
        return limits.minimum
    if v > limits.maximum:
        raise _invalid(val, f"too high: max value is {limits.maximum} or 100%")
    if v < limits.minimum:
        raise _invalid(val, f"too low: min value is {limits.minimum} or 0%")
    return v


def format_query(value: int, limits: Limits = Limits()) -> str:
    return f"brightness:{value:8d}\t{limits.percent(value):8.3f}%"
