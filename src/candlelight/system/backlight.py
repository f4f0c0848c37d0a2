from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SYSFS_DIR = Path("/sys/class/backlight/intel_backlight")


def parse_brightness(data: bytes) -> int:
    """Return the integer formed by the leading ASCII digits of ``data``.

    Scanning stops at the first non-digit byte (usually the kernel's trailing
    newline). Empty or non-digit-leading content yields 0.
    """

    value = 0
    for b in data:
        if b < 0x30 or b > 0x39:
            break
        value = 10 * value + (b - 0x30)
    return value


@dataclass(frozen=True)
class Backlight:
    sysfs_dir: Path = DEFAULT_SYSFS_DIR

    @property
    def _brightness(self) -> Path:
        return self.sysfs_dir / "brightness"

    def get_brightness(self) -> int:
        data = self._brightness.read_bytes()
        value = parse_brightness(data)
        logger.debug("read brightness %d from %s", value, self._brightness)
        return value

    def set_brightness(self, value: int) -> None:
        # No trailing newline. Range is validated by the caller.
        logger.debug("writing brightness %d to %s", value, self._brightness)
        with self._brightness.open("w", encoding="utf-8") as f:
            f.write(str(int(value)))
            f.flush()
