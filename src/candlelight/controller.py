from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from candlelight.brightness import Limits, format_query
from candlelight.preview import Preview, apply_brightness
from candlelight.system.backlight import Backlight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Intent:
    query: bool
    target: int | None = None
    preview: bool = False


@dataclass
class Controller:
    cfg: dict[str, Any]
    sleep: Callable[[float], None] = time.sleep

    def __post_init__(self) -> None:
        backlight = self.cfg["backlight"]
        self.backlight = Backlight(Path(backlight["sysfs_dir"]))
        self.limits = Limits(
            minimum=int(backlight["min_brightness"]),
            maximum=int(backlight["max_brightness"]),
        )
        self.preview_seconds = float(self.cfg["preview"]["seconds"])

    def _read(self) -> int | None:
        try:
            return self.backlight.get_brightness()
        except OSError as e:
            logger.warning("failed to read brightness: %s", e)
            print(repr(e))
            return None

    def run(self, intent: Intent) -> None:
        prior = 0
        if intent.query or intent.preview:
            current = self._read()
            if current is None:
                return
            if intent.query:
                print(format_query(current, self.limits))
                return
            prior = current

        if intent.target is None:
            raise ValueError("set intent without a target")

        if not intent.preview:
            apply_brightness(self.backlight, intent.target)
            return

        Preview(
            backlight=self.backlight,
            prior=prior,
            seconds=self.preview_seconds,
            sleep=self.sleep,
        ).run(intent.target)
