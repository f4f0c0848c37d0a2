from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from candlelight.config import PREVIEW_SECONDS
from candlelight.system.backlight import Backlight

logger = logging.getLogger(__name__)


class PreviewState(enum.Enum):
    IDLE = "idle"
    TARGET_WRITTEN = "target_written"
    SLEEPING = "sleeping"
    RESTORED = "restored"


def apply_brightness(backlight: Backlight, value: int) -> bool:
    """Write ``value`` and report a failure without raising.

    A failed write may still have reached the device, so callers carry on.
    Returns True if the write succeeded.
    """

    try:
        backlight.set_brightness(value)
        return True
    except OSError as e:
        logger.warning("failed to write brightness %d: %s", value, e)
        print(repr(e))
        return False


@dataclass
class Preview:
    """Temporarily apply a brightness, then put the prior one back."""

    backlight: Backlight
    prior: int
    seconds: float = PREVIEW_SECONDS
    sleep: Callable[[float], None] = time.sleep
    state: PreviewState = field(default=PreviewState.IDLE, init=False)

    def __post_init__(self) -> None:
        assert self.prior > 0, "prior brightness must be captured before a preview"

    def _enter(self, state: PreviewState) -> None:
        logger.debug("preview %s -> %s", self.state.value, state.value)
        self.state = state

    def run(self, target: int) -> None:
        if self.state is not PreviewState.IDLE:
            raise RuntimeError(f"preview already ran (state={self.state.value})")

        apply_brightness(self.backlight, target)
        self._enter(PreviewState.TARGET_WRITTEN)

        self._enter(PreviewState.SLEEPING)
        self.sleep(self.seconds)

        apply_brightness(self.backlight, self.prior)
        self._enter(PreviewState.RESTORED)
