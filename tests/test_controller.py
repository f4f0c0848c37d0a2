from __future__ import annotations

from pathlib import Path

import pytest

from candlelight.config import defaults
from candlelight.controller import Controller, Intent


def _controller(tmp_path: Path, content: str | None = "2000\n", **kw) -> Controller:
    if content is not None:
        (tmp_path / "brightness").write_text(content, encoding="utf-8")
    cfg = defaults()
    cfg["backlight"]["sysfs_dir"] = str(tmp_path)
    return Controller(cfg, **kw)


def test_controller_uses_config_limits(tmp_path: Path) -> None:
    ctl = _controller(tmp_path)
    assert ctl.limits.minimum == 1
    assert ctl.limits.maximum == 7500
    assert ctl.preview_seconds == 3.0
    assert ctl.backlight.sysfs_dir == tmp_path


def test_set_does_not_read(tmp_path: Path) -> None:
    ctl = _controller(tmp_path, content="garbage")
    ctl.run(Intent(query=False, target=10))
    assert (tmp_path / "brightness").read_text(encoding="utf-8") == "10"


def test_preview_sleeps_for_configured_delay(tmp_path: Path) -> None:
    slept: list[float] = []
    ctl = _controller(tmp_path, sleep=slept.append)
    ctl.run(Intent(query=False, target=7500, preview=True))
    assert slept == [3.0]
    assert (tmp_path / "brightness").read_text(encoding="utf-8") == "2000"


def test_preview_aborts_when_read_fails(tmp_path: Path, capsys) -> None:
    slept: list[float] = []
    ctl = _controller(tmp_path, content=None, sleep=slept.append)
    ctl.run(Intent(query=False, target=7500, preview=True))
    assert slept == []
    assert not (tmp_path / "brightness").exists()
    assert capsys.readouterr().out.startswith("FileNotFoundError(")


def test_preview_with_zero_prior_is_a_programming_error(tmp_path: Path) -> None:
    ctl = _controller(tmp_path, content="0\n", sleep=lambda _s: None)
    with pytest.raises(AssertionError):
        ctl.run(Intent(query=False, target=7500, preview=True))


def test_write_failure_is_not_fatal(tmp_path: Path, capsys) -> None:
    ctl = _controller(tmp_path / "missing", content=None)
    ctl.run(Intent(query=False, target=5))
    assert "FileNotFoundError" in capsys.readouterr().out
