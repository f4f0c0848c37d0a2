from __future__ import annotations

import compileall
import importlib
from pathlib import Path


def test_compileall_src() -> None:
    src = Path(__file__).resolve().parents[1] / "src"
    ok = compileall.compile_dir(str(src), quiet=1)
    assert ok


def test_import_packages() -> None:
    importlib.import_module("candlelight")
    importlib.import_module("candlelight.cli")
    importlib.import_module("candlelight.config")
    importlib.import_module("candlelight.brightness")
    importlib.import_module("candlelight.controller")
    importlib.import_module("candlelight.preview")
    importlib.import_module("candlelight.system.backlight")
