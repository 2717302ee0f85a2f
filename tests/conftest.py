from __future__ import annotations

from datetime import datetime
from io import StringIO

import pytest
from rich.console import Console

from logux_reporter.adapters.clock import FixedClock
from logux_reporter.adapters.theme import PlainTheme, RichTheme

FIXED_INSTANT = datetime(2016, 7, 14, 23, 14, 5)


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(FIXED_INSTANT)


@pytest.fixture
def plain_theme() -> PlainTheme:
    return PlainTheme()


@pytest.fixture
def rich_theme() -> RichTheme:
    return RichTheme()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), force_terminal=False, color_system=None, width=120)


@pytest.fixture(autouse=True)
def _isolate_reporter_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOGUX_REPORTER_COLOR", raising=False)
    monkeypatch.delenv("LOGUX_REPORTER_ROOT", raising=False)
