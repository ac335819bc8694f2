# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import random
from pathlib import Path

import pytest
from typer.testing import CliRunner

from textrain.rain.scheduler import FrameScheduler
from textrain.sources import TextSource


class FakeTimer:
    """Stands in for threading.Timer; fires only when the test says so."""

    def __init__(self, interval, function, args=None, kwargs=None) -> None:
        self.interval = interval
        self.function = function
        self.args = tuple(args or ())
        self.kwargs = dict(kwargs or {})
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        # Deliberately ignores `cancelled`: models a fire that raced a stop().
        self.function(*self.args, **self.kwargs)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep the user's config file and TEXTRAIN_* variables out of every test."""
    for var in ("TEXTRAIN_DOCS_DIR", "TEXTRAIN_SEED", "TEXTRAIN_PALETTE", "TEXTRAIN_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("TEXTRAIN_CONFIG", str(tmp_path / "no-such-config.toml"))
    yield


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def timers() -> list:
    return []


@pytest.fixture()
def timer_factory(timers):
    def _factory(interval, function, args=None, kwargs=None):
        t = FakeTimer(interval, function, args=args, kwargs=kwargs)
        timers.append(t)
        return t

    return _factory


@pytest.fixture()
def posted() -> list:
    return []


@pytest.fixture()
def scheduler(posted, timer_factory) -> FrameScheduler:
    return FrameScheduler(posted.append, timer_factory=timer_factory)


@pytest.fixture()
def docs_dir(tmp_path) -> Path:
    d = tmp_path / "docs"
    d.mkdir()
    (d / "ab.txt").write_text("AB", encoding="utf-8")
    (d / "empty.txt").write_text("", encoding="utf-8")
    (d / "poem.txt").write_text("roses are red\n\tviolets are blue\n", encoding="utf-8")
    (d / "notes.md").write_text("not a document", encoding="utf-8")
    return d


@pytest.fixture()
def source(docs_dir) -> TextSource:
    return TextSource(docs_dir)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()
