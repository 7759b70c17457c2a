"""Shared fixtures: scripted event sources and a recording renderer."""

from __future__ import annotations

from typing import Iterable, Optional, Union

import pytest

from tabline.core.controller import AppController, Snapshot
from tabline.core.events import Key, KeyEvent


def press(*keys: Union[str, Key]) -> list[KeyEvent]:
    """Turn characters, strings and Key members into press events."""
    events: list[KeyEvent] = []
    for key in keys:
        if isinstance(key, Key):
            events.append(KeyEvent.of_key(key))
        else:
            events.extend(KeyEvent.of_char(ch) for ch in key)
    return events


class ScriptedEvents:
    """Event source that replays a fixed list, then raises ``error``."""

    def __init__(self, events: Iterable[KeyEvent], error: Optional[BaseException] = None) -> None:
        self._events = list(events)
        self._error = error or EOFError("script exhausted")
        self.reads = 0

    def read_blocking(self) -> KeyEvent:
        if not self._events:
            raise self._error
        self.reads += 1
        return self._events.pop(0)


class RecordingRenderer:
    """Renderer that keeps every snapshot it is asked to draw."""

    def __init__(self) -> None:
        self.snapshots: list[Snapshot] = []

    def draw(self, snapshot: Snapshot) -> None:
        self.snapshots.append(snapshot)


@pytest.fixture
def controller() -> AppController:
    return AppController()


@pytest.fixture
def editing(controller: AppController) -> AppController:
    """Controller already switched to editing mode."""
    controller.handle_event(KeyEvent.of_char("e"))
    return controller


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
