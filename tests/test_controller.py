"""Tests for key dispatch in the application controller."""

import ast
from pathlib import Path

import pytest

import tabline.core
from tabline.core.controller import AppController
from tabline.core.events import Key, KeyEvent, KeyEventKind
from tabline.core.modes import InputMode, RunState
from tabline.core.shortcuts import Action
from tabline.core.tabs import SelectedTab

from conftest import RecordingRenderer, ScriptedEvents, press


def feed(controller: AppController, *keys) -> None:
    for event in press(*keys):
        controller.handle_event(event)


class TestInitialState:

    def test_defaults(self, controller: AppController) -> None:
        assert controller.run_state == RunState.RUNNING
        assert controller.input_mode == InputMode.NORMAL
        assert controller.selected_tab == SelectedTab.TAB_1
        assert controller.buffer.content == ""
        assert controller.messages.lines == ()


class TestNormalMode:
    """Keys act as commands."""

    def test_e_enters_editing(self, controller: AppController) -> None:
        assert controller.handle_event(KeyEvent.of_char("e")) is True
        assert controller.input_mode == InputMode.EDITING
        assert controller.buffer.content == ""

    @pytest.mark.parametrize("key", ["q", Key.ESCAPE])
    def test_quit(self, controller: AppController, key) -> None:
        feed(controller, key)
        assert controller.run_state == RunState.QUITTING
        assert not controller.running

    @pytest.mark.parametrize("key", ["l", Key.RIGHT])
    def test_next_tab(self, controller: AppController, key) -> None:
        feed(controller, key)
        assert controller.selected_tab == SelectedTab.TAB_2

    @pytest.mark.parametrize("key", ["h", Key.LEFT])
    def test_previous_tab(self, controller: AppController, key) -> None:
        feed(controller, "lll", key)
        assert controller.selected_tab == SelectedTab.TAB_3

    def test_tab_navigation_saturates(self, controller: AppController) -> None:
        feed(controller, "llllllll")
        assert controller.selected_tab == SelectedTab.TAB_4
        feed(controller, "hhhhhhhh")
        assert controller.selected_tab == SelectedTab.TAB_1

    def test_other_keys_are_ignored(self, controller: AppController) -> None:
        for event in press("x", "1", Key.ENTER, Key.BACKSPACE, Key.UP):
            assert controller.handle_event(event) is False
        assert controller.input_mode == InputMode.NORMAL
        assert controller.buffer.content == ""
        assert controller.selected_tab == SelectedTab.TAB_1

    def test_unknown_escape_sequence_is_ignored(self, controller: AppController) -> None:
        assert controller.handle_event(KeyEvent(raw="\x1b[99~")) is False


class TestEditingMode:
    """Keys edit the input line."""

    def test_typing_inserts(self, editing: AppController) -> None:
        feed(editing, "hi")
        assert editing.buffer.content == "hi"
        assert editing.buffer.cursor == 2

    def test_commit_sequence(self, controller: AppController) -> None:
        feed(controller, "e", "hi", Key.ENTER)
        assert controller.messages.lines == ("hi",)
        assert controller.buffer.content == ""
        assert controller.buffer.cursor == 0
        assert controller.input_mode == InputMode.EDITING

    def test_commit_hello(self, editing: AppController) -> None:
        feed(editing, "hello", Key.ENTER)
        assert editing.messages.lines == ("hello",)
        assert editing.buffer.content == ""
        assert editing.buffer.cursor == 0

    def test_commit_empty_line(self, editing: AppController) -> None:
        feed(editing, Key.ENTER)
        assert editing.messages.lines == ("",)

    def test_command_keys_are_text(self, editing: AppController) -> None:
        feed(editing, "qhle")
        assert editing.buffer.content == "qhle"
        assert editing.run_state == RunState.RUNNING
        assert editing.selected_tab == SelectedTab.TAB_1
        assert editing.input_mode == InputMode.EDITING

    def test_alt_characters_are_text(self, editing: AppController) -> None:
        assert editing.handle_event(KeyEvent.of_char("q", alt=True)) is True
        assert editing.buffer.content == "q"
        assert editing.input_mode == InputMode.EDITING
        assert editing.run_state == RunState.RUNNING

    def test_arrows_move_text_cursor_not_tab(self, editing: AppController) -> None:
        feed(editing, "abc", Key.LEFT, Key.LEFT)
        assert editing.buffer.cursor == 1
        assert editing.selected_tab == SelectedTab.TAB_1
        feed(editing, Key.RIGHT)
        assert editing.buffer.cursor == 2
        assert editing.selected_tab == SelectedTab.TAB_1

    def test_backspace(self, editing: AppController) -> None:
        feed(editing, "abc", Key.LEFT, Key.BACKSPACE)
        assert editing.buffer.content == "ac"
        assert editing.buffer.cursor == 1

    def test_escape_returns_to_normal_and_keeps_text(self, editing: AppController) -> None:
        feed(editing, "draft", Key.ESCAPE)
        assert editing.input_mode == InputMode.NORMAL
        assert editing.run_state == RunState.RUNNING
        assert editing.buffer.content == "draft"

    def test_escape_then_q_quits(self, editing: AppController) -> None:
        feed(editing, Key.ESCAPE, "q")
        assert editing.run_state == RunState.QUITTING
        assert editing.buffer.content == ""

    def test_unbound_named_keys_are_ignored(self, editing: AppController) -> None:
        feed(editing, "ab")
        for event in press(Key.UP, Key.DOWN, Key.TAB, Key.HOME, Key.DELETE):
            assert editing.handle_event(event) is False
        assert editing.buffer.content == "ab"


class TestEventKinds:
    """Only key presses are acted upon."""

    @pytest.mark.parametrize("kind", [KeyEventKind.RELEASE, KeyEventKind.REPEAT])
    def test_non_press_ignored_in_editing(self, editing: AppController, kind: KeyEventKind) -> None:
        assert editing.handle_event(KeyEvent.of_char("x", kind=kind)) is False
        assert editing.handle_event(KeyEvent.of_key(Key.ENTER, kind=kind)) is False
        assert editing.buffer.content == ""
        assert editing.messages.lines == ()

    def test_release_ignored_in_normal(self, controller: AppController) -> None:
        controller.handle_event(KeyEvent.of_char("q", kind=KeyEventKind.RELEASE))
        assert controller.run_state == RunState.RUNNING


class TestPerform:

    def test_every_action_is_handled(self, controller: AppController) -> None:
        for action in Action:
            controller.perform(action)

    def test_snapshot(self, editing: AppController) -> None:
        feed(editing, "a中", Key.ENTER, "xy", Key.LEFT)
        snap = editing.snapshot()
        assert snap.input_mode == InputMode.EDITING
        assert snap.run_state == RunState.RUNNING
        assert snap.selected_tab == SelectedTab.TAB_1
        assert snap.content == "xy"
        assert snap.cursor == 1
        assert snap.cursor_column == 1
        assert snap.messages == ("a中",)

    def test_snapshot_cursor_column_counts_cells(self, editing: AppController) -> None:
        feed(editing, "中中")
        assert editing.snapshot().cursor == 2
        assert editing.snapshot().cursor_column == 4


class TestRunLoop:
    """The blocking read / dispatch / draw loop."""

    def test_runs_until_quit(self, controller: AppController, renderer: RecordingRenderer) -> None:
        events = ScriptedEvents(press("l", "q", "l"))
        controller.run(events, renderer)
        assert events.reads == 2
        assert controller.selected_tab == SelectedTab.TAB_2
        # Initial frame plus one per event
        assert len(renderer.snapshots) == 3
        assert renderer.snapshots[0].selected_tab == SelectedTab.TAB_1
        assert renderer.snapshots[-1].run_state == RunState.QUITTING

    def test_chat_session(self, controller: AppController, renderer: RecordingRenderer) -> None:
        events = ScriptedEvents(press("e", "hi", Key.ENTER, "yo", Key.ENTER, Key.ESCAPE, "q"))
        controller.run(events, renderer)
        assert controller.messages.lines == ("hi", "yo")
        assert renderer.snapshots[-1].messages == ("hi", "yo")

    def test_snapshots_are_not_mutated_later(self, controller: AppController, renderer: RecordingRenderer) -> None:
        events = ScriptedEvents(press("e", "a", "b", Key.ESCAPE, "q"))
        controller.run(events, renderer)
        assert [s.content for s in renderer.snapshots] == ["", "", "a", "ab", "ab", "ab"]

    def test_read_error_propagates(self, controller: AppController, renderer: RecordingRenderer) -> None:
        events = ScriptedEvents(press("e", "x"), error=OSError("read failed"))
        with pytest.raises(OSError, match="read failed"):
            controller.run(events, renderer)
        assert controller.buffer.content == "x"
        assert len(renderer.snapshots) == 3

    def test_eof_propagates(self, controller: AppController, renderer: RecordingRenderer) -> None:
        with pytest.raises(EOFError):
            controller.run(ScriptedEvents([]), renderer)


class TestCoreLayering:

    def test_core_never_imports_the_terminal_front_end(self) -> None:
        package_dir = Path(tabline.core.__file__).parent
        imported: set[str] = set()
        for source in package_dir.glob("*.py"):
            tree = ast.parse(source.read_text(encoding="utf-8"))
            for node in ast.walk(tree):
                if isinstance(node, ast.ImportFrom) and node.module:
                    imported.add(node.module)
                elif isinstance(node, ast.Import):
                    imported.update(alias.name for alias in node.names)
        assert "tabline.core.events" in imported
        assert not [name for name in imported if name.startswith("tabline.cli")]
