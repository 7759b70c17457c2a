"""Keyboard input handling with event abstraction."""

from __future__ import annotations

import codecs
import os
import select
import sys
import time
from typing import Optional

from tabline.core.events import Key, KeyEvent


class InputReader:
    """
    Keyboard input reader for a terminal in raw mode.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    Read failures are not retried: an OSError from the descriptor
    propagates, and a closed stdin raises EOFError.

    Esc followed by a printable character in the same read is Alt plus
    that character: one char event with ``alt`` set. An Esc that ends
    its read is reported on its own, whatever arrives next.

    Terminals in raw mode only report key presses, so every event
    produced here has kind PRESS.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        # Navigation
        '[H': Key.HOME,
        '[F': Key.END,
        '[1~': Key.HOME,
        '[4~': Key.END,
        '[3~': Key.DELETE,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
    }

    ESCAPE_TIMEOUT = 0.1  # Seconds to wait for the rest of an escape sequence

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd
        # Incremental so a multi-byte character split across reads survives
        self._decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
        # Set when an Esc ended its read and more input followed in a later one
        self._escape_alone = False

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """
        Read a single key event.

        Returns None if no input available within timeout.
        """
        # Process any buffered input first
        if self._buffer:
            return self._process_buffer()

        if not self._has_input(timeout):
            return None

        self._read_available()

        if self._buffer:
            return self._process_buffer()

        return None

    def read_blocking(self) -> KeyEvent:
        """Read a key event, blocking until input is available."""
        while True:
            event = self.read(timeout=1.0)
            if event is not None:
                return event

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        self._read_chunk()

        # If buffer is just escape, wait for potential sequence
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()
            # Only CSI and SS3 continue across reads; anything else is a new key
            if len(self._buffer) > 1 and self._buffer[1] not in '[O':
                self._escape_alone = True

    def _read_chunk(self) -> None:
        data = os.read(self._fd, 1024)
        if not data:
            raise EOFError("Input stream closed")
        self._buffer += self._decoder.decode(data)

    def _wait_for_escape_sequence(self) -> None:
        """Wait for escape sequence to complete with proper timeouts."""
        deadline = time.monotonic() + self.ESCAPE_TIMEOUT

        while time.monotonic() < deadline:
            remaining = deadline - time.monotonic()
            wait_time = min(remaining, 0.025)  # 25ms intervals

            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                self._read_chunk()

                # Check if sequence looks complete
                if len(self._buffer) > 1:
                    rest = self._buffer[1:]
                    # Sequence ends with letter or ~
                    if rest and (rest[-1].isalpha() or rest[-1] == '~'):
                        return
                    if rest in self.SEQUENCES:
                        return

    def _process_buffer(self) -> Optional[KeyEvent]:
        """Process buffered input and return next key event."""
        if not self._buffer:
            return None

        first = self._buffer[0]

        if first in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=self.SIMPLE_KEYS[first], raw=first)

        if first == '\x1b':
            return self._parse_escape_sequence()

        if first.isprintable():
            self._buffer = self._buffer[1:]
            return KeyEvent.of_char(first)

        # Unknown control character - skip it
        self._buffer = self._buffer[1:]
        return None

    def _parse_escape_sequence(self) -> KeyEvent:
        """Parse an escape sequence from the buffer."""
        escape_alone = self._escape_alone
        self._escape_alone = False

        # Buffer starts with \x1b
        if len(self._buffer) == 1:
            self._buffer = ""
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        rest = self._buffer[1:]

        # A second escape means the first one was pressed on its own
        if rest[0] == '\x1b':
            self._buffer = rest
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        # Only CSI ('[') and SS3 ('O') introduce sequences
        if rest[0] not in '[O':
            # Esc and a printable char in one read is Alt+char
            if not escape_alone and rest[0].isprintable():
                self._buffer = rest[1:]
                return KeyEvent.of_char(rest[0], alt=True)
            self._buffer = rest
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        # Find where this sequence ends
        end_idx = len(rest)
        for i, ch in enumerate(rest[1:], start=1):
            if ch == '\x1b':
                end_idx = i
                break
            if ch.isalpha() or ch == '~':
                end_idx = i + 1
                break

        seq = rest[:end_idx]
        self._buffer = self._buffer[1 + end_idx:]
        raw = '\x1b' + seq

        if seq in self.SEQUENCES:
            return KeyEvent(key=self.SEQUENCES[seq], raw=raw)

        # Unknown sequence
        return KeyEvent(raw=raw)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        ready, _, _ = select.select([self._fd], [], [], timeout)
        return bool(ready)
