"""
Line sources and message sinks used by the prompt validator.

A line source shows a prompt and returns one line of text, never None; a
closed or exhausted source returns an empty string. A message sink displays
an error message to the user once per rejected attempt.
"""

from __future__ import annotations

import logging
import sys
from collections import deque
from collections.abc import Iterable
from typing import Protocol, TextIO

from .cancellation import CancellationToken

logger = logging.getLogger(__name__)


class LineSource(Protocol):
    """
    Blocking "read one line of text" capability.

    A source may also expose a boolean `closed` attribute; once it is True
    the prompt loop stops instead of re-prompting.
    """

    def read_line(self, prompt: str) -> str: ...


class MessageSink(Protocol):
    """Displays an error message to the user."""

    def show(self, message: str) -> None: ...


class ConsoleLineSource:
    """
    Reads lines from a text stream, writing the prompt to an output stream.

    On end of input the source returns "", sets `closed` and cancels the
    attached token, if any.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._cancel_token = cancel_token
        self.closed = False

    def read_line(self, prompt: str) -> str:
        stdin = self._stdin or sys.stdin
        stdout = self._stdout or sys.stdout

        stdout.write(prompt)
        stdout.flush()

        line = stdin.readline()
        if not line:
            if not self.closed:
                logger.debug("End of input reached")
            self.closed = True
            if self._cancel_token is not None:
                self._cancel_token.cancel()
            return ""

        return line.rstrip("\r\n")


class StaticLineSource:
    """Serves a fixed sequence of lines, then empty strings."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: deque[str] = deque(lines)
        self.prompts: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            return ""
        return self._lines.popleft()

    @property
    def remaining(self) -> int:
        return len(self._lines)


class ConsoleMessageSink:
    """Writes each message on its own line, preceded by a blank line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def show(self, message: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(f"\n{message}\n")
        stream.flush()
