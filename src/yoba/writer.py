from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

# DEBUG = True
DEBUG = False


class IndentingWriter:
    """Writes the evaluation trace, indented by call depth.

    Trace lines go to `trace_stream` (stderr by default) and only when
    tracing is enabled; `print`/`println` always write to `stream`
    (stdout by default).
    """

    def __init__(
        self,
        indent_size: int = 3,
        enabled: bool | None = None,
        stream: TextIO | None = None,
        trace_stream: TextIO | None = None,
    ) -> None:
        self._indent_size = indent_size
        self._indents = 0
        self._enabled = DEBUG if enabled is None else enabled
        self._stream = stream
        self._trace_stream = trace_stream

    def debug(self, message: str) -> None:
        if self._enabled:
            self._print_indentation()
            print(message, end="", file=self._trace())

    def debugln(self, message: str) -> None:
        if self._enabled:
            self.debug(message)
            print(file=self._trace())

    def print(self, message: str) -> None:
        print(message, end="", file=self._out())

    def println(self, message: str) -> None:
        self.print(message + "\n")

    def indent(self) -> None:
        if self._enabled:
            self._indents += 1

    def dedent(self) -> None:
        if self._enabled:
            self._indents -= 1

    def print_division_line(self, size: int = 80) -> None:
        print("-" * size, file=self._out())

    def _print_indentation(self) -> None:
        print(" " * self._indent_size * self._indents, end="", file=self._trace())

    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _trace(self) -> TextIO:
        return self._trace_stream if self._trace_stream is not None else sys.stderr


@contextmanager
def indented_output(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.indent()
    try:
        yield
    finally:
        output_writer.dedent()


@contextmanager
def surrounding_box_title(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.print_division_line()
    try:
        yield
    finally:
        output_writer.print_division_line()
