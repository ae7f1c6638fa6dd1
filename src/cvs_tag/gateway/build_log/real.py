"""Build log writing to a text stream."""

import sys
import traceback
from typing import TextIO

import click

from cvs_tag.gateway.build_log.abc import BuildLog


class StreamBuildLog(BuildLog):
    """Writes build log lines to a stream (stdout unless given)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _write(self, text: str) -> None:
        click.echo(text, file=self._stream if self._stream is not None else sys.stdout)

    def println(self, line: str) -> None:
        self._write(line)

    def error(self, message: str, *, exc: BaseException | None) -> None:
        self._write(click.style("ERROR: ", fg="red") + message)
        if exc is not None:
            self._write("".join(traceback.format_exception(exc)).rstrip("\n"))

    def fatal_error(self, message: str) -> None:
        self._write(click.style("FATAL: ", fg="red", bold=True) + message)
