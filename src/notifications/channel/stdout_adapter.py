"""Writes notices to a text stream, standard output by default."""

import sys
from typing import TextIO

from notifications.channel.output_port import OutputPort


class StdoutAdapter(OutputPort):
    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so a replaced sys.stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def write_lines(self, lines: list[str]) -> None:
        stream = self.stream
        for line in lines:
            stream.write(f"{line}\n")
        stream.flush()
