"""Fake output adapter — records written lines for testing."""

from notifications.channel.output_port import OutputPort


class FakeOutputAdapter(OutputPort):
    """Output adapter that keeps every written notice in memory for test assertions."""

    def __init__(self):
        self.notices: list[list[str]] = []

    def write_lines(self, lines: list[str]) -> None:
        self.notices.append(list(lines))

    @property
    def lines(self) -> list[str]:
        """All written lines, flattened in write order."""
        return [line for notice in self.notices for line in notice]

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    def reset(self):
        """Clear recorded notices (useful between tests)."""
        self.notices.clear()
