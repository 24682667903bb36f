from typing import NamedTuple, Optional, Tuple


class ContextLine(NamedTuple):
    number: int
    text: str
    is_error_line: bool


class LiveClientError(Exception):
    """Base class for failures talking to the live client API."""

    def __init__(self, endpoint: str, message: str):
        super().__init__(message)
        self.endpoint = endpoint
        self.message = message


class TransportError(LiveClientError):
    """Network failure (status is None) or a non-success HTTP status."""

    def __init__(self, endpoint: str, status: Optional[int] = None, message: str = ""):
        if not message:
            message = f"HTTP error: {status}" if status is not None else "request failed"
        super().__init__(endpoint, message)
        self.status = status

    def __str__(self):
        return f"{self.endpoint}: {self.message}"


class DecodeError(LiveClientError):
    """Response text did not match the expected shape.

    ``line`` and ``column`` are 1-based and point into the original text;
    ``context`` holds the surrounding lines.
    """

    def __init__(self, endpoint: str, message: str, line: int, column: int,
                 context: Tuple[ContextLine, ...] = ()):
        super().__init__(endpoint, message)
        self.line = line
        self.column = column
        self.context = tuple(context)

    def __str__(self):
        return f"{self.endpoint}: {self.message} (line {self.line}, column {self.column})"

    def format_context(self) -> str:
        out = []
        for entry in self.context:
            marker = ">>> " if entry.is_error_line else "    "
            out.append(f"{marker}{entry.number}: {entry.text}")
        return "\n".join(out)


class ChannelClosed(Exception):
    """The receiving side of a snapshot channel is gone."""
