"""Review-tool sinks receiving warnings, failures and markdown blocks."""

import sys
from typing import Optional, Protocol, TextIO


class ReviewSink(Protocol):
    def warn(self, message: str) -> None: ...

    def fail(self, message: str) -> None: ...

    def markdown(self, message: str) -> None: ...


class CollectingSink:
    """Keeps every message in memory, in the order received."""

    def __init__(self):
        self.warnings: list[str] = []
        self.failures: list[str] = []
        self.markdowns: list[str] = []

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def fail(self, message: str) -> None:
        self.failures.append(message)

    def markdown(self, message: str) -> None:
        self.markdowns.append(message)

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def as_dict(self) -> dict:
        return {
            "warnings": list(self.warnings),
            "failures": list(self.failures),
            "markdown": "\n".join(self.markdowns),
        }


class ConsoleSink:
    """Writes markdown to a stream and warnings/failures to an error stream."""

    def __init__(self, stream: Optional[TextIO] = None, err_stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.err_stream = err_stream or sys.stderr
        self.failed = False

    def warn(self, message: str) -> None:
        print(f"Warning: {message}", file=self.err_stream)

    def fail(self, message: str) -> None:
        self.failed = True
        print(f"Error: {message}", file=self.err_stream)

    def markdown(self, message: str) -> None:
        print(message, file=self.stream)
