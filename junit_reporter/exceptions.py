"""Errors raised while parsing and rendering JUnit reports."""


class JUnitReporterError(Exception):
    """Base error for the junit_reporter package."""
    pass


class ReportFileNotFoundError(JUnitReporterError, FileNotFoundError):
    """A report path does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Report file does not exist: {path}")
        self.path = path


class MalformedReportError(JUnitReporterError):
    """A report file could not be parsed as XML."""

    def __init__(self, path: str, reason: str = ""):
        message = f"Malformed JUnit report: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.path = path
        self.reason = reason


class HeadersUnavailableError(JUnitReporterError):
    """Requested table headers are not common to every rendered test case."""

    def __init__(self, missing: list[str], available: list[str]):
        super().__init__(
            f"Headers not available in every test case: {', '.join(missing)} "
            f"(available: {', '.join(available) or 'none'})"
        )
        self.missing = missing
        self.available = available


class ReportReadError(JUnitReporterError):
    """A report file exists but could not be read."""

    def __init__(self, path: str, reason: str = ""):
        message = f"Cannot read JUnit report: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.path = path
        self.reason = reason
