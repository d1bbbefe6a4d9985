"""JUnit report aggregation and markdown rendering for code review."""

from .exceptions import (
    HeadersUnavailableError,
    JUnitReporterError,
    MalformedReportError,
    ReportFileNotFoundError,
    ReportReadError,
)
from .junit_parser import JUnitParser
from .models import Classification, ReportCollection, TestCaseRecord
from .reporter import JUnitReporter
from .table_renderer import TableRenderer, common_attributes

__all__ = [
    "Classification",
    "HeadersUnavailableError",
    "JUnitParser",
    "JUnitReporter",
    "JUnitReporterError",
    "MalformedReportError",
    "ReportCollection",
    "ReportFileNotFoundError",
    "ReportReadError",
    "TableRenderer",
    "TestCaseRecord",
    "common_attributes",
]

__version__ = "0.1.0"
