"""Reports parsed JUnit results to a code review sink.

Typical usage:

    reporter = JUnitReporter(sink)
    reporter.parse_files(["build/rspec.xml", "build/xctest.xml"])
    reporter.show_skipped_tests = True
    reporter.report()
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from .exceptions import HeadersUnavailableError
from .junit_parser import JUnitParser
from .models import ReportCollection, TestCaseRecord
from .sinks import ReviewSink
from .table_renderer import LinkTransform, TableRenderer

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Tests have failed. See below for more information."


class JUnitReporter:
    """Parses JUnit reports and reports failures, errors and skipped tests.

    Args:
        sink: Receives warn/fail/markdown calls
        parser: Parser to use, a new JUnitParser by default
        link: Optional cell transform passed to the table renderer
        show_skipped_tests: Warn about skipped tests and list them
        report_headers: Columns of the failures table; common attributes if empty
        skipped_test_report_headers: Columns of the skipped table; common
            attributes if empty
    """

    def __init__(self, sink: ReviewSink, parser: Optional[JUnitParser] = None,
                 link: Optional[LinkTransform] = None,
                 show_skipped_tests: bool = False,
                 report_headers: Optional[Sequence[str]] = None,
                 skipped_test_report_headers: Sequence[str] = ()):
        self.sink = sink
        self.parser = parser or JUnitParser()
        self.renderer = TableRenderer(link=link)
        self.show_skipped_tests = show_skipped_tests
        self.report_headers = list(report_headers) if report_headers is not None else None
        self.skipped_test_report_headers = list(skipped_test_report_headers)
        self._collection = ReportCollection()

    @classmethod
    def from_config(cls, sink: ReviewSink, config, link: Optional[LinkTransform] = None) -> "JUnitReporter":
        return cls(
            sink,
            link=link,
            show_skipped_tests=config.show_skipped_tests,
            report_headers=config.report_headers,
            skipped_test_report_headers=config.skipped_test_report_headers,
        )

    @property
    def collection(self) -> ReportCollection:
        return self._collection

    @property
    def tests(self) -> list[TestCaseRecord]:
        return self._collection.tests

    @property
    def passes(self) -> list[TestCaseRecord]:
        return self._collection.passes

    @property
    def failures(self) -> list[TestCaseRecord]:
        return self._collection.failures

    @property
    def errors(self) -> list[TestCaseRecord]:
        return self._collection.errors

    @property
    def skipped(self) -> list[TestCaseRecord]:
        return self._collection.skipped

    def parse_file(self, path: Union[str, Path]) -> None:
        self.parse_files([path])

    def parse_files(self, paths: Iterable[Union[str, Path]]) -> None:
        """Replace any previous results with the results of these reports."""
        self._collection = ReportCollection()
        self._collection = self.parser.parse_files(paths)

    def report(self) -> None:
        """Signal failures and post result tables to the sink.

        The skipped and failures tables are rendered independently; if either
        has unavailable headers the other is still posted and the first error
        is raised afterwards.
        """
        pending: Optional[HeadersUnavailableError] = None

        if self.show_skipped_tests and self.skipped:
            self.sink.warn(f"Skipped {len(self.skipped)} tests.")
            try:
                table = self.renderer.render(self.skipped, self.skipped_test_report_headers)
                self.sink.markdown(f"### Skipped: \n\n{table}")
            except HeadersUnavailableError as e:
                logger.error(f"Cannot render skipped tests: {e}")
                pending = e

        if self.failures or self.errors:
            self.sink.fail(FAILURE_MESSAGE)
            try:
                table = self.renderer.render(self.failures + self.errors, self.report_headers)
                self.sink.markdown(f"### Tests: \n\n{table}")
            except HeadersUnavailableError as e:
                logger.error(f"Cannot render failed tests: {e}")
                pending = pending or e

        counts = self._collection.counts()
        logger.info(f"Reported {counts['total']} tests: {counts['failed']} failed, "
                    f"{counts['errored']} errored, {counts['skipped']} skipped")

        if pending is not None:
            raise pending
