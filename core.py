#!/usr/bin/env python3
"""
Core operations shared between MCP server and CLI.
Contains the logic for summarizing and reporting JUnit results.
"""

import logging
from typing import Iterable, Optional

from junit_reporter.config import ReporterConfig
from junit_reporter.exceptions import HeadersUnavailableError
from junit_reporter.junit_parser import JUnitParser
from junit_reporter.links import make_file_linker
from junit_reporter.reporter import JUnitReporter
from junit_reporter.sinks import CollectingSink, ReviewSink

logger = logging.getLogger(__name__)


def summarize_reports(paths: Iterable[str]) -> dict:
    """
    Parse reports and count test cases per classification.

    Args:
        paths: JUnit XML report paths

    Returns:
        dict with counts and the names of failed, errored and skipped tests
    """
    collection = JUnitParser().parse_files(paths)
    result = collection.counts()
    result["failed_tests"] = [t.get("name", "") for t in collection.failures]
    result["errored_tests"] = [t.get("name", "") for t in collection.errors]
    result["skipped_tests"] = [t.get("name", "") for t in collection.skipped]
    return result


def make_reporter(config: ReporterConfig, sink: ReviewSink, root: str = ".") -> JUnitReporter:
    """Build a reporter from settings, linking test files when a repository is configured."""
    link = make_file_linker(config.repo_url, config.head_ref, root=root)
    return JUnitReporter.from_config(sink, config, link=link)


def run_report(paths: Iterable[str], config: ReporterConfig, sink: ReviewSink,
               root: str = ".") -> JUnitReporter:
    """
    Parse reports and send the report to a sink.

    Args:
        paths: JUnit XML report paths
        config: Reporter settings; repo_url/head_ref enable file links
        sink: Receives warnings, failures and markdown
        root: Checkout directory for resolving file links

    Returns:
        The reporter, holding the parsed results
    """
    reporter = make_reporter(config, sink, root=root)
    reporter.parse_files(paths)
    reporter.report()
    return reporter


def build_report(paths: Iterable[str], config: Optional[ReporterConfig] = None,
                 root: str = ".") -> dict:
    """
    Run a report and collect its output.

    A table with unavailable headers does not discard what was already
    reported; the error is returned alongside it.

    Returns:
        dict with warnings, failures, markdown, counts and a passed flag,
        plus "error" when a table could not be rendered
    """
    sink = CollectingSink()
    reporter = make_reporter(config or ReporterConfig(), sink, root=root)
    reporter.parse_files(paths)

    error = None
    try:
        reporter.report()
    except HeadersUnavailableError as e:
        error = str(e)

    result = sink.as_dict()
    result["counts"] = reporter.collection.counts()
    result["passed"] = not sink.failed and error is None
    if error:
        result["error"] = error
    return result
