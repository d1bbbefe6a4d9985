"""JUnit XML parser - walks both report dialects into TestCaseRecords."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, Optional, Union

from .exceptions import MalformedReportError, ReportFileNotFoundError, ReportReadError
from .models import Classification, ReportCollection, TestCaseRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def classify(testcase: ET.Element) -> frozenset[Classification]:
    """Evaluate each classification predicate independently."""
    tags = [child.tag for child in testcase]
    found = set()
    if not tags:
        found.add(Classification.PASSED)
    if "failure" in tags:
        found.add(Classification.FAILED)
    if "error" in tags:
        found.add(Classification.ERRORED)
    if "skipped" in tags:
        found.add(Classification.SKIPPED)
    return frozenset(found)


def find_testsuites(root: ET.Element) -> list[ET.Element]:
    """Locate <testsuite> elements.

    The nested <testsuites><testsuite/></testsuites> shape is tried first, then
    a bare <testsuite> root. Anything else yields no suites.
    """
    if root.tag == "testsuites":
        suites = root.findall("testsuite")
        if suites:
            return suites
    if root.tag == "testsuite":
        return [root]
    return []


class JUnitParser:
    """Parses JUnit XML report files into a ReportCollection."""

    def parse_file(self, path: PathLike) -> ReportCollection:
        return self.parse_files([path])

    def parse_files(self, paths: Iterable[PathLike]) -> ReportCollection:
        """Parse report files in order.

        Every file must exist and parse; on the first failure the error is
        raised and nothing from this call is returned.

        Args:
            paths: Report file paths, concatenated in the given order

        Raises:
            ReportFileNotFoundError: a path does not exist
            ReportReadError: a file exists but cannot be read
            MalformedReportError: a file is not well-formed XML
        """
        collection = ReportCollection()
        for path in paths:
            report = Path(path)
            if not report.is_file():
                raise ReportFileNotFoundError(str(path))

            try:
                data = report.read_bytes()
            except OSError as e:
                raise ReportReadError(str(path), str(e)) from e

            records = self.parse_document(data, source=str(path))
            collection.extend(records)
            logger.debug(f"Parsed {len(records)} test cases from {path}")

        logger.debug(f"Parsed reports: {collection.counts()}")
        return collection

    def parse_document(self, data: bytes, source: Optional[str] = None) -> list[TestCaseRecord]:
        """Parse one report document, in document order."""
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise MalformedReportError(source or "<memory>", str(e)) from e

        suites = find_testsuites(root)
        if not suites:
            logger.debug(f"No testsuite found in {source or '<memory>'}")

        records = []
        for suite in suites:
            for testcase in suite:
                if testcase.tag != "testcase":
                    continue
                records.append(TestCaseRecord(
                    attributes=dict(testcase.attrib),
                    classifications=classify(testcase),
                    source=source,
                ))
        return records
