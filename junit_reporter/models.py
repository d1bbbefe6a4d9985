"""
Data models for parsed JUnit reports.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional


class Classification(Enum):
    """Structural classification of a test case."""
    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class TestCaseRecord:
    """Attributes of a single <testcase> element.

    Classifications are computed once at parse time and are not exclusive:
    a test case with both <failure> and <error> children is FAILED and ERRORED.
    """
    __test__ = False

    attributes: dict[str, str]
    classifications: frozenset[Classification] = frozenset()
    source: Optional[str] = None

    def __getitem__(self, key: str) -> str:
        return self.attributes[key]

    def __contains__(self, key: object) -> bool:
        return key in self.attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(key, default)

    def keys(self):
        return self.attributes.keys()

    @property
    def passed(self) -> bool:
        return Classification.PASSED in self.classifications

    @property
    def failed(self) -> bool:
        return Classification.FAILED in self.classifications

    @property
    def errored(self) -> bool:
        return Classification.ERRORED in self.classifications

    @property
    def skipped(self) -> bool:
        return Classification.SKIPPED in self.classifications


@dataclass
class ReportCollection:
    """All test cases from one parse call, plus the four overlapping views."""
    tests: list[TestCaseRecord] = field(default_factory=list)
    passes: list[TestCaseRecord] = field(default_factory=list)
    failures: list[TestCaseRecord] = field(default_factory=list)
    errors: list[TestCaseRecord] = field(default_factory=list)
    skipped: list[TestCaseRecord] = field(default_factory=list)

    def add(self, record: TestCaseRecord) -> None:
        self.tests.append(record)
        if record.passed:
            self.passes.append(record)
        if record.failed:
            self.failures.append(record)
        if record.errored:
            self.errors.append(record)
        if record.skipped:
            self.skipped.append(record)

    def extend(self, records: Iterable[TestCaseRecord]) -> None:
        for record in records:
            self.add(record)

    def counts(self) -> dict[str, int]:
        return {
            "total": len(self.tests),
            "passed": len(self.passes),
            "failed": len(self.failures),
            "errored": len(self.errors),
            "skipped": len(self.skipped),
        }
