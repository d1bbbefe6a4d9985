"""Markdown pipe-table rendering for test case records."""

import logging
from typing import Callable, Optional, Sequence

from .exceptions import HeadersUnavailableError
from .models import TestCaseRecord

logger = logging.getLogger(__name__)

LinkTransform = Callable[[str], str]


def common_attributes(records: Sequence[TestCaseRecord]) -> list[str]:
    """Attribute names present on every record, sorted."""
    if not records:
        return []
    common = set(records[0].keys())
    for record in records[1:]:
        common &= set(record.keys())
    return sorted(common)


def column_label(key: str) -> str:
    return key[:1].upper() + key[1:]


def _row(cells: Sequence[str]) -> str:
    return " | ".join(cells) + "|\n"


class TableRenderer:
    """Renders test case records as a markdown table.

    Args:
        link: Optional transform applied to every cell value, e.g. to turn
            file paths into links. Defaults to leaving values unchanged.
    """

    def __init__(self, link: Optional[LinkTransform] = None):
        self.link = link

    def render(self, records: Sequence[TestCaseRecord], headers: Optional[Sequence[str]] = None) -> str:
        """Render records as a table.

        Without explicit headers the columns are the attributes common to all
        records. Explicit headers must all be common attributes.

        Raises:
            HeadersUnavailableError: an explicit header is missing from a record
        """
        available = common_attributes(records)

        if headers:
            missing = [h for h in headers if h not in available]
            if missing:
                raise HeadersUnavailableError(missing, available)
            keys = list(headers)
        else:
            keys = available

        lines = [
            _row([column_label(key) for key in keys]),
            _row(["---" for _ in keys]),
        ]
        for record in records:
            # a missing attribute still takes up its column
            lines.append(_row([self._cell(record.get(key, "")) for key in keys]))

        logger.debug(f"Rendered {len(records)} rows with columns {keys}")
        return "".join(lines)

    def _cell(self, value: str) -> str:
        if self.link is None or not value:
            return value
        return self.link(value)
