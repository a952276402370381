"""
CSV Summarizer - NegocIA
negocia/services/csv_summarizer.py

Splits uploaded delimited text into header + data rows and derives the
coarse metrics returned with every analysis.
"""
import csv
import io
import logging
from dataclasses import dataclass, field
from typing import List

from negocia.models.analysis import AnalysisMetrics

logger = logging.getLogger(__name__)

# Rows with fewer cells than this are treated as blank/trailing lines.
MIN_CELLS_PER_ROW = 2

# Placeholder used for both ends of the range when there are no data rows.
EMPTY_RANGE_PLACEHOLDER = "undefined"


@dataclass
class CsvSummary:
    headers: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)

    @property
    def total_records(self) -> int:
        return len(self.rows)

    @property
    def columns_analyzed(self) -> int:
        return len(self.headers)

    @property
    def date_range_label(self) -> str:
        if not self.rows:
            return f"{EMPTY_RANGE_PLACEHOLDER} a {EMPTY_RANGE_PLACEHOLDER}"
        return f"{self.rows[0][0]} a {self.rows[-1][0]}"

    def sample(self, limit: int) -> List[List[str]]:
        return self.rows[:limit]

    def to_metrics(self) -> AnalysisMetrics:
        return AnalysisMetrics(
            total_records=self.total_records,
            date_range_label=self.date_range_label,
            columns_analyzed=self.columns_analyzed,
        )


def _is_blank(row: List[str]) -> bool:
    return not any(row)


def _parse_rows(text: str) -> List[List[str]]:
    try:
        # strict: an unterminated quote raises instead of swallowing the rest of the file
        return list(csv.reader(io.StringIO(text), strict=True))
    except csv.Error as e:
        # Format problems are tolerated: degrade to a plain line/comma split.
        logger.warning(f"CSV parser rejected input ({e}); using plain split")
        return [line.split(",") for line in text.splitlines()]


def summarize_csv(text: str) -> CsvSummary:
    """
    Summarize raw delimited text.

    Row 0 is the header. Data rows with fewer than two cells are dropped,
    which also drops legitimately short rows. Quoted fields may contain
    commas and line breaks.
    """
    rows = _parse_rows(text or "")
    # The header is the first non-blank line
    while rows and _is_blank(rows[0]):
        rows.pop(0)
    if not rows:
        return CsvSummary()

    headers = rows[0]
    data = [row for row in rows[1:] if len(row) >= MIN_CELLS_PER_ROW]

    dropped = len(rows) - 1 - len(data)
    if dropped:
        logger.debug(f"Dropped {dropped} short row(s) while summarizing")

    return CsvSummary(headers=headers, rows=data)
