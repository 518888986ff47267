"""CSV import/export of contender lists."""

from __future__ import annotations

import csv
import io
import logging
from typing import Dict, Iterable, List

from awardodds.model.records import parse_candidate_record
from awardodds.model.types import Candidate, Category

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["category_id", "category_name", "title", "studio", "precursor", "history", "buzz", "strength"]
REQUIRED_COLUMNS = ["category_id", "title", "studio", "precursor", "history", "buzz", "strength"]


class CsvImportError(ValueError):
    """Raised when a contender CSV cannot be imported."""

    pass


def _format_number(value: float) -> str:
    # 72.0 -> "72", 72.5 -> "72.5"
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


def export_candidates_csv(categories: Iterable[Category]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(EXPORT_COLUMNS)
    for category in categories:
        for candidate in category.candidates:
            writer.writerow(
                [
                    category.id,
                    category.name,
                    candidate.title,
                    candidate.studio,
                    _format_number(candidate.precursor),
                    _format_number(candidate.history),
                    _format_number(candidate.buzz),
                    candidate.strength.value,
                ]
            )
    return buf.getvalue().rstrip("\n")


def import_candidates_csv(text: str, categories: List[Category]) -> int:
    """Replace candidate lists of the categories present in the CSV.

    Categories not mentioned in the file keep their candidates. Validation
    happens before any category is touched.

    Returns:
        Number of imported candidates

    Raises:
        CsvImportError: empty file, missing columns, unknown category id or
            an invalid row (row numbers are 1-based, header is row 1)
    """
    rows = [row for row in csv.reader(io.StringIO(text)) if any(cell.strip() for cell in row)]
    if len(rows) < 2:
        raise CsvImportError("CSV is empty or missing rows.")

    header = [name.strip().lower() for name in rows[0]]
    missing = [name for name in REQUIRED_COLUMNS if name not in header]
    if missing:
        raise CsvImportError(f"Missing required columns: {', '.join(missing)}")

    index = {name: header.index(name) for name in REQUIRED_COLUMNS}
    by_id = {category.id: category for category in categories}
    imported: Dict[str, List[Candidate]] = {}

    for row_number, row in enumerate(rows[1:], start=2):
        def cell(name: str) -> str:
            i = index[name]
            return row[i] if i < len(row) else ""

        category_id = cell("category_id").strip()
        if category_id not in by_id:
            raise CsvImportError(f'Unknown category_id "{category_id}" on row {row_number}.')

        candidate = parse_candidate_record({name: cell(name) for name in REQUIRED_COLUMNS})
        if candidate is None:
            raise CsvImportError(f"Invalid contender data on row {row_number}.")
        imported.setdefault(category_id, []).append(candidate)

    for category_id, candidates in imported.items():
        by_id[category_id].candidates = candidates

    total = sum(len(c) for c in imported.values())
    logger.info({"csv_import": {"categories": len(imported), "candidates": total}})
    return total


__all__ = [
    "CsvImportError",
    "EXPORT_COLUMNS",
    "REQUIRED_COLUMNS",
    "export_candidates_csv",
    "import_candidates_csv",
]
