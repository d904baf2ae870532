"""Airport lookup loader."""
import csv
import logging
from typing import List

from prettifier.config import Config
from prettifier.models.itinerary import CodeMapping, LookupRow

logger = logging.getLogger(__name__)


class LookupFormatError(ValueError):
    """Raised when the lookup file has structural defects."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} defect(s) in airport lookup")


def read_rows(path: str) -> List[List[str]]:
    """
    Read every record of the lookup CSV.

    Args:
        path: Path to the CSV file

    Returns:
        List of records, header included
    """
    with open(path, 'r', encoding='utf-8-sig', newline='') as f:
        rows = list(csv.reader(f))

    logger.debug(f"Read {len(rows)} row(s) from {path}")
    return rows


def validate_rows(rows: List[List[str]]) -> List[str]:
    """
    Collect structural defects across all rows.

    Every row must have exactly six cells and no cell may be blank. Row
    numbers in the messages are 1-based and count the header.
    """
    errors = []
    width = Config.LOOKUP_WIDTH

    for row_number, row in enumerate(rows, start=1):
        if len(row) != width:
            errors.append(
                f"Expected {width} columns in Row {row_number}, but found {len(row)}."
            )
        elif any(not cell.strip() for cell in row):
            errors.append(f"Empty cell found in Row {row_number}.")

    if rows and len(rows[0]) == width:
        header = [cell.strip() for cell in rows[0]]
        for column in Config.LOOKUP_COLUMNS:
            if column not in header:
                errors.append(f"Missing required column: {column}.")

    return errors


def build_mapping(rows: List[List[str]]) -> CodeMapping:
    """Build code mappings from validated rows, indexing columns by header name."""
    if not rows:
        return CodeMapping()

    header = {name.strip(): index for index, name in enumerate(rows[0])}

    lookup_rows = []
    for row in rows[1:]:
        lookup_rows.append(LookupRow(
            icao_code=row[header['icao_code']].strip(),
            iata_code=row[header['iata_code']].strip(),
            name=row[header['name']].strip(),
            municipality=row[header['municipality']].strip(),
        ))

    return CodeMapping.from_rows(lookup_rows)


def load_lookup(path: str) -> CodeMapping:
    """
    Load and validate the airport lookup file.

    Raises:
        LookupFormatError: if any row is malformed; no mapping is built
        OSError: if the file cannot be read
        csv.Error: if the file is not parseable CSV
    """
    rows = read_rows(path)

    errors = validate_rows(rows)
    if errors:
        logger.debug(f"Airport lookup rejected with {len(errors)} defect(s)")
        raise LookupFormatError(errors)

    mapping = build_mapping(rows)
    logger.info(f"Loaded {max(len(rows) - 1, 0)} airport(s) from {path}")
    return mapping
