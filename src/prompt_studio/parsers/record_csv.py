"""CSV form of the scene record interchange format.

Header is exactly ``scene_order,image_prompt,narration_script``. Text
cells are always quoted with embedded quotes doubled; the order cell is a
bare integer.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from ..config import Config
from ..core.models import Scene, SceneRecord
from ..core.scenes import export_to_records, import_from_records

logger = logging.getLogger(__name__)


class RecordFormatError(ValueError):
    """Raised when a CSV file is missing one of the required columns."""


def write_records(records: Iterable[SceneRecord]) -> str:
    """Serialize records to CSV text."""
    buffer = io.StringIO()
    buffer.write(",".join(Config.CSV_HEADER) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for record in records:
        writer.writerow(record.as_row())
    return buffer.getvalue()


def parse_records(text: str) -> List[Dict[str, str]]:
    """Parse CSV text into record mappings keyed by column name.

    Columns are matched by header name, so extra or reordered columns are
    accepted. Cells missing from short rows read as empty strings.

    Raises:
        RecordFormatError: if a required column is absent from the header
    """
    rows = [row for row in csv.reader(io.StringIO(text.lstrip("\ufeff")), skipinitialspace=True) if row]
    if not rows:
        raise RecordFormatError(
            f"Invalid CSV format. Required headers: {', '.join(Config.CSV_HEADER)}"
        )

    header = [cell.strip() for cell in rows[0]]
    missing = [name for name in Config.CSV_HEADER if name not in header]
    if missing:
        raise RecordFormatError(
            f"Invalid CSV format. Required headers: {', '.join(Config.CSV_HEADER)} "
            f"(missing: {', '.join(missing)})"
        )

    columns = {name: header.index(name) for name in Config.CSV_HEADER}
    records = []
    for row in rows[1:]:
        records.append({
            name: row[index] if index < len(row) else ""
            for name, index in columns.items()
        })
    logger.debug("Parsed %d CSV record(s)", len(records))
    return records


def scenes_to_csv(scenes: Sequence[Scene]) -> str:
    return write_records(export_to_records(scenes))


def scenes_from_csv(text: str) -> List[Scene]:
    return import_from_records(parse_records(text))


def load_scenes(filepath: Path) -> List[Scene]:
    """Read a record CSV file into a fresh collection.

    Line endings inside quoted cells are kept as written.
    """
    with open(filepath, encoding="utf-8", newline="") as f:
        return scenes_from_csv(f.read())


def save_scenes(filepath: Path, scenes: Sequence[Scene]) -> Path:
    """Write a collection to a record CSV file."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8", newline="") as f:
        f.write(scenes_to_csv(scenes))
    return filepath
