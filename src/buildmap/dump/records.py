import csv
from pathlib import Path

from src.buildmap.models.build import BuildRecord

FIELDNAMES = ['version_number', 'build_number']


def dump_records_csv(records: list[BuildRecord], csv_path: str | Path) -> Path:
    """
    Write records to CSV with a header row, creating parent directories as needed.

    Args:
        records: Records in the order they should appear
        csv_path: Destination file

    Returns:
        The path that was written
    """
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    with open(csv_path, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(record.to_json() for record in records)
    return csv_path


def format_records(records: list[BuildRecord]) -> str:
    """Plain two-column listing for terminal output."""
    return "\n".join(f"{record.version_number}\t{record.build_number}" for record in records)
