"""Record import and export."""

from .record_csv import RecordFormatError, load_scenes, parse_records, save_scenes, write_records

__all__ = ["RecordFormatError", "load_scenes", "parse_records", "save_scenes", "write_records"]
