"""Writer module - report file output."""

from .file_writer import ReportWriter, to_json_string
from .filesystem import LocalFilesystem
from .pending import PendingWrites

__all__ = [
    "ReportWriter",
    "to_json_string",
    "LocalFilesystem",
    "PendingWrites",
]
