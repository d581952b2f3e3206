"""Filesystem helper used to write report files."""

import os


class LocalFilesystem:
    """Writes report files to the local disk."""

    def normalize_path(self, path: str) -> str:
        """Normalize a path to the host's separator conventions."""
        return os.path.normpath(path)

    def mkdir_recursive(self, path: str) -> None:
        """Create a directory and any missing parents."""
        os.makedirs(path, exist_ok=True)

    def write_file(self, path: str, content: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
