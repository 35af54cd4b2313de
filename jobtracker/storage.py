"""Reading and writing the job list as a JSON file."""

from __future__ import annotations

import json
import os
import shutil
from collections.abc import Iterable
from pathlib import Path
from typing import Union

from jobtracker.data import JobApplication

DATA_FILE = "job_applications.json"

PathLike = Union[str, "os.PathLike[str]"]


class StorageError(Exception):
    """Any failure to read or write the data file."""


class FileOpenError(StorageError):
    """The data file exists but could not be opened."""

    def __init__(self, path: PathLike) -> None:
        self.path = os.fspath(path)
        super().__init__(f"Failed to open {self.path}")


class FileCreateError(StorageError):
    """The data file could not be created for writing."""

    def __init__(self, path: PathLike) -> None:
        self.path = os.fspath(path)
        super().__init__(f"Failed to create {self.path}")


class ParseError(StorageError):
    """The data file does not hold a valid job list."""

    def __init__(self) -> None:
        super().__init__("Failed to parse job data")


class BackupError(StorageError):
    """The backup copy could not be written."""

    def __init__(self) -> None:
        super().__init__("Failed to create backup")


def _ends_early(text: str, error: json.JSONDecodeError) -> bool:
    return error.pos >= len(text.rstrip()) or error.msg.startswith("Unterminated string")


def load_jobs(path: PathLike = DATA_FILE) -> list[JobApplication]:
    """Load the job list; a missing file yields an empty list."""
    file_path = Path(path)
    if not file_path.exists():
        return []
    try:
        handle = open(file_path, encoding="utf-8")
    except OSError:
        raise FileOpenError(path) from None
    with handle:
        try:
            text = handle.read()
        except UnicodeDecodeError:
            raise ParseError() from None
        except OSError as exc:
            raise StorageError(f"JSON error: {exc}") from exc
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        if _ends_early(text, exc):
            raise StorageError(f"JSON error: {exc}") from exc
        raise ParseError() from None
    if not isinstance(raw, list):
        raise ParseError()
    try:
        return [JobApplication.from_dict(entry) for entry in raw]
    except ValueError:
        raise ParseError() from None


def save_jobs(jobs: Iterable[JobApplication], path: PathLike = DATA_FILE) -> None:
    """Write the job list as indented JSON, replacing the file."""
    payload = json.dumps([job.to_dict() for job in jobs], indent=2, ensure_ascii=False)
    try:
        handle = open(path, "w", encoding="utf-8")
    except OSError:
        raise FileCreateError(path) from None
    with handle:
        try:
            handle.write(payload)
        except OSError as exc:
            raise StorageError(f"JSON error: {exc}") from exc


def backup_data(path: PathLike = DATA_FILE) -> None:
    """Copy the data file to ``<path>.backup`` if it exists."""
    source = os.fspath(path)
    if not os.path.exists(source):
        return
    try:
        shutil.copyfile(source, f"{source}.backup")
    except OSError:
        raise BackupError() from None