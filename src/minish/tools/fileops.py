"""File utilities backing the internal commands.

Each operation takes file names and raises ``OSError`` on failure.
"""

from __future__ import annotations

import os
import pwd
import stat
import time
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

CHUNK_SIZE = 4096
COPY_SUFFIX = ".copy"
COPY_MODE = 0o600


def _chunks(stream: BinaryIO) -> Iterator[bytes]:
    while chunk := stream.read(CHUNK_SIZE):
        yield chunk


def read_text_chunks(filename: str) -> Iterator[str]:
    """Yield the file's contents as decoded text chunks."""
    with open(filename, "rb") as source:
        for chunk in _chunks(source):
            yield chunk.decode("utf-8", errors="replace")


def copy_file(source: str, destination: str | None = None) -> str:
    """Copy ``source`` to ``destination`` (default ``<source>.copy``) and return the destination."""
    target = destination or f"{source}{COPY_SUFFIX}"
    with open(source, "rb") as src:
        fd = os.open(target, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, COPY_MODE)
        with os.fdopen(fd, "wb") as dest:
            for chunk in _chunks(src):
                dest.write(chunk)
    return target


def append_file(source: str, destination: str) -> None:
    """Append the bytes of ``source`` to the already existing ``destination``."""
    with open(source, "rb") as src:
        fd = os.open(destination, os.O_WRONLY | os.O_APPEND)
        with os.fdopen(fd, "ab") as dest:
            for chunk in _chunks(src):
                dest.write(chunk)


def count_lines(filename: str) -> int:
    """Count newline characters in a file."""
    total = 0
    with open(filename, "rb") as source:
        for chunk in _chunks(source):
            total += chunk.count(b"\n")
    return total


def delete_file(filename: str) -> None:
    os.unlink(filename)


@dataclass(frozen=True)
class FileInfo:
    """Metadata shown by the ``info`` command."""

    name: str
    file_type: str
    owner: str
    inode: int
    change_time: float
    access_time: float
    modification_time: float


def _file_type(mode: int) -> str:
    if stat.S_ISREG(mode):
        return "regular file"
    if stat.S_ISDIR(mode):
        return "directory"
    if stat.S_ISLNK(mode):
        return "symbolic link"
    return "unknown"


def _owner_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def get_file_info(filename: str) -> FileInfo:
    # lstat so links are reported as links rather than their targets
    result = os.lstat(filename)
    return FileInfo(
        name=filename,
        file_type=_file_type(result.st_mode),
        owner=_owner_name(result.st_uid),
        inode=result.st_ino,
        change_time=result.st_ctime,
        access_time=result.st_atime,
        modification_time=result.st_mtime,
    )


def format_file_info(info: FileInfo) -> str:
    rows = [
        ("File", info.name),
        ("Type", info.file_type),
        ("Owner", info.owner),
        ("Inode", str(info.inode)),
        ("Creation", time.ctime(info.change_time)),
        ("Access", time.ctime(info.access_time)),
        ("Change", time.ctime(info.modification_time)),
    ]
    return "".join(f"{label:>9}: {value}\n" for label, value in rows)


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    is_dir: bool


def list_directory(directory: str) -> tuple[list[DirectoryEntry], list[OSError]]:
    """List a directory, returning its entries sorted by name and per-entry stat failures."""
    entries: list[DirectoryEntry] = []
    failures: list[OSError] = []
    for child in sorted(Path(directory).iterdir(), key=lambda item: item.name):
        try:
            entries.append(DirectoryEntry(name=child.name, is_dir=stat.S_ISDIR(child.stat().st_mode)))
        except OSError as exc:
            failures.append(exc)
    return entries, failures


def format_listing_row(name: str, is_dir: bool) -> str:
    tag = "[directory]" if is_dir else "[file]"
    return f"{name:<30}\t{tag}\n"
