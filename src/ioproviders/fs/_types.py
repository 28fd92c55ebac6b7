# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Value types shared by the ``Fs`` protocol and its backends.

All types are immutable frozen dataclasses:

- ``DirEntry`` - one entry returned by ``Fs.list_dir()``
- ``FileStat`` - metadata returned by ``Fs.metadata()``
- ``OpenOptions`` - flags accepted by ``Fs.open()``
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Final, Literal

WriteMode = Literal["truncate", "append"]
FsPath = str | os.PathLike[str]

TRUNCATE: Final[WriteMode] = "truncate"
APPEND: Final[WriteMode] = "append"


@dataclass(slots=True, frozen=True)
class DirEntry:
    """Directory listing entry returned by ``Fs.list_dir()``.

    Attributes:
        name: Entry name without path (e.g., "main.py").
        path: Path of the entry as seen by the caller. Simulated filesystems
            report virtual paths rooted at "/" (e.g., "/src/main.py").
        is_file: True if this entry is a regular file.
        is_directory: True if this entry is a directory.

    Example::

        for entry in fs.list_dir("src"):
            if entry.is_file and entry.name.endswith(".py"):
                print(entry.path)
    """

    name: str
    path: str
    is_file: bool
    is_directory: bool


@dataclass(slots=True, frozen=True)
class FileStat:
    """Metadata for a file or directory.

    Attributes:
        path: Path as seen by the caller.
        is_file: True if this is a regular file.
        is_directory: True if this is a directory.
        size_bytes: File size in bytes (0 for directories).
        modified_at: Last modification time in UTC.
    """

    path: str
    is_file: bool
    is_directory: bool
    size_bytes: int
    modified_at: datetime

    @classmethod
    def from_stat_result(
        cls, path: str, result: os.stat_result, *, is_directory: bool
    ) -> FileStat:
        """Build a ``FileStat`` from an ``os.stat_result``."""
        return cls(
            path=path,
            is_file=not is_directory,
            is_directory=is_directory,
            size_bytes=0 if is_directory else result.st_size,
            modified_at=datetime.fromtimestamp(result.st_mtime, tz=UTC),
        )


@dataclass(slots=True, frozen=True)
class OpenOptions:
    """Flags controlling how ``Fs.open()`` opens a file.

    Mirrors the POSIX ``open(2)`` flags. All flags default to False; use the
    ``with_*`` helpers to derive configured copies::

        options = OpenOptions().with_write().with_create()
        with fs.open("log.txt", options) as handle:
            handle.write(b"entry\\n")

    ``append`` implies write access. ``create_new`` fails with
    ``AlreadyExistsError`` when the file exists and takes precedence over
    ``create`` and ``truncate``.
    """

    read: bool = False
    write: bool = False
    append: bool = False
    truncate: bool = False
    create: bool = False
    create_new: bool = False

    def with_read(self, read: bool = True) -> OpenOptions:
        return replace(self, read=read)

    def with_write(self, write: bool = True) -> OpenOptions:
        return replace(self, write=write)

    def with_append(self, append: bool = True) -> OpenOptions:
        return replace(self, append=append)

    def with_truncate(self, truncate: bool = True) -> OpenOptions:
        return replace(self, truncate=truncate)

    def with_create(self, create: bool = True) -> OpenOptions:
        return replace(self, create=create)

    def with_create_new(self, create_new: bool = True) -> OpenOptions:
        return replace(self, create_new=create_new)

    @property
    def writable(self) -> bool:
        return self.write or self.append

    def os_flags(self) -> int:
        """Translate the options into flags for ``os.open``.

        Raises:
            ValueError: No access mode was requested, or create/truncate
                flags were combined with read-only access.
        """
        if not (self.read or self.writable):
            raise ValueError("OpenOptions must request read, write or append access.")
        if not self.writable and (self.truncate or self.create or self.create_new):
            raise ValueError("Creating or truncating a file requires write access.")
        if self.append and self.truncate:
            raise ValueError("append and truncate are mutually exclusive.")

        if self.read and self.writable:
            flags = os.O_RDWR
        elif self.writable:
            flags = os.O_WRONLY
        else:
            flags = os.O_RDONLY
        if self.append:
            flags |= os.O_APPEND
        if self.create_new:
            flags |= os.O_CREAT | os.O_EXCL
        elif self.create:
            flags |= os.O_CREAT
        if self.truncate:
            flags |= os.O_TRUNC
        return flags | getattr(os, "O_BINARY", 0)

    def file_mode(self) -> str:
        """Return the ``open()`` mode string matching these options."""
        if self.append:
            return "ab+" if self.read else "ab"
        if self.writable:
            return "rb+" if self.read else "wb"
        return "rb"


__all__ = [
    "APPEND",
    "TRUNCATE",
    "DirEntry",
    "FileStat",
    "FsPath",
    "OpenOptions",
    "WriteMode",
]
