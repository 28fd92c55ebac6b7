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

"""Filesystem capability protocol.

Consumers type their dependencies as ``Fs`` and receive either backend:

- ``NativeFs``: the real host filesystem
- ``SimulatedFs``: a private, self-cleaning sandbox directory
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import PurePath
from typing import BinaryIO, Protocol, runtime_checkable

from ._types import DirEntry, FileStat, FsPath, OpenOptions, WriteMode


@runtime_checkable
class Fs(Protocol):
    """Filesystem operations available to consumer code.

    Every method raises a subclass of ``ioproviders.errors.IoError`` on
    failure. Simulated backends additionally raise ``PathEscapeError`` for
    any path that would leave their sandbox root.

    Example::

        def save_report(fs: Fs, body: bytes) -> None:
            fs.create_dir("reports", recursive=True)
            fs.write("reports/latest.txt", body)
    """

    # --- Read Operations ---

    def read(self, path: FsPath) -> bytes:
        """Read the entire file as bytes.

        Raises:
            NotFoundError: Path does not exist.
            IsADirectoryIoError: Path is a directory.
        """
        ...

    def read_to_string(self, path: FsPath, *, encoding: str = "utf-8") -> str:
        """Read the entire file as text.

        Raises:
            NotFoundError: Path does not exist.
            IsADirectoryIoError: Path is a directory.
            ValueError: Content cannot be decoded with ``encoding``.
        """
        ...

    def exists(self, path: FsPath) -> bool:
        """Return True if the path names a file or directory."""
        ...

    def is_file(self, path: FsPath) -> bool:
        """Return True if the path names a regular file."""
        ...

    def is_dir(self, path: FsPath) -> bool:
        """Return True if the path names a directory."""
        ...

    def metadata(self, path: FsPath) -> FileStat:
        """Return size, kind and modification time for the path.

        Raises:
            NotFoundError: Path does not exist.
        """
        ...

    def list_dir(self, path: FsPath) -> Sequence[DirEntry]:
        """List directory contents sorted by name.

        Raises:
            NotFoundError: Path does not exist.
            NotADirectoryIoError: Path is a file.
        """
        ...

    def canonicalize(self, path: FsPath) -> PurePath:
        """Return the absolute, normalized form of an existing path.

        Raises:
            NotFoundError: Path does not exist.
        """
        ...

    # --- Write Operations ---

    def create_file(self, path: FsPath, *, overwrite: bool = False) -> None:
        """Create an empty file.

        Args:
            path: File to create. The parent directory must exist.
            overwrite: Truncate an existing file instead of failing.

        Raises:
            AlreadyExistsError: File exists and ``overwrite`` is False.
            NotFoundError: Parent directory is missing.
            IsADirectoryIoError: A directory exists at the path.
        """
        ...

    def write(self, path: FsPath, data: bytes, *, mode: WriteMode = "truncate") -> int:
        """Write bytes to a file, creating it if missing.

        Args:
            path: File to write. Parent directories are never created.
            data: Bytes to write.
            mode: ``"truncate"`` replaces existing content, ``"append"`` adds
                to the end.

        Returns:
            Number of bytes written.

        Raises:
            NotFoundError: Parent directory is missing.
            IsADirectoryIoError: Path is a directory.
        """
        ...

    def remove(self, path: FsPath, *, recursive: bool = False) -> None:
        """Remove a file or directory.

        Raises:
            NotFoundError: Path does not exist.
            DirectoryNotEmptyError: Directory has entries and ``recursive``
                is False.
        """
        ...

    def create_dir(self, path: FsPath, *, recursive: bool = False) -> None:
        """Create a directory.

        Args:
            path: Directory to create.
            recursive: Create missing ancestors and accept an existing
                directory at ``path``.

        Raises:
            NotFoundError: Parent is missing and ``recursive`` is False.
            AlreadyExistsError: Path exists (any kind without ``recursive``,
                a file with it).
        """
        ...

    def copy(self, source: FsPath, destination: FsPath) -> int:
        """Copy a file's contents, replacing ``destination``.

        Returns:
            Number of bytes copied.
        """
        ...

    def rename(self, source: FsPath, destination: FsPath) -> None:
        """Rename a file or directory, replacing a destination file."""
        ...

    def hard_link(self, source: FsPath, destination: FsPath) -> None:
        """Create ``destination`` as another name for the file at ``source``.

        Raises:
            NotFoundError: Source is missing.
            IsADirectoryIoError: Source is a directory.
            AlreadyExistsError: Destination exists.
        """
        ...

    def open(self, path: FsPath, options: OpenOptions) -> BinaryIO:
        """Open a file with explicit flags and return a binary handle.

        The caller owns the handle and must close it.

        Raises:
            ValueError: ``options`` requests no access or an invalid mix.
        """
        ...


__all__ = ["Fs"]
