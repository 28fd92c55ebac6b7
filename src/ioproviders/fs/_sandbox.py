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

"""Sandboxed filesystem backed by a private temporary directory.

Example usage::

    from ioproviders.fs import SimulatedFs

    with SimulatedFs() as fs:
        fs.create_dir("/src", recursive=True)
        fs.write("/src/main.py", b"print('hello')")
        assert fs.read("src/main.py") == b"print('hello')"
    # The sandbox directory and its contents are gone here.
"""

from __future__ import annotations

import errno
import os
import shutil
import tempfile
import weakref
from collections.abc import Sequence
from pathlib import Path, PurePath, PurePosixPath
from types import TracebackType
from typing import BinaryIO, Self

from ..errors import (
    AllocationFailedError,
    IoError,
    PathEscapeError,
    PermissionDeniedError,
)
from ..logging import StructuredLogger, get_logger
from . import _host
from ._path import confine_path, is_root, virtual_path
from ._types import DirEntry, FileStat, FsPath, OpenOptions, WriteMode

__all__ = ["DEFAULT_PREFIX", "SimulatedFs"]

DEFAULT_PREFIX = "ioproviders-"

_LOGGER: StructuredLogger = get_logger(__name__, context={"component": "fs.sandbox"})


def _remove_sandbox(root: Path) -> None:
    """Delete a sandbox root. Failures are logged, never raised."""
    try:
        shutil.rmtree(root)
    except OSError as err:
        _LOGGER.warning(
            "Failed to remove sandbox root.",
            event="fs.sandbox.cleanup_failed",
            context={"root": str(root), "error": str(err)},
        )
    else:
        _LOGGER.debug(
            "Sandbox removed.",
            event="fs.sandbox.removed",
            context={"root": str(root)},
        )


class SimulatedFs:
    """Filesystem confined to a private directory, like a ``chroot``.

    Construction allocates a fresh, uniquely named directory under the system
    temporary directory (or ``parent``). That directory acts as the root of
    the filesystem: "/a/b", "a/b" and "./a/b" all name the same location, and
    any path whose ".." segments would climb above the root raises
    ``PathEscapeError`` before the host is touched.

    The root is removed with all contents when the instance is closed, leaves
    a ``with`` block, or is garbage-collected. Removal failures are logged,
    not raised.

    This is a test isolation aid, not a security boundary.
    """

    __slots__ = ("__weakref__", "_finalizer", "_root")

    def __init__(
        self,
        *,
        prefix: str = DEFAULT_PREFIX,
        parent: FsPath | None = None,
    ) -> None:
        try:
            allocated = tempfile.mkdtemp(prefix=prefix, dir=parent)
        except OSError as err:
            msg = f"Cannot allocate sandbox root: {err}"
            raise AllocationFailedError(msg) from err

        self._root = Path(allocated).resolve()
        self._finalizer = weakref.finalize(self, _remove_sandbox, self._root)
        _LOGGER.debug(
            "Sandbox created.",
            event="fs.sandbox.created",
            context={"root": str(self._root)},
        )

    # --- Sandbox surface ---

    @property
    def root_path(self) -> Path:
        """Host directory backing the sandbox.

        Intended for test setup and assertions only; consumer code should go
        through the ``Fs`` methods.
        """
        return self._root

    @property
    def closed(self) -> bool:
        """True once the sandbox root has been released."""
        return not self._finalizer.alive

    def close(self) -> None:
        """Remove the sandbox root. Safe to call multiple times."""
        _ = self._finalizer()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"SimulatedFs(root={str(self._root)!r}, {state})"

    def _resolve(self, path: FsPath) -> tuple[Path, PurePosixPath]:
        """Map a virtual path to its host location inside the root.

        Raises:
            IoError: The sandbox is closed or the path is malformed.
            PathEscapeError: The path leaves the root, lexically or through
                a symlink planted on the host side.
        """
        if self.closed:
            raise IoError("Filesystem sandbox is closed")
        try:
            confined = confine_path(path)
        except PathEscapeError:
            _LOGGER.debug(
                "Rejected path outside sandbox.",
                event="fs.sandbox.path_escape",
                context={"path": os.fspath(path)},
            )
            raise

        target = self._root / confined
        if not target.resolve().is_relative_to(self._root):
            msg = f"Path escapes sandbox root: {os.fspath(path)}"
            raise PathEscapeError(msg)
        return target, confined

    def _locate(self, path: FsPath) -> tuple[Path, str]:
        target, confined = self._resolve(path)
        return target, str(virtual_path(confined))

    def _locate_mutable(self, path: FsPath) -> tuple[Path, str]:
        target, confined = self._resolve(path)
        shown = str(virtual_path(confined))
        if is_root(confined):
            raise PermissionDeniedError(errno.EPERM, "Cannot modify sandbox root", shown)
        return target, shown

    # --- Read Operations ---

    def read(self, path: FsPath) -> bytes:
        return _host.read_bytes(*self._locate(path))

    def read_to_string(self, path: FsPath, *, encoding: str = "utf-8") -> str:
        return _host.read_text(*self._locate(path), encoding)

    def exists(self, path: FsPath) -> bool:
        target, _ = self._resolve(path)
        return _host.probe(target, "exists")

    def is_file(self, path: FsPath) -> bool:
        target, _ = self._resolve(path)
        return _host.probe(target, "is_file")

    def is_dir(self, path: FsPath) -> bool:
        target, _ = self._resolve(path)
        return _host.probe(target, "is_dir")

    def metadata(self, path: FsPath) -> FileStat:
        return _host.metadata(*self._locate(path))

    def list_dir(self, path: FsPath) -> Sequence[DirEntry]:
        target, confined = self._resolve(path)
        return _host.list_dir(target, virtual_path(confined))

    def canonicalize(self, path: FsPath) -> PurePath:
        target, confined = self._resolve(path)
        shown = virtual_path(confined)
        if not _host.probe(target, "exists"):
            raise _host.not_found(str(shown))
        return shown

    # --- Write Operations ---

    def create_file(self, path: FsPath, *, overwrite: bool = False) -> None:
        _host.create_file(*self._locate(path), overwrite=overwrite)

    def write(self, path: FsPath, data: bytes, *, mode: WriteMode = "truncate") -> int:
        return _host.write_bytes(*self._locate(path), data, mode)

    def remove(self, path: FsPath, *, recursive: bool = False) -> None:
        _host.remove(*self._locate_mutable(path), recursive=recursive)

    def create_dir(self, path: FsPath, *, recursive: bool = False) -> None:
        _host.create_dir(*self._locate(path), recursive=recursive)

    def copy(self, source: FsPath, destination: FsPath) -> int:
        return _host.copy(*self._locate(source), *self._locate(destination))

    def rename(self, source: FsPath, destination: FsPath) -> None:
        _host.rename(*self._locate_mutable(source), *self._locate_mutable(destination))

    def hard_link(self, source: FsPath, destination: FsPath) -> None:
        _host.hard_link(*self._locate(source), *self._locate(destination))

    def open(self, path: FsPath, options: OpenOptions) -> BinaryIO:
        return _host.open_file(*self._locate(path), options)
