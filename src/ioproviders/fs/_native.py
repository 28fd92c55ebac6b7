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

"""Filesystem backend that forwards to the host operating system."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import BinaryIO

from . import _host
from ._types import DirEntry, FileStat, FsPath, OpenOptions, WriteMode

__all__ = ["NativeFs"]


def _host_path(path: FsPath) -> tuple[Path, str]:
    return Path(path), os.fspath(path)


@dataclass(slots=True, frozen=True)
class NativeFs:
    """``Fs`` implementation operating on the real filesystem.

    Paths are host paths, relative ones resolved against the process working
    directory. OS failures are raised as the matching ``IoError`` subclass
    with errno and message preserved.
    """

    def read(self, path: FsPath) -> bytes:
        return _host.read_bytes(*_host_path(path))

    def read_to_string(self, path: FsPath, *, encoding: str = "utf-8") -> str:
        return _host.read_text(*_host_path(path), encoding)

    def exists(self, path: FsPath) -> bool:
        return _host.probe(Path(path), "exists")

    def is_file(self, path: FsPath) -> bool:
        return _host.probe(Path(path), "is_file")

    def is_dir(self, path: FsPath) -> bool:
        return _host.probe(Path(path), "is_dir")

    def metadata(self, path: FsPath) -> FileStat:
        return _host.metadata(*_host_path(path))

    def list_dir(self, path: FsPath) -> Sequence[DirEntry]:
        return _host.list_dir(Path(path), PurePath(path))

    def canonicalize(self, path: FsPath) -> PurePath:
        target, shown = _host_path(path)
        with _host.translate_errors(shown):
            return target.resolve(strict=True)

    def create_file(self, path: FsPath, *, overwrite: bool = False) -> None:
        _host.create_file(*_host_path(path), overwrite=overwrite)

    def write(self, path: FsPath, data: bytes, *, mode: WriteMode = "truncate") -> int:
        return _host.write_bytes(*_host_path(path), data, mode)

    def remove(self, path: FsPath, *, recursive: bool = False) -> None:
        _host.remove(*_host_path(path), recursive=recursive)

    def create_dir(self, path: FsPath, *, recursive: bool = False) -> None:
        _host.create_dir(*_host_path(path), recursive=recursive)

    def copy(self, source: FsPath, destination: FsPath) -> int:
        return _host.copy(*_host_path(source), *_host_path(destination))

    def rename(self, source: FsPath, destination: FsPath) -> None:
        _host.rename(*_host_path(source), *_host_path(destination))

    def hard_link(self, source: FsPath, destination: FsPath) -> None:
        _host.hard_link(*_host_path(source), *_host_path(destination))

    def open(self, path: FsPath, options: OpenOptions) -> BinaryIO:
        return _host.open_file(*_host_path(path), options)
