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

"""Filesystem capability protocol and backends.

This module provides the ``Fs`` protocol so consumer code can perform file
operations without coupling to the host filesystem.

Example usage::

    from ioproviders.fs import Fs, SimulatedFs

    def count_entries(fs: Fs, path: str) -> int:
        return len(fs.list_dir(path))

    with SimulatedFs() as fs:
        fs.create_dir("/data/raw", recursive=True)
        assert count_entries(fs, "/data") == 1

Backends:

- ``NativeFs``: Forwards to the host filesystem
- ``SimulatedFs``: Private sandbox directory, removed on close
"""

from __future__ import annotations

from ._native import NativeFs
from ._path import VIRTUAL_ROOT, confine_path, virtual_path
from ._protocol import Fs
from ._sandbox import DEFAULT_PREFIX, SimulatedFs
from ._types import (
    APPEND,
    TRUNCATE,
    DirEntry,
    FileStat,
    FsPath,
    OpenOptions,
    WriteMode,
)

__all__ = [
    "APPEND",
    "DEFAULT_PREFIX",
    "TRUNCATE",
    "VIRTUAL_ROOT",
    "DirEntry",
    "FileStat",
    "Fs",
    "FsPath",
    "NativeFs",
    "OpenOptions",
    "SimulatedFs",
    "WriteMode",
    "confine_path",
    "virtual_path",
]
