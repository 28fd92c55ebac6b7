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

"""Virtual path normalization and confinement.

These functions are pure: they never touch the filesystem, so confinement
can be decided (and tested) before any backing store is involved.

Functions:
    confine_path: Resolve a virtual path to segments below the sandbox root
    virtual_path: Render confined segments as an absolute virtual path
"""

from __future__ import annotations

import os
from pathlib import PurePosixPath

from ..errors import IoError, PathEscapeError
from ._types import FsPath

VIRTUAL_ROOT = PurePosixPath("/")


def confine_path(path: FsPath) -> PurePosixPath:
    """Resolve ``path`` to a relative path that cannot leave the sandbox root.

    This function:
    - Treats a leading "/" as the sandbox root, not the host root
    - Drops empty segments and "." entries
    - Resolves ".." against the already-resolved prefix

    Args:
        path: Virtual path supplied by the caller.

    Returns:
        Relative path below the root. ``PurePosixPath(".")`` names the root.

    Raises:
        PathEscapeError: A ".." segment would ascend above the root.
        IoError: The path contains a NUL byte.

    Examples:
        >>> confine_path("/foo/./bar/")
        PurePosixPath('foo/bar')
        >>> confine_path("foo/../bar")
        PurePosixPath('bar')
        >>> confine_path("/")
        PurePosixPath('.')
    """
    raw = os.fspath(path)
    if "\0" in raw:
        raise IoError(f"Path contains a NUL byte: {raw!r}")

    resolved: list[str] = []
    for segment in raw.split("/"):
        if not segment or segment == ".":
            continue
        if segment == "..":
            if not resolved:
                raise PathEscapeError(f"Path escapes sandbox root: {raw}")
            _ = resolved.pop()
        else:
            resolved.append(segment)
    return PurePosixPath(*resolved) if resolved else PurePosixPath(".")


def virtual_path(confined: PurePosixPath) -> PurePosixPath:
    """Return the absolute virtual form of a confined path.

    Examples:
        >>> virtual_path(PurePosixPath("foo/bar"))
        PurePosixPath('/foo/bar')
        >>> virtual_path(PurePosixPath("."))
        PurePosixPath('/')
    """
    return VIRTUAL_ROOT / confined


def is_root(confined: PurePosixPath) -> bool:
    """Return True when ``confined`` names the sandbox root itself."""
    return confined == PurePosixPath(".")


__all__ = [
    "VIRTUAL_ROOT",
    "confine_path",
    "is_root",
    "virtual_path",
]
