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

"""Host filesystem operations shared by the native and sandboxed backends.

Each function acts on an already-resolved host ``Path`` (``target``) and
reports errors against ``shown``, the path as the caller wrote it. The
sandbox passes virtual paths here so host locations never leak into error
messages.

Preconditions are checked explicitly so both backends raise the same
``IoError`` subclass on every platform, rather than whatever errno the
host happens to report.
"""

from __future__ import annotations

import errno
import os
import shutil
import stat
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path, PurePath
from typing import BinaryIO, cast

from ..errors import (
    AlreadyExistsError,
    DirectoryNotEmptyError,
    IoError,
    IsADirectoryIoError,
    NotADirectoryIoError,
    NotFoundError,
    translate_os_error,
)
from ._types import DirEntry, FileStat, OpenOptions, WriteMode


def _fail(error_type: type[IoError], code: int, shown: str) -> IoError:
    return error_type(code, os.strerror(code), shown)


@contextmanager
def translate_errors(shown: str) -> Iterator[None]:
    """Re-raise any ``OSError`` from the block as the matching ``IoError``."""
    try:
        yield
    except IoError:
        raise
    except OSError as err:
        raise translate_os_error(err, shown) from err


def probe(target: Path, check: str) -> bool:
    """Run a ``Path`` predicate, treating inaccessible paths as absent."""
    try:
        return bool(getattr(target, check)())
    except OSError:
        return False


def not_found(shown: str) -> IoError:
    """Return the error raised for a missing path."""
    return _fail(NotFoundError, errno.ENOENT, shown)


def _require_exists(target: Path, shown: str) -> None:
    if not probe(target, "exists"):
        raise not_found(shown)


def _require_not_dir(target: Path, shown: str) -> None:
    if probe(target, "is_dir"):
        raise _fail(IsADirectoryIoError, errno.EISDIR, shown)


def _require_parent(target: Path, shown: str) -> None:
    parent = target.parent
    if probe(parent, "is_dir"):
        return
    if probe(parent, "exists"):
        raise _fail(NotADirectoryIoError, errno.ENOTDIR, shown)
    raise _fail(NotFoundError, errno.ENOENT, shown)


def read_bytes(target: Path, shown: str) -> bytes:
    _require_exists(target, shown)
    _require_not_dir(target, shown)
    with translate_errors(shown):
        return target.read_bytes()


def read_text(target: Path, shown: str, encoding: str) -> str:
    data = read_bytes(target, shown)
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as err:
        msg = (
            f"Cannot read '{shown}' as text: content cannot be decoded as "
            f"{encoding}. Use read() for binary files."
        )
        raise ValueError(msg) from err


def create_file(target: Path, shown: str, *, overwrite: bool) -> None:
    _require_not_dir(target, shown)
    _require_parent(target, shown)
    if not overwrite and probe(target, "exists"):
        raise _fail(AlreadyExistsError, errno.EEXIST, shown)
    with translate_errors(shown):
        target.open("wb" if overwrite else "xb").close()


def write_bytes(target: Path, shown: str, data: bytes, mode: WriteMode) -> int:
    if mode not in ("truncate", "append"):
        raise ValueError(f"Unknown write mode: {mode!r}")
    _require_not_dir(target, shown)
    _require_parent(target, shown)
    with translate_errors(shown), target.open("ab" if mode == "append" else "wb") as f:
        return f.write(data)


def remove(target: Path, shown: str, *, recursive: bool) -> None:
    if not (probe(target, "exists") or probe(target, "is_symlink")):
        raise not_found(shown)
    with translate_errors(shown):
        if target.is_symlink() or not target.is_dir():
            target.unlink()
        elif recursive:
            shutil.rmtree(target)
        elif any(target.iterdir()):
            raise _fail(DirectoryNotEmptyError, errno.ENOTEMPTY, shown)
        else:
            target.rmdir()


def create_dir(target: Path, shown: str, *, recursive: bool) -> None:
    if probe(target, "exists"):
        if recursive and probe(target, "is_dir"):
            return
        raise _fail(AlreadyExistsError, errno.EEXIST, shown)
    if not recursive:
        _require_parent(target, shown)
    with translate_errors(shown):
        target.mkdir(parents=recursive, exist_ok=recursive)


def list_dir(target: Path, shown: PurePath) -> Sequence[DirEntry]:
    _require_exists(target, str(shown))
    if not probe(target, "is_dir"):
        raise _fail(NotADirectoryIoError, errno.ENOTDIR, str(shown))

    entries: list[DirEntry] = []
    with translate_errors(str(shown)):
        for item in target.iterdir():
            is_dir = probe(item, "is_dir")
            entries.append(
                DirEntry(
                    name=item.name,
                    path=str(shown / item.name),
                    is_file=probe(item, "is_file"),
                    is_directory=is_dir,
                )
            )
    entries.sort(key=lambda e: e.name)
    return entries


def metadata(target: Path, shown: str) -> FileStat:
    _require_exists(target, shown)
    with translate_errors(shown):
        result = target.stat()
    return FileStat.from_stat_result(
        shown, result, is_directory=stat.S_ISDIR(result.st_mode)
    )


def copy(source: Path, source_shown: str, destination: Path, destination_shown: str) -> int:
    _require_exists(source, source_shown)
    _require_not_dir(source, source_shown)
    _require_not_dir(destination, destination_shown)
    _require_parent(destination, destination_shown)
    with translate_errors(source_shown):
        _ = shutil.copyfile(source, destination)
        return destination.stat().st_size


def rename(source: Path, source_shown: str, destination: Path, destination_shown: str) -> None:
    _require_exists(source, source_shown)
    _require_parent(destination, destination_shown)
    with translate_errors(source_shown):
        _ = source.replace(destination)


def hard_link(
    source: Path, source_shown: str, destination: Path, destination_shown: str
) -> None:
    _require_exists(source, source_shown)
    _require_not_dir(source, source_shown)
    _require_parent(destination, destination_shown)
    if probe(destination, "exists") or probe(destination, "is_symlink"):
        raise _fail(AlreadyExistsError, errno.EEXIST, destination_shown)
    with translate_errors(destination_shown):
        destination.hardlink_to(source)


def open_file(target: Path, shown: str, options: OpenOptions) -> BinaryIO:
    flags = options.os_flags()
    _require_not_dir(target, shown)
    with translate_errors(shown):
        fd = os.open(target, flags, 0o666)
        try:
            return cast(BinaryIO, os.fdopen(fd, options.file_mode()))
        except BaseException:
            os.close(fd)
            raise


__all__ = [
    "copy",
    "create_dir",
    "create_file",
    "hard_link",
    "list_dir",
    "metadata",
    "not_found",
    "open_file",
    "probe",
    "read_bytes",
    "read_text",
    "remove",
    "rename",
    "translate_errors",
    "write_bytes",
]
