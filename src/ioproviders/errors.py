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

"""Base exception hierarchy for :mod:`ioproviders`."""

from __future__ import annotations

import errno
import os
from enum import StrEnum
from typing import ClassVar

__all__ = [
    "AllocationFailedError",
    "AlreadyExistsError",
    "DirectoryNotEmptyError",
    "IoError",
    "IoErrorKind",
    "IoProvidersError",
    "IsADirectoryIoError",
    "NotADirectoryIoError",
    "NotFoundError",
    "PathEscapeError",
    "PermissionDeniedError",
    "UnsetSimulatedValueError",
    "translate_os_error",
]


class IoErrorKind(StrEnum):
    """Category of an :class:`IoError`, stable across backends."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    PATH_ESCAPE = "path_escape"
    DIRECTORY_NOT_EMPTY = "directory_not_empty"
    IS_A_DIRECTORY = "is_a_directory"
    NOT_A_DIRECTORY = "not_a_directory"
    PERMISSION_DENIED = "permission_denied"
    ALLOCATION_FAILED = "allocation_failed"
    OTHER = "other"


class IoProvidersError(Exception):
    """Base class for all ioproviders exceptions.

    Catch this to handle any library-specific failure with a single handler
    while letting unrelated Python exceptions propagate normally.

    Note:
        Subclasses may also inherit from standard exception types (e.g.,
        ``OSError``, ``LookupError``) so callers written against the standard
        library keep working unchanged.
    """


class IoError(IoProvidersError, OSError):
    """Raised when a capability operation fails.

    Every provider (native or simulated) raises subclasses of this type, so
    consumer code can be written once against the protocols. The ``kind``
    attribute identifies the failure category without ``isinstance`` chains.

    Instances are built with the usual ``OSError`` signature. When an errno
    is supplied the ``errno``, ``strerror`` and ``filename`` attributes are
    populated; otherwise the single argument is the message.

    Example:
        Distinguishing a sandbox breakout from an ordinary missing file::

            try:
                fs.read("../../etc/passwd")
            except IoError as e:
                if e.kind is IoErrorKind.PATH_ESCAPE:
                    ...
    """

    kind: ClassVar[IoErrorKind] = IoErrorKind.OTHER


class NotFoundError(IoError, FileNotFoundError):
    """Raised when the target path (or a required parent) does not exist."""

    kind: ClassVar[IoErrorKind] = IoErrorKind.NOT_FOUND


class AlreadyExistsError(IoError, FileExistsError):
    """Raised when creating a file or directory at an occupied path."""

    kind: ClassVar[IoErrorKind] = IoErrorKind.ALREADY_EXISTS


class PermissionDeniedError(IoError, PermissionError):
    """Raised when the backend refuses access to a path."""

    kind: ClassVar[IoErrorKind] = IoErrorKind.PERMISSION_DENIED


class PathEscapeError(IoError, PermissionError):
    """Raised when a virtual path would resolve outside the sandbox root.

    This is deliberately not a :class:`NotFoundError`: tests assert on this
    type to prove that a breakout was blocked, not merely that the operation
    failed. No I/O against the backing store happens before it is raised.
    """

    kind: ClassVar[IoErrorKind] = IoErrorKind.PATH_ESCAPE


class DirectoryNotEmptyError(IoError):
    """Raised when removing a non-empty directory without ``recursive``."""

    kind: ClassVar[IoErrorKind] = IoErrorKind.DIRECTORY_NOT_EMPTY


class IsADirectoryIoError(IoError, IsADirectoryError):
    """Raised when a file operation targets a directory."""

    kind: ClassVar[IoErrorKind] = IoErrorKind.IS_A_DIRECTORY


class NotADirectoryIoError(IoError, NotADirectoryError):
    """Raised when a directory operation targets a file."""

    kind: ClassVar[IoErrorKind] = IoErrorKind.NOT_A_DIRECTORY


class AllocationFailedError(IoError):
    """Raised when a simulated filesystem cannot allocate its sandbox root.

    Common causes:
        - Temporary storage exhausted
        - Parent directory missing or not writable
    """

    kind: ClassVar[IoErrorKind] = IoErrorKind.ALLOCATION_FAILED


class UnsetSimulatedValueError(IoProvidersError, LookupError):
    """Raised when a simulated value is read before a test configured it.

    Simulated environments have no sensible default for values like the
    argument list or working directory, so reading one that was never set
    is a bug in the test setup rather than an I/O failure.
    """


_ERRNO_TYPES: dict[int, type[IoError]] = {
    errno.ENOENT: NotFoundError,
    errno.EEXIST: AlreadyExistsError,
    errno.EACCES: PermissionDeniedError,
    errno.EPERM: PermissionDeniedError,
    errno.ENOTEMPTY: DirectoryNotEmptyError,
    errno.EISDIR: IsADirectoryIoError,
    errno.ENOTDIR: NotADirectoryIoError,
}

_BUILTIN_TYPES: tuple[tuple[type[OSError], type[IoError]], ...] = (
    (FileNotFoundError, NotFoundError),
    (FileExistsError, AlreadyExistsError),
    (PermissionError, PermissionDeniedError),
    (IsADirectoryError, IsADirectoryIoError),
    (NotADirectoryError, NotADirectoryIoError),
)


def _classify(error: OSError) -> type[IoError]:
    if error.errno is not None and error.errno in _ERRNO_TYPES:
        return _ERRNO_TYPES[error.errno]
    for builtin, translated in _BUILTIN_TYPES:
        if isinstance(error, builtin):
            return translated
    return IoError


def translate_os_error(
    error: OSError, path: str | os.PathLike[str] | None = None
) -> IoError:
    """Return the :class:`IoError` equivalent of a raw ``OSError``.

    The errno, message and filename reported by the operating system are
    preserved. ``path`` replaces the filename so that callers see the path
    they passed in (for the sandbox, the virtual path instead of the host
    location). Errors that are already ``IoError`` instances are returned
    unchanged.
    """

    if isinstance(error, IoError):
        return error
    error_type = _classify(error)
    filename = os.fspath(path) if path is not None else error.filename
    if error.errno is None:
        message = error.strerror or str(error)
        if filename is not None:
            message = f"{message}: {filename!r}"
        return error_type(message)
    if filename is None:
        return error_type(error.errno, error.strerror)
    return error_type(error.errno, error.strerror, filename)
