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

"""Injectable providers for process environment, standard streams and files.

Each capability is a ``Protocol`` with a native implementation that forwards
to the operating system and a simulated one for deterministic tests:

- ``Env``: ``NativeEnv`` / ``SimulatedEnv``
- ``StdStreams``: ``NativeStdStreams`` / ``SimulatedStdStreams``
- ``Fs``: ``NativeFs`` / ``SimulatedFs`` (a self-cleaning sandbox directory)

``Io`` bundles all three behind one handle (``NativeIo`` / ``SimulatedIo``).
"""

from __future__ import annotations

from .env import Env, NativeEnv, SimulatedEnv
from .errors import (
    AllocationFailedError,
    AlreadyExistsError,
    DirectoryNotEmptyError,
    IoError,
    IoErrorKind,
    IoProvidersError,
    IsADirectoryIoError,
    NotADirectoryIoError,
    NotFoundError,
    PathEscapeError,
    PermissionDeniedError,
    UnsetSimulatedValueError,
)
from .fs import DirEntry, FileStat, Fs, NativeFs, OpenOptions, SimulatedFs
from .io import Io, NativeIo, SimulatedIo
from .logging import configure_logging, get_logger
from .streams import NativeStdStreams, SimulatedStdStreams, StdStreams

__version__ = "0.1.0"

__all__ = [
    "AllocationFailedError",
    "AlreadyExistsError",
    "DirEntry",
    "DirectoryNotEmptyError",
    "Env",
    "FileStat",
    "Fs",
    "Io",
    "IoError",
    "IoErrorKind",
    "IoProvidersError",
    "IsADirectoryIoError",
    "NativeEnv",
    "NativeFs",
    "NativeIo",
    "NativeStdStreams",
    "NotADirectoryIoError",
    "NotFoundError",
    "OpenOptions",
    "PathEscapeError",
    "PermissionDeniedError",
    "SimulatedEnv",
    "SimulatedFs",
    "SimulatedIo",
    "SimulatedStdStreams",
    "StdStreams",
    "UnsetSimulatedValueError",
    "__version__",
    "configure_logging",
    "get_logger",
]
