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

"""Aggregate providers bundling environment, filesystem and streams.

Code with several I/O dependencies can take a single ``Io`` handle::

    def do_work(io: Io) -> None:
        cur_dir = io.env().current_dir()
        io.std_streams().output().write(
            f"The current directory is: {cur_dir}\\n".encode()
        )

    with SimulatedIo() as io:
        io.env().set_current_dir("/foo/bar")
        do_work(io)
        assert io.std_streams().read_output() == (
            b"The current directory is: /foo/bar\\n"
        )

    do_work(NativeIo())
"""

from __future__ import annotations

from types import TracebackType
from typing import Protocol, Self, runtime_checkable

from .env import Env, NativeEnv, SimulatedEnv
from .fs import Fs, NativeFs, SimulatedFs
from .streams import NativeStdStreams, SimulatedStdStreams, StdStreams

__all__ = ["Io", "NativeIo", "SimulatedIo"]


@runtime_checkable
class Io(Protocol):
    """Access to the process environment, filesystem and standard streams."""

    def env(self) -> Env:
        """The environment provider."""
        ...

    def fs(self) -> Fs:
        """The filesystem provider."""
        ...

    def std_streams(self) -> StdStreams:
        """The standard stream provider."""
        ...

    def streams(self) -> StdStreams:
        """Alias for ``std_streams()``."""
        ...


class NativeIo:
    """``Io`` implementation using the real system."""

    __slots__ = ("_env", "_fs", "_streams")

    def __init__(self) -> None:
        self._env = NativeEnv()
        self._fs = NativeFs()
        self._streams = NativeStdStreams()

    def env(self) -> NativeEnv:
        return self._env

    def fs(self) -> NativeFs:
        return self._fs

    def std_streams(self) -> NativeStdStreams:
        return self._streams

    def streams(self) -> NativeStdStreams:
        return self._streams


class SimulatedIo:
    """``Io`` implementation using a simulated environment.

    Accessors return the concrete simulated types, so tests can reach the
    setup and inspection methods (``set_current_dir``, ``write_input``,
    ``read_output``, ``root_path`` ...) through the same handle the code
    under test receives.

    Raises:
        AllocationFailedError: The filesystem sandbox could not be created.
    """

    __slots__ = ("_env", "_fs", "_streams")

    def __init__(
        self,
        *,
        env: SimulatedEnv | None = None,
        fs: SimulatedFs | None = None,
        streams: SimulatedStdStreams | None = None,
    ) -> None:
        self._env = env if env is not None else SimulatedEnv()
        self._streams = streams if streams is not None else SimulatedStdStreams()
        self._fs = fs if fs is not None else SimulatedFs()

    def env(self) -> SimulatedEnv:
        return self._env

    def fs(self) -> SimulatedFs:
        return self._fs

    def std_streams(self) -> SimulatedStdStreams:
        return self._streams

    def streams(self) -> SimulatedStdStreams:
        return self._streams

    def close(self) -> None:
        """Release the filesystem sandbox."""
        self._fs.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
