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

"""Standard stream capability protocols.

Defines the ``InputStream`` and ``OutputStream`` handle protocols and the
``StdStreams`` capability returning them. Binary file objects such as
``sys.stdin.buffer`` satisfy the handle protocols structurally.
"""

from __future__ import annotations

from collections.abc import Buffer
from typing import Protocol, runtime_checkable

__all__ = [
    "InputStream",
    "OutputStream",
    "StdStreams",
]


@runtime_checkable
class InputStream(Protocol):
    """Readable byte stream."""

    def read(self, size: int = -1, /) -> bytes:
        """Read up to ``size`` bytes; -1 reads to end of input.

        Returns:
            Bytes read. Empty bytes at end of input.
        """
        ...

    def readline(self, size: int = -1, /) -> bytes:
        """Read through the next newline (inclusive) or end of input."""
        ...


@runtime_checkable
class OutputStream(Protocol):
    """Writable byte stream."""

    def write(self, data: Buffer, /) -> int:
        """Write bytes and return how many were written."""
        ...

    def flush(self) -> None:
        """Flush buffered output."""
        ...


@runtime_checkable
class StdStreams(Protocol):
    """Access to a process's input, output and error streams.

    Example::

        def passthrough(streams: StdStreams) -> None:
            data = streams.input().read()
            streams.output().write(data)
    """

    def input(self) -> InputStream:
        """Standard input."""
        ...

    def output(self) -> OutputStream:
        """Standard output."""
        ...

    def error(self) -> OutputStream:
        """Standard error."""
        ...
