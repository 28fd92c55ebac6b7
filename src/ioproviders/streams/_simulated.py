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

"""In-memory standard streams.

Provides ChunkPipe (scripted input) and CaptureBuffer (captured output),
combined by SimulatedStdStreams.
"""

from __future__ import annotations

import io
from collections import deque
from collections.abc import Buffer
from dataclasses import dataclass, field
from typing import cast, override

__all__ = [
    "CaptureBuffer",
    "ChunkPipe",
    "SimulatedStdStreams",
]


class ChunkPipe(io.RawIOBase):
    """Raw input stream fed by discrete chunks, like a pipe between processes.

    Each ``feed()`` enqueues one chunk. A sized ``read()`` (and ``readinto()``)
    returns data from the front chunk only, so tests control exactly how much
    a single read call sees; any unread remainder stays queued. ``read()``
    without a size and ``readline()`` read across chunks. An empty queue
    reads as end of input.

    ``feed_error()`` enqueues an exception instead of data. The read that
    reaches it raises the exception, after any bytes queued ahead of it have
    been returned.

    Being a ``RawIOBase``, the pipe can be wrapped like ``sys.stdin.buffer``::

        text = io.TextIOWrapper(pipe, encoding="utf-8")
    """

    def __init__(self) -> None:
        super().__init__()
        self._chunks: deque[bytes | OSError] = deque()

    @property
    def pending(self) -> int:
        """Number of bytes not yet read."""
        return sum(len(c) for c in self._chunks if isinstance(c, bytes))

    def _check_closed(self) -> None:
        if self.closed:
            msg = "I/O operation on closed pipe"
            raise ValueError(msg)

    @override
    def readable(self) -> bool:
        return True

    def feed(self, data: Buffer) -> int:
        """Enqueue one chunk. Empty chunks are ignored."""
        self._check_closed()
        chunk = bytes(data)
        if chunk:
            self._chunks.append(chunk)
        return len(chunk)

    def feed_error(self, error: OSError) -> None:
        """Enqueue an error raised by the read that reaches it."""
        self._check_closed()
        self._chunks.append(error)

    def _raise_front_error(self) -> None:
        front = self._chunks[0]
        if isinstance(front, OSError):
            _ = self._chunks.popleft()
            raise front

    @override
    def read(self, size: int | None = -1, /) -> bytes:
        self._check_closed()
        if size is None or size < 0:
            return self.readall()
        if size == 0 or not self._chunks:
            return b""
        self._raise_front_error()
        chunk = cast(bytes, self._chunks.popleft())
        if len(chunk) > size:
            self._chunks.appendleft(chunk[size:])
            chunk = chunk[:size]
        return chunk

    @override
    def readall(self) -> bytes:
        self._check_closed()
        parts: list[bytes] = []
        while self._chunks and isinstance(self._chunks[0], bytes):
            parts.append(cast(bytes, self._chunks.popleft()))
        if not parts and self._chunks:
            self._raise_front_error()
        return b"".join(parts)

    @override
    def readinto(self, buffer: Buffer, /) -> int:
        view = memoryview(buffer).cast("B")
        data = self.read(len(view))
        view[: len(data)] = data
        return len(data)

    @override
    def readline(self, size: int | None = -1, /) -> bytes:
        self._check_closed()
        remaining = size if size is not None and size >= 0 else None
        parts: list[bytes] = []
        while self._chunks and (remaining is None or remaining > 0):
            if isinstance(self._chunks[0], OSError):
                if parts:
                    break
                self._raise_front_error()
            chunk = cast(bytes, self._chunks.popleft())
            end = chunk.find(b"\n") + 1 or len(chunk)
            if remaining is not None:
                end = min(end, remaining)
                remaining -= end
            parts.append(chunk[:end])
            if end < len(chunk):
                self._chunks.appendleft(chunk[end:])
            if parts[-1].endswith(b"\n"):
                break
        return b"".join(parts)

    @override
    def close(self) -> None:
        self._chunks.clear()
        super().close()


class CaptureBuffer(io.BytesIO):
    """Byte sink whose contents stay inspectable after ``close()``.

    Consumer code may wrap the stream (e.g., in ``io.TextIOWrapper``) and
    close it; tests can still read what was written via ``captured()``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._captured = b""

    @override
    def close(self) -> None:
        if not self.closed:
            self._captured = self.getvalue()
        super().close()

    def captured(self) -> bytes:
        """Everything written so far."""
        return self._captured if self.closed else self.getvalue()


@dataclass(slots=True)
class SimulatedStdStreams:
    """``StdStreams`` implementation with scripted input and captured output.

    Example::

        streams = SimulatedStdStreams()
        streams.write_input(b"hello\\n")
        assert streams.input().readline() == b"hello\\n"

        streams.output().write(b"world")
        assert streams.read_output() == b"world"
    """

    _input: ChunkPipe = field(default_factory=ChunkPipe)
    _output: CaptureBuffer = field(default_factory=CaptureBuffer)
    _error: CaptureBuffer = field(default_factory=CaptureBuffer)

    # --- Simulation setup and inspection ---

    def write_input(self, data: Buffer) -> None:
        """Enqueue a chunk to be returned by reads on ``input()``."""
        _ = self._input.feed(data)

    def write_input_error(self, error: OSError) -> None:
        """Make the read on ``input()`` that reaches this point raise ``error``."""
        self._input.feed_error(error)

    def read_output(self) -> bytes:
        """Bytes written to ``output()`` so far."""
        return self._output.captured()

    def read_error(self) -> bytes:
        """Bytes written to ``error()`` so far."""
        return self._error.captured()

    # --- StdStreams protocol ---

    def input(self) -> ChunkPipe:
        return self._input

    def output(self) -> CaptureBuffer:
        return self._output

    def error(self) -> CaptureBuffer:
        return self._error
