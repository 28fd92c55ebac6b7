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

"""Standard stream capability: input, output and error.

Example usage::

    from ioproviders.streams import SimulatedStdStreams, StdStreams

    def echo_line(streams: StdStreams) -> None:
        streams.output().write(streams.input().readline())

    streams = SimulatedStdStreams()
    streams.write_input(b"ping\\n")
    echo_line(streams)
    assert streams.read_output() == b"ping\\n"
"""

from __future__ import annotations

from ._native import NativeStdStreams
from ._protocol import InputStream, OutputStream, StdStreams
from ._simulated import CaptureBuffer, ChunkPipe, SimulatedStdStreams

__all__ = [
    "CaptureBuffer",
    "ChunkPipe",
    "InputStream",
    "NativeStdStreams",
    "OutputStream",
    "SimulatedStdStreams",
    "StdStreams",
]
