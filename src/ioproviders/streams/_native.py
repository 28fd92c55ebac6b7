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

"""Standard streams backed by :data:`sys.stdin`, :data:`sys.stdout` and :data:`sys.stderr`."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import BinaryIO, TextIO, cast

from ..errors import IoError

__all__ = ["NativeStdStreams"]


def _binary(stream: TextIO | None, name: str) -> BinaryIO:
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        raise IoError(f"sys.{name} has no binary buffer")
    return cast(BinaryIO, buffer)


@dataclass(slots=True, frozen=True)
class NativeStdStreams:
    """``StdStreams`` implementation over the interpreter's standard streams.

    The ``sys`` attributes are looked up on every call, so replacements
    installed later (for example by a test runner's capture) are honoured.
    """

    def input(self) -> BinaryIO:
        return _binary(sys.stdin, "stdin")

    def output(self) -> BinaryIO:
        return _binary(sys.stdout, "stdout")

    def error(self) -> BinaryIO:
        return _binary(sys.stderr, "stderr")
