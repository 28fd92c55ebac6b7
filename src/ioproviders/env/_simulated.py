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

"""In-memory environment for tests."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from ..errors import UnsetSimulatedValueError

__all__ = ["SimulatedEnv"]


def _unset(name: str) -> UnsetSimulatedValueError:
    return UnsetSimulatedValueError(
        f"Env.{name}() was called before a simulated value was set"
    )


@dataclass(slots=True)
class SimulatedEnv:
    """``Env`` implementation holding all state in memory.

    Values without a natural default (arguments, working directory,
    executable) raise ``UnsetSimulatedValueError`` until a test sets them.
    Paths are stored verbatim as virtual POSIX paths; nothing is checked
    against any filesystem.

    Example::

        env = SimulatedEnv()
        env.set_current_dir("/foo/bar")
        assert str(env.current_dir()) == "/foo/bar"
    """

    _args: list[str] | None = None
    _current_dir: PurePosixPath | None = None
    _current_exe: PurePosixPath | None = None
    _home_dir: PurePosixPath | None = None
    _vars: dict[str, str] = field(default_factory=dict)

    # --- Simulation setup ---

    def set_args(self, args: Iterable[str]) -> None:
        """Set the value returned by ``args()``."""
        self._args = list(args)

    def set_current_exe(self, path: str | os.PathLike[str]) -> None:
        """Set the value returned by ``current_exe()``."""
        self._current_exe = PurePosixPath(path)

    def set_home_dir(self, path: str | os.PathLike[str] | None) -> None:
        """Set the value returned by ``home_dir()``; None means unknown."""
        self._home_dir = PurePosixPath(path) if path is not None else None

    # --- Env protocol ---

    def args(self) -> Sequence[str]:
        if self._args is None:
            raise _unset("args")
        return list(self._args)

    def current_dir(self) -> PurePosixPath:
        if self._current_dir is None:
            raise _unset("current_dir")
        return self._current_dir

    def set_current_dir(self, path: str | os.PathLike[str]) -> None:
        self._current_dir = PurePosixPath(path)

    def current_exe(self) -> PurePosixPath:
        if self._current_exe is None:
            raise _unset("current_exe")
        return self._current_exe

    def home_dir(self) -> PurePosixPath | None:
        return self._home_dir

    def var(self, key: str) -> str | None:
        return self._vars.get(key)

    def vars(self) -> Mapping[str, str]:
        return dict(self._vars)

    def set_var(self, key: str, value: str) -> None:
        self._vars[key] = value

    def remove_var(self, key: str) -> None:
        _ = self._vars.pop(key, None)
