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

"""Environment backend using :mod:`os` and :mod:`sys`."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..errors import IoError, translate_os_error

__all__ = ["NativeEnv"]


@dataclass(slots=True, frozen=True)
class NativeEnv:
    """``Env`` implementation reading and mutating the real process state."""

    def args(self) -> Sequence[str]:
        return list(sys.argv)

    def current_dir(self) -> Path:
        try:
            return Path.cwd()
        except OSError as err:
            raise translate_os_error(err) from err

    def set_current_dir(self, path: str | os.PathLike[str]) -> None:
        try:
            os.chdir(path)
        except OSError as err:
            raise translate_os_error(err, path) from err

    def current_exe(self) -> Path:
        if not sys.executable:
            raise IoError("Interpreter executable path is unavailable")
        return Path(sys.executable)

    def home_dir(self) -> Path | None:
        try:
            return Path.home()
        except RuntimeError:
            return None

    def var(self, key: str) -> str | None:
        return os.environ.get(key)

    def vars(self) -> Mapping[str, str]:
        return dict(os.environ)

    def set_var(self, key: str, value: str) -> None:
        os.environ[key] = value

    def remove_var(self, key: str) -> None:
        _ = os.environ.pop(key, None)
