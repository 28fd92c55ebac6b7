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

"""Process environment capability protocol."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import PurePath
from typing import Protocol, runtime_checkable


@runtime_checkable
class Env(Protocol):
    """Inspection and manipulation of the process environment.

    Example::

        def in_project_root(env: Env) -> bool:
            return env.current_dir().name == "project"
    """

    def args(self) -> Sequence[str]:
        """Arguments the program was started with, program name first."""
        ...

    def current_dir(self) -> PurePath:
        """Current working directory.

        Raises:
            IoError: The directory cannot be determined.
        """
        ...

    def set_current_dir(self, path: str | os.PathLike[str]) -> None:
        """Change the current working directory.

        Raises:
            IoError: The change failed (e.g., ``NotFoundError``).
        """
        ...

    def current_exe(self) -> PurePath:
        """Path of the running executable."""
        ...

    def home_dir(self) -> PurePath | None:
        """Home directory of the current user, if known."""
        ...

    def var(self, key: str) -> str | None:
        """Value of an environment variable, or None when unset."""
        ...

    def vars(self) -> Mapping[str, str]:
        """Snapshot of all environment variables."""
        ...

    def set_var(self, key: str, value: str) -> None:
        """Set an environment variable."""
        ...

    def remove_var(self, key: str) -> None:
        """Remove an environment variable. Missing keys are ignored."""
        ...


__all__ = ["Env"]
