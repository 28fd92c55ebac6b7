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

"""Shared ``Fs`` validation suite run against every backend.

Usage::

    class TestMyFs(FsValidationSuite):
        @pytest.fixture
        def fs(self) -> Fs:
            return MyFs()

        @pytest.fixture
        def at(self, tmp_path: Path) -> PathMaker:
            return lambda relative: str(tmp_path / relative)
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable

import pytest

from ioproviders.errors import (
    AlreadyExistsError,
    DirectoryNotEmptyError,
    IoError,
    IoErrorKind,
    IsADirectoryIoError,
    NotADirectoryIoError,
    NotFoundError,
)
from ioproviders.fs import Fs, OpenOptions

type PathMaker = Callable[[str], str]


class FsValidationSuite:
    """Abstract test suite for ``Fs`` protocol compliance.

    Subclasses provide two fixtures:

    - ``fs``: the filesystem under test
    - ``at``: maps a slash-separated relative path to a path ``fs`` accepts,
      located in an empty directory private to the test

    Backend-specific behavior (sandbox confinement, host path resolution)
    belongs in the backend's own test module.
    """

    @pytest.fixture
    @abstractmethod
    def fs(self) -> Fs:
        """Provide the filesystem instance under test."""
        ...

    @pytest.fixture
    @abstractmethod
    def at(self) -> PathMaker:
        """Provide the path builder for the test's scratch directory."""
        ...

    # -------------------------------------------------------------------------
    # Protocol
    # -------------------------------------------------------------------------

    def test_satisfies_protocol(self, fs: Fs) -> None:
        assert isinstance(fs, Fs)

    # -------------------------------------------------------------------------
    # Read and write
    # -------------------------------------------------------------------------

    def test_write_then_read_round_trips(self, fs: Fs, at: PathMaker) -> None:
        """read() returns exactly the bytes written."""
        data = b"\x00\x01hello\xff"
        written = fs.write(at("file.bin"), data)
        assert written == len(data)
        assert fs.read(at("file.bin")) == data

    def test_truncating_write_is_idempotent(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("file.txt"), b"first version")
        fs.write(at("file.txt"), b"second")
        fs.write(at("file.txt"), b"second")
        assert fs.read(at("file.txt")) == b"second"

    def test_append_write_extends_file(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("log.txt"), b"one\n")
        written = fs.write(at("log.txt"), b"two\n", mode="append")
        assert written == 4
        assert fs.read(at("log.txt")) == b"one\ntwo\n"

    def test_append_creates_missing_file(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("new.txt"), b"data", mode="append")
        assert fs.read(at("new.txt")) == b"data"

    def test_write_rejects_unknown_mode(self, fs: Fs, at: PathMaker) -> None:
        with pytest.raises(ValueError, match="Unknown write mode"):
            fs.write(at("file.txt"), b"x", mode="overwrite")  # type: ignore[arg-type]

    def test_write_empty_bytes(self, fs: Fs, at: PathMaker) -> None:
        assert fs.write(at("empty.txt"), b"") == 0
        assert fs.read(at("empty.txt")) == b""

    def test_write_missing_parent_raises_not_found(
        self, fs: Fs, at: PathMaker
    ) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            fs.write(at("missing/file.txt"), b"x")
        assert exc_info.value.kind is IoErrorKind.NOT_FOUND

    def test_write_under_file_raises_not_a_directory(
        self, fs: Fs, at: PathMaker
    ) -> None:
        fs.write(at("file.txt"), b"x")
        with pytest.raises(NotADirectoryIoError):
            fs.write(at("file.txt/child.txt"), b"y")

    def test_write_to_directory_raises(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("dir"))
        with pytest.raises(IsADirectoryIoError):
            fs.write(at("dir"), b"x")

    def test_read_missing_raises_not_found(self, fs: Fs, at: PathMaker) -> None:
        with pytest.raises(NotFoundError):
            fs.read(at("missing.txt"))

    def test_not_found_is_builtin_file_not_found(
        self, fs: Fs, at: PathMaker
    ) -> None:
        with pytest.raises(FileNotFoundError):
            fs.read(at("missing.txt"))

    def test_read_directory_raises(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("dir"))
        with pytest.raises(IsADirectoryIoError):
            fs.read(at("dir"))

    def test_read_to_string_decodes_utf8(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("hello.txt"), "héllo wörld".encode())
        assert fs.read_to_string(at("hello.txt")) == "héllo wörld"

    def test_read_to_string_honors_encoding(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("latin.txt"), "café".encode("latin-1"))
        assert fs.read_to_string(at("latin.txt"), encoding="latin-1") == "café"

    def test_read_to_string_rejects_binary(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("blob.bin"), b"\xff\xfe\x00")
        with pytest.raises(ValueError, match="cannot be decoded"):
            fs.read_to_string(at("blob.bin"))

    # -------------------------------------------------------------------------
    # create_file
    # -------------------------------------------------------------------------

    def test_create_file_makes_empty_file(self, fs: Fs, at: PathMaker) -> None:
        fs.create_file(at("empty.txt"))
        assert fs.is_file(at("empty.txt"))
        assert fs.read(at("empty.txt")) == b""

    def test_create_file_existing_raises(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("file.txt"), b"keep")
        with pytest.raises(AlreadyExistsError):
            fs.create_file(at("file.txt"))
        assert fs.read(at("file.txt")) == b"keep"

    def test_create_file_overwrite_truncates(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("file.txt"), b"discard")
        fs.create_file(at("file.txt"), overwrite=True)
        assert fs.read(at("file.txt")) == b""

    def test_create_file_missing_parent_raises(self, fs: Fs, at: PathMaker) -> None:
        with pytest.raises(NotFoundError):
            fs.create_file(at("missing/file.txt"))

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def test_predicates_for_missing_path(self, fs: Fs, at: PathMaker) -> None:
        assert fs.exists(at("missing")) is False
        assert fs.is_file(at("missing")) is False
        assert fs.is_dir(at("missing")) is False

    def test_predicates_for_file(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("file.txt"), b"x")
        assert fs.exists(at("file.txt")) is True
        assert fs.is_file(at("file.txt")) is True
        assert fs.is_dir(at("file.txt")) is False

    def test_predicates_for_directory(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("dir"))
        assert fs.exists(at("dir")) is True
        assert fs.is_file(at("dir")) is False
        assert fs.is_dir(at("dir")) is True

    # -------------------------------------------------------------------------
    # Directories
    # -------------------------------------------------------------------------

    def test_create_dir_non_recursive_requires_parent(
        self, fs: Fs, at: PathMaker
    ) -> None:
        with pytest.raises(NotFoundError):
            fs.create_dir(at("a/b"))

    def test_create_dir_existing_raises(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("dir"))
        with pytest.raises(AlreadyExistsError):
            fs.create_dir(at("dir"))

    def test_create_dir_recursive_tolerates_existing(
        self, fs: Fs, at: PathMaker
    ) -> None:
        fs.create_dir(at("a/b"), recursive=True)
        fs.create_dir(at("a/b"), recursive=True)
        assert fs.is_dir(at("a/b"))

    def test_create_dir_over_file_raises(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("file.txt"), b"x")
        with pytest.raises(AlreadyExistsError):
            fs.create_dir(at("file.txt"), recursive=True)

    def test_list_dir_reports_nested_directory(self, fs: Fs, at: PathMaker) -> None:
        """Listing the parent of a recursively created tree shows one entry."""
        fs.create_dir(at("a/b"), recursive=True)

        entries = fs.list_dir(at("a"))

        assert [entry.name for entry in entries] == ["b"]
        assert entries[0].is_directory is True
        assert entries[0].is_file is False

    def test_list_dir_is_sorted_and_typed(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("root"))
        fs.write(at("root/zeta.txt"), b"z")
        fs.write(at("root/alpha.txt"), b"a")
        fs.create_dir(at("root/middle"))

        entries = fs.list_dir(at("root"))

        assert [entry.name for entry in entries] == ["alpha.txt", "middle", "zeta.txt"]
        assert [entry.is_file for entry in entries] == [True, False, True]

    def test_list_dir_entry_paths_join_listed_path(
        self, fs: Fs, at: PathMaker
    ) -> None:
        fs.create_dir(at("root"))
        fs.write(at("root/file.txt"), b"x")

        (entry,) = fs.list_dir(at("root"))

        assert fs.read(entry.path) == b"x"

    def test_list_dir_empty(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("empty"))
        assert list(fs.list_dir(at("empty"))) == []

    def test_list_dir_missing_raises(self, fs: Fs, at: PathMaker) -> None:
        with pytest.raises(NotFoundError):
            fs.list_dir(at("missing"))

    def test_list_dir_on_file_raises(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("file.txt"), b"x")
        with pytest.raises(NotADirectoryIoError):
            fs.list_dir(at("file.txt"))

    # -------------------------------------------------------------------------
    # remove
    # -------------------------------------------------------------------------

    def test_remove_file(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("file.txt"), b"x")
        fs.remove(at("file.txt"))
        assert fs.exists(at("file.txt")) is False

    def test_remove_empty_directory(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("dir"))
        fs.remove(at("dir"))
        assert fs.exists(at("dir")) is False

    def test_remove_non_empty_directory_raises(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("a/b"), recursive=True)

        with pytest.raises(DirectoryNotEmptyError) as exc_info:
            fs.remove(at("a"))

        assert exc_info.value.kind is IoErrorKind.DIRECTORY_NOT_EMPTY
        assert fs.is_dir(at("a/b"))

    def test_remove_recursive_deletes_tree(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("a/b"), recursive=True)
        fs.write(at("a/b/file.txt"), b"x")

        fs.remove(at("a"), recursive=True)

        assert fs.exists(at("a")) is False

    def test_remove_missing_raises(self, fs: Fs, at: PathMaker) -> None:
        with pytest.raises(NotFoundError):
            fs.remove(at("missing"))

    # -------------------------------------------------------------------------
    # metadata
    # -------------------------------------------------------------------------

    def test_metadata_for_file(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("file.txt"), b"12345")

        stat = fs.metadata(at("file.txt"))

        assert stat.is_file is True
        assert stat.is_directory is False
        assert stat.size_bytes == 5
        assert stat.modified_at.tzinfo is not None

    def test_metadata_for_directory(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("dir"))

        stat = fs.metadata(at("dir"))

        assert stat.is_directory is True
        assert stat.is_file is False
        assert stat.size_bytes == 0

    def test_metadata_missing_raises(self, fs: Fs, at: PathMaker) -> None:
        with pytest.raises(NotFoundError):
            fs.metadata(at("missing"))

    # -------------------------------------------------------------------------
    # copy and rename
    # -------------------------------------------------------------------------

    def test_copy_duplicates_content(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("src.txt"), b"payload")

        copied = fs.copy(at("src.txt"), at("dst.txt"))

        assert copied == 7
        assert fs.read(at("dst.txt")) == b"payload"
        assert fs.read(at("src.txt")) == b"payload"

    def test_copy_replaces_existing_destination(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("src.txt"), b"new")
        fs.write(at("dst.txt"), b"old content")

        fs.copy(at("src.txt"), at("dst.txt"))

        assert fs.read(at("dst.txt")) == b"new"

    def test_copy_missing_source_raises(self, fs: Fs, at: PathMaker) -> None:
        with pytest.raises(NotFoundError):
            fs.copy(at("missing.txt"), at("dst.txt"))

    def test_copy_directory_source_raises(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("dir"))
        with pytest.raises(IsADirectoryIoError):
            fs.copy(at("dir"), at("dst"))

    def test_rename_moves_file(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("old.txt"), b"x")

        fs.rename(at("old.txt"), at("new.txt"))

        assert fs.exists(at("old.txt")) is False
        assert fs.read(at("new.txt")) == b"x"

    def test_rename_moves_directory(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("old/inner"), recursive=True)

        fs.rename(at("old"), at("new"))

        assert fs.is_dir(at("new/inner"))
        assert fs.exists(at("old")) is False

    def test_rename_missing_source_raises(self, fs: Fs, at: PathMaker) -> None:
        with pytest.raises(NotFoundError):
            fs.rename(at("missing"), at("other"))

    def test_hard_link_shares_content(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("original.txt"), b"shared")

        fs.hard_link(at("original.txt"), at("alias.txt"))

        assert fs.read(at("alias.txt")) == b"shared"
        fs.write(at("alias.txt"), b"changed", mode="append")
        assert fs.read(at("original.txt")) == b"sharedchanged"

    def test_hard_link_survives_removing_source(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("original.txt"), b"kept")
        fs.hard_link(at("original.txt"), at("alias.txt"))

        fs.remove(at("original.txt"))

        assert fs.read(at("alias.txt")) == b"kept"

    def test_hard_link_missing_source_raises(self, fs: Fs, at: PathMaker) -> None:
        with pytest.raises(NotFoundError):
            fs.hard_link(at("missing.txt"), at("alias.txt"))
        assert fs.exists(at("alias.txt")) is False

    def test_hard_link_existing_destination_raises(
        self, fs: Fs, at: PathMaker
    ) -> None:
        fs.write(at("original.txt"), b"new")
        fs.write(at("alias.txt"), b"old")

        with pytest.raises(AlreadyExistsError):
            fs.hard_link(at("original.txt"), at("alias.txt"))

        assert fs.read(at("alias.txt")) == b"old"

    def test_hard_link_directory_source_raises(self, fs: Fs, at: PathMaker) -> None:
        fs.create_dir(at("dir"))
        with pytest.raises(IsADirectoryIoError):
            fs.hard_link(at("dir"), at("alias"))

    def test_hard_link_missing_parent_raises(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("original.txt"), b"x")
        with pytest.raises(NotFoundError):
            fs.hard_link(at("original.txt"), at("missing/alias.txt"))

    # -------------------------------------------------------------------------
    # open
    # -------------------------------------------------------------------------

    def test_open_for_reading(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("file.txt"), b"stream me")

        with fs.open(at("file.txt"), OpenOptions(read=True)) as handle:
            assert handle.read() == b"stream me"

    def test_open_create_and_write(self, fs: Fs, at: PathMaker) -> None:
        options = OpenOptions(write=True, create=True, truncate=True)

        with fs.open(at("out.txt"), options) as handle:
            handle.write(b"written")

        assert fs.read(at("out.txt")) == b"written"

    def test_open_append(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("log.txt"), b"a")

        with fs.open(at("log.txt"), OpenOptions(append=True)) as handle:
            handle.write(b"b")

        assert fs.read(at("log.txt")) == b"ab"

    def test_open_create_new_on_existing_raises(self, fs: Fs, at: PathMaker) -> None:
        fs.write(at("file.txt"), b"x")
        with pytest.raises(AlreadyExistsError):
            fs.open(at("file.txt"), OpenOptions(write=True, create_new=True))

    def test_open_missing_without_create_raises(self, fs: Fs, at: PathMaker) -> None:
        with pytest.raises(NotFoundError):
            fs.open(at("missing.txt"), OpenOptions(read=True))

    def test_open_invalid_options_raise(self, fs: Fs, at: PathMaker) -> None:
        with pytest.raises(ValueError):
            fs.open(at("file.txt"), OpenOptions())

    def test_errors_are_io_errors(self, fs: Fs, at: PathMaker) -> None:
        with pytest.raises(IoError):
            fs.read(at("missing.txt"))


__all__ = ["FsValidationSuite", "PathMaker"]
