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

"""Tests for the in-memory test backend."""

from __future__ import annotations

import pytest

from tests.helpers import FilesystemValidationSuite, MemoryFilesystem


class TestMemoryFilesystemCompliance(FilesystemValidationSuite):
    """The fake backend honors the same protocol as the host backend."""

    @pytest.fixture
    def fs(self) -> MemoryFilesystem:
        return MemoryFilesystem()

    @pytest.fixture
    def root(self, fs: MemoryFilesystem) -> str:
        fs.mkdir("workspace")
        return "workspace"


class TestFaultInjection:
    """Fault injection knobs used by traversal tests."""

    def test_listing_order_is_insertion_order(self) -> None:
        fs = MemoryFilesystem()
        for name in ("zeta", "alpha", "mid"):
            fs.add_file(f"root/{name}")

        assert [entry.name for entry in fs.list("root")] == ["zeta", "alpha", "mid"]

    def test_deny_blocks_everything(self) -> None:
        fs = MemoryFilesystem()
        fs.add_dir("root/locked")
        fs.deny("root/locked")

        with pytest.raises(PermissionError):
            _ = fs.stat("root/locked")
        with pytest.raises(PermissionError):
            _ = fs.list("root/locked")

    def test_deny_listing_keeps_stat(self) -> None:
        fs = MemoryFilesystem()
        fs.add_dir("root/locked")
        fs.deny_listing("root/locked")

        assert fs.stat("root/locked").is_directory
        with pytest.raises(PermissionError):
            _ = fs.list("root/locked")

    def test_symlinks_resolve_through_parents(self) -> None:
        fs = MemoryFilesystem()
        fs.add_file("root/real/a.txt", b"abc")
        fs.add_symlink("root/alias", "root/real")

        assert fs.stat("root/alias/a.txt").size_bytes == 3
        assert [entry.is_symlink for entry in fs.list("root")] == [False, True]

    def test_symlink_loop_raises(self) -> None:
        fs = MemoryFilesystem()
        fs.add_symlink("root/a", "root/b")
        fs.add_symlink("root/b", "root/a")

        with pytest.raises(OSError):
            _ = fs.stat("root/a")

    def test_special_entry_is_neither_kind(self) -> None:
        fs = MemoryFilesystem()
        fs.add_special("root/fifo")

        stat = fs.stat("root/fifo")

        assert not stat.is_file
        assert not stat.is_directory
