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

from __future__ import annotations

from pathlib import Path

import pytest

from archivus import FileUtils
from tests.helpers import MemoryFilesystem


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create ``a.txt`` (10 B), ``b.jpg`` (2048 B) and ``sub/c.txt`` (5 B)."""
    _ = (tmp_path / "a.txt").write_bytes(b"x" * 10)
    _ = (tmp_path / "b.jpg").write_bytes(b"x" * 2048)
    (tmp_path / "sub").mkdir()
    _ = (tmp_path / "sub" / "c.txt").write_bytes(b"x" * 5)
    return tmp_path


@pytest.fixture
def utils() -> FileUtils:
    """Return a facade over the host filesystem."""
    return FileUtils()


@pytest.fixture
def memory_fs() -> MemoryFilesystem:
    """Return an in-memory tree rooted at ``root`` with a fixed listing order.

    Layout::

        root/
          a.txt        (3 B)
          docs/
            guide.md   (7 B)
            deep/
              notes.TXT (4 B)
          b.jpg        (9 B)
    """
    fs = MemoryFilesystem()
    fs.add_dir("root")
    fs.add_file("root/a.txt", b"abc")
    fs.add_dir("root/docs")
    fs.add_file("root/docs/guide.md", b"# guide")
    fs.add_dir("root/docs/deep")
    fs.add_file("root/docs/deep/notes.TXT", b"note")
    fs.add_file("root/b.jpg", b"123456789")
    return fs
