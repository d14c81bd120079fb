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

"""Value types returned by :class:`~archivus.filesystem.Filesystem` backends."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

__all__ = ["FileEntry", "FileStat", "WriteMode"]

WriteMode = Literal["overwrite", "append"]
"""How ``Filesystem.write_bytes`` treats an existing file."""


@dataclass(slots=True, frozen=True)
class FileStat:
    """Metadata for a file or directory.

    Returned by ``Filesystem.stat()``. Symlinks are followed, so a link to a
    directory reports ``is_directory=True``. Entries that are neither a
    regular file nor a directory (sockets, pipes, devices) report ``False``
    for both flags.

    Attributes:
        path: The path that was queried, as given.
        is_file: True if this is a regular file.
        is_directory: True if this is a directory.
        size_bytes: File size in bytes (0 for directories).
        modified_at: Last modification time (None when the backend cannot
            report one).

    Example::

        stat = fs.stat("data/report.csv")
        if stat.is_file and stat.size_bytes > 0:
            content = fs.read_bytes(stat.path)
    """

    path: str
    is_file: bool
    is_directory: bool
    size_bytes: int
    modified_at: datetime | None = None


@dataclass(slots=True, frozen=True)
class FileEntry:
    """Directory listing entry returned by ``Filesystem.list()``.

    Attributes:
        name: Entry name without path (e.g., "main.py").
        path: The listed directory joined with ``name``.
        is_symlink: True if the entry itself is a symbolic link.

    Example::

        for entry in fs.list("src"):
            if not entry.is_symlink:
                print(entry.path)
    """

    name: str
    path: str
    is_symlink: bool = False
