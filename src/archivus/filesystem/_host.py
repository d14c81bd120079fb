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

"""Filesystem backend for the host operating system."""

from __future__ import annotations

import os
import shutil
import stat as stat_mode
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from ._path import join_path
from ._types import FileEntry, FileStat, WriteMode

__all__ = ["HostFilesystem"]


# ---------------------------------------------------------------------------
# HostFilesystem Implementation
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class HostFilesystem:
    """Filesystem backed by the host operating system.

    Paths are used exactly as given: relative paths resolve against the
    process working directory. Platform errors propagate unchanged as
    ``OSError`` subclasses.
    """

    def stat(self, path: str) -> FileStat:
        """Get metadata for a path."""
        st = os.stat(path)
        is_dir = stat_mode.S_ISDIR(st.st_mode)
        is_file = stat_mode.S_ISREG(st.st_mode)
        return FileStat(
            path=path,
            is_file=is_file,
            is_directory=is_dir,
            size_bytes=st.st_size if is_file else 0,
            modified_at=datetime.fromtimestamp(st.st_mtime, tz=UTC),
        )

    def list(self, path: str) -> Sequence[FileEntry]:
        """List directory contents in enumeration order."""
        with os.scandir(path) as entries:
            return [
                FileEntry(
                    name=entry.name,
                    path=join_path(path, entry.name),
                    is_symlink=entry.is_symlink(),
                )
                for entry in entries
            ]

    def read_bytes(self, path: str) -> bytes:
        """Read file content."""
        with open(path, "rb") as handle:
            return handle.read()

    def write_bytes(
        self,
        path: str,
        content: bytes,
        *,
        mode: WriteMode = "overwrite",
    ) -> int:
        """Write content to a file."""
        with open(path, "ab" if mode == "append" else "wb") as handle:
            return handle.write(content)

    def mkdir(self, path: str, *, parents: bool = True) -> None:
        """Create a directory."""
        if parents:
            os.makedirs(path, exist_ok=True)
            return
        try:
            os.mkdir(path)
        except FileExistsError:
            if not os.path.isdir(path):
                raise

    def delete(self, path: str, *, recursive: bool = False) -> None:
        """Delete a file or directory."""
        if os.path.islink(path) or not os.path.isdir(path):
            os.unlink(path)
        elif recursive:
            shutil.rmtree(path)
        else:
            os.rmdir(path)

    def copy(self, source: str, destination: str) -> int:
        """Copy file content and permission bits."""
        copied = shutil.copy(source, destination)
        return os.stat(copied).st_size

    def move(self, source: str, destination: str) -> None:
        """Move a file or directory."""
        _ = shutil.move(source, destination)
