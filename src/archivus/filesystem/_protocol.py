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

"""Filesystem protocol consumed by the archivus core.

The traversal engine, the metadata extractor and the ``FileUtils`` facade
never touch :mod:`os` directly. They talk to a :class:`Filesystem` so tests
can substitute backends that inject faults or serve a fixed tree.

Core implementation:

- `archivus.filesystem.HostFilesystem`: Direct access to the host filesystem

Backends report failures with the builtin ``OSError`` subclasses; callers in
the core translate them with :func:`archivus.errors.os_errors`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ._types import FileEntry, FileStat, WriteMode


@runtime_checkable
class Filesystem(Protocol):
    """Platform operations the archivus core depends on.

    Example::

        def total_bytes(fs: Filesystem, directory: str) -> int:
            return sum(
                fs.stat(entry.path).size_bytes for entry in fs.list(directory)
            )
    """

    # --- Read Operations ---

    def stat(self, path: str) -> FileStat:
        """Get metadata for a path, following symlinks.

        Raises:
            FileNotFoundError: Path (or a symlink target) does not exist.
            PermissionError: Metadata access denied.
        """
        ...

    def list(self, path: str) -> Sequence[FileEntry]:
        """List the immediate children of a directory.

        Entries are returned in the order the platform enumerates them; no
        sorting is applied.

        Raises:
            FileNotFoundError: Path does not exist.
            NotADirectoryError: Path is not a directory.
            PermissionError: Listing denied.
        """
        ...

    def read_bytes(self, path: str) -> bytes:
        """Read the full content of a file.

        Raises:
            FileNotFoundError: Path does not exist.
            IsADirectoryError: Path is a directory.
            PermissionError: Read access denied.
        """
        ...

    # --- Write Operations ---

    def write_bytes(
        self,
        path: str,
        content: bytes,
        *,
        mode: WriteMode = "overwrite",
    ) -> int:
        """Write ``content`` to a file, creating it if needed.

        Args:
            path: Target file.
            content: Bytes to write.
            mode: ``"overwrite"`` truncates first, ``"append"`` adds to the end.

        Returns:
            Number of bytes written.

        Raises:
            FileNotFoundError: Parent directory does not exist.
            IsADirectoryError: Path is a directory.
            PermissionError: Write access denied.
        """
        ...

    def mkdir(self, path: str, *, parents: bool = True) -> None:
        """Create a directory. Existing directories are left untouched.

        Raises:
            FileExistsError: A non-directory exists at ``path``.
            FileNotFoundError: Parent missing and ``parents`` is False.
        """
        ...

    def delete(self, path: str, *, recursive: bool = False) -> None:
        """Delete a file, or a directory (which must be empty unless recursive).

        Raises:
            FileNotFoundError: Path does not exist.
            OSError: Directory not empty and ``recursive`` is False.
        """
        ...

    def copy(self, source: str, destination: str) -> int:
        """Copy a file's content to ``destination``, returning bytes copied."""
        ...

    def move(self, source: str, destination: str) -> None:
        """Rename or move a file or directory."""
        ...
