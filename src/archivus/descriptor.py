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

"""Descriptors: immutable snapshots of a filesystem entry's metadata."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import IoError, os_errors
from .filesystem import Filesystem, FileStat, base_name
from .formatting import format_bytes

__all__ = ["Descriptor", "extract", "from_stat", "split_extension"]


@dataclass(slots=True, frozen=True)
class Descriptor:
    """Metadata for one file or directory, captured when it was examined.

    Exactly one of ``is_file`` and ``is_directory`` is True.

    Attributes:
        path: Full path as produced during traversal.
        name: Final path segment.
        extension: Text after the last ``.`` of ``name`` without the dot, with
            its case preserved. None when the name has no extension.
        size: Size in bytes. Always 0 for directories.
        is_directory: True for directories (including symlinks to one).
        is_file: True for regular files.
        modified: Last modification time in whole seconds since the Unix
            epoch, or None when the platform does not report it.
    """

    path: str
    name: str
    extension: str | None
    size: int
    is_directory: bool
    is_file: bool
    modified: int | None = None

    @property
    def formatted_size(self) -> str:
        """Size rendered with :func:`archivus.formatting.format_bytes`."""
        return format_bytes(self.size)


def split_extension(name: str) -> str | None:
    """Return the extension of ``name``, or None when it has none.

    Hidden files (names starting with ``.``) never carry an extension.

    Examples:
        >>> split_extension("report.final.PDF")
        'PDF'
        >>> split_extension(".bashrc") is None
        True
        >>> split_extension("Makefile") is None
        True
    """
    if name.startswith("."):
        return None
    _, dot, extension = name.rpartition(".")
    if not dot or not extension:
        return None
    return extension


def from_stat(path: str, file_stat: FileStat) -> Descriptor:
    """Build a :class:`Descriptor` from backend metadata.

    Raises:
        IoError: The entry is neither a regular file nor a directory.
    """
    if not (file_stat.is_file or file_stat.is_directory):
        msg = "Not a regular file or directory"
        raise IoError(msg, operation="stat", path=path)
    name = base_name(path)
    modified = (
        int(file_stat.modified_at.timestamp())
        if file_stat.modified_at is not None
        else None
    )
    return Descriptor(
        path=path,
        name=name,
        extension=split_extension(name),
        size=file_stat.size_bytes if file_stat.is_file else 0,
        is_directory=file_stat.is_directory,
        is_file=file_stat.is_file and not file_stat.is_directory,
        modified=modified,
    )


def extract(fs: Filesystem, path: str) -> Descriptor:
    """Stat ``path`` through ``fs`` and describe it.

    Raises:
        NotFoundError: Path does not exist (including dangling symlinks).
        PermissionDeniedError: Metadata access denied.
        IoError: Any other platform failure, or an unsupported entry type.
    """
    with os_errors("stat", path):
        file_stat = fs.stat(path)
    return from_stat(path, file_stat)
