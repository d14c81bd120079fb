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

"""High level filesystem helpers.

:class:`FileUtils` bundles listing, searching, statistics and simple file
manipulation behind one object. All failures surface as
:class:`~archivus.errors.ArchivusError` subclasses; no ``OSError`` escapes.

Example::

    from archivus import FileUtils

    utils = FileUtils()
    for descriptor in utils.find_by_extension("docs", "md", recursive=True):
        print(descriptor.path, descriptor.formatted_size)

    stats = utils.directory_stats("docs")
    print(stats.file_count, stats.formatted_size)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import ArchivusConfig
from .descriptor import Descriptor, extract, split_extension
from .errors import ArchivusError, IoError, NotFoundError, os_errors
from .filesystem import Filesystem, HostFilesystem, PathInput, base_name, coerce_path
from .filters import FileFilter, normalize_extension
from .logging import get_logger
from .stats import DirectoryStats, aggregate
from .traversal import TreeWalker, WalkResult

__all__ = ["FileUtils"]

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class FileUtils:
    """Facade over the traversal engine, filters and aggregator.

    Attributes:
        fs: Platform backend. Defaults to :class:`HostFilesystem`.
        config: Traversal settings (depth guard, symlink policy).
    """

    fs: Filesystem = field(default_factory=HostFilesystem)
    config: ArchivusConfig = field(default_factory=ArchivusConfig)

    @property
    def walker(self) -> TreeWalker:
        """Walker configured from :attr:`config`."""
        return TreeWalker.from_config(self.config, self.fs)

    # --- Existence checks ---

    def path_exists(self, path: PathInput) -> bool:
        """Return True if ``path`` names an existing file or directory.

        Raises:
            InvalidPathError: If ``path`` is empty.
        """
        return self._describe_if_exists(path, "path_exists") is not None

    def file_exists(self, path: PathInput) -> bool:
        """Return True if ``path`` is an existing regular file."""
        descriptor = self._describe_if_exists(path, "file_exists")
        return descriptor is not None and descriptor.is_file

    def directory_exists(self, path: PathInput) -> bool:
        """Return True if ``path`` is an existing directory."""
        descriptor = self._describe_if_exists(path, "directory_exists")
        return descriptor is not None and descriptor.is_directory

    def has_extension(self, path: PathInput, extension: str) -> bool:
        """Return True if the name of ``path`` ends in ``extension``.

        Purely lexical and case-sensitive; the path does not have to exist.
        """
        value = coerce_path(path, operation="has_extension")
        return split_extension(base_name(value)) == normalize_extension(extension)

    def is_empty(self, path: PathInput) -> bool:
        """Return True for a zero-byte file or a directory without entries."""
        descriptor = self.describe(path)
        if descriptor.is_file:
            return descriptor.size == 0
        with os_errors("list", descriptor.path):
            return not self.fs.list(descriptor.path)

    def describe(self, path: PathInput) -> Descriptor:
        """Return the :class:`Descriptor` for a single path."""
        return extract(self.fs, coerce_path(path, operation="stat"))

    # --- Listing and search ---

    def walk(
        self,
        root: PathInput,
        file_filter: FileFilter | None = None,
        *,
        pattern: str | None = None,
    ) -> WalkResult:
        """Walk ``root`` and return accepted entries together with skipped ones."""
        if file_filter is None:
            file_filter = FileFilter()
        return self.walker.walk(root, file_filter, pattern=pattern)

    def list_with_filter(
        self, root: PathInput, file_filter: FileFilter
    ) -> list[Descriptor]:
        """Return every entry below ``root`` accepted by ``file_filter``."""
        return list(self.walker.iter(root, file_filter))

    def list_files(self, root: PathInput) -> list[Descriptor]:
        """Return the regular files directly inside ``root``."""
        return self.list_with_filter(root, FileFilter())

    def list_directories(self, root: PathInput) -> list[Descriptor]:
        """Return the directories directly inside ``root``."""
        return self.list_with_filter(
            root, FileFilter(include_directories=True, include_files=False)
        )

    def list_all(self, root: PathInput) -> list[Descriptor]:
        """Return files and directories directly inside ``root``."""
        return self.list_with_filter(root, FileFilter(include_directories=True))

    def find_by_name(
        self, root: PathInput, pattern: str, *, recursive: bool = False
    ) -> list[Descriptor]:
        """Return files and directories whose name matches ``pattern``.

        ``pattern`` supports ``*`` and ``?`` wildcards (see
        :func:`archivus.pattern.matches`).
        """
        file_filter = FileFilter(include_directories=True, recursive=recursive)
        return list(self.walker.iter(root, file_filter, pattern=pattern))

    def find_by_extension(
        self, root: PathInput, extension: str, *, recursive: bool = False
    ) -> list[Descriptor]:
        """Return files with the given extension (case-sensitive).

        Raises:
            InvalidExtensionError: If ``extension`` is empty or malformed.
        """
        return self.list_with_filter(
            root, FileFilter(extensions={extension}, recursive=recursive)
        )

    def find_by_size(
        self,
        root: PathInput,
        min_size: int | None = None,
        max_size: int | None = None,
        *,
        recursive: bool = False,
    ) -> list[Descriptor]:
        """Return files whose size lies within the inclusive bounds."""
        return self.list_with_filter(
            root,
            FileFilter(min_size=min_size, max_size=max_size, recursive=recursive),
        )

    # --- Statistics ---

    def directory_stats(self, root: PathInput) -> DirectoryStats:
        """Aggregate every file and directory below ``root``, recursively."""
        return aggregate(
            self.walker.iter(
                root, FileFilter(include_directories=True, recursive=True)
            )
        )

    def directory_size(self, root: PathInput) -> int:
        """Return the total size of all files below ``root``, recursively."""
        return sum(
            descriptor.size
            for descriptor in self.walker.iter(root, FileFilter(recursive=True))
        )

    def count_files(self, root: PathInput, *, recursive: bool = False) -> int:
        """Count regular files inside ``root``."""
        return sum(1 for _ in self.walker.iter(root, FileFilter(recursive=recursive)))

    def count_directories(self, root: PathInput, *, recursive: bool = False) -> int:
        """Count directories inside ``root``."""
        file_filter = FileFilter(
            include_directories=True, include_files=False, recursive=recursive
        )
        return sum(1 for _ in self.walker.iter(root, file_filter))

    # --- Reading and writing ---

    def read_to_bytes(self, path: PathInput) -> bytes:
        """Return the full content of a file."""
        value = coerce_path(path, operation="read")
        with os_errors("read", value):
            return self.fs.read_bytes(value)

    def read_to_string(self, path: PathInput, *, encoding: str = "utf-8") -> str:
        """Return the content of a text file.

        Raises:
            IoError: The content cannot be decoded with ``encoding``.
        """
        value = coerce_path(path, operation="read")
        content = self.read_to_bytes(value)
        try:
            return content.decode(encoding)
        except UnicodeDecodeError as err:
            raise IoError(str(err), operation="read", path=value) from err

    def write_bytes(self, path: PathInput, content: bytes) -> int:
        """Replace the content of ``path``, creating the file if needed."""
        return self._write(path, content, append=False)

    def write_string(
        self, path: PathInput, content: str, *, encoding: str = "utf-8"
    ) -> int:
        """Replace the content of ``path`` with encoded text."""
        return self._write(path, content.encode(encoding), append=False)

    def append_bytes(self, path: PathInput, content: bytes) -> int:
        """Append to ``path``, creating the file if needed."""
        return self._write(path, content, append=True)

    def append_string(
        self, path: PathInput, content: str, *, encoding: str = "utf-8"
    ) -> int:
        """Append encoded text to ``path``, creating the file if needed."""
        return self._write(path, content.encode(encoding), append=True)

    # --- Directory and file management ---

    def create_directory(self, path: PathInput, *, parents: bool = True) -> None:
        """Create ``path``. Missing parents are created unless ``parents=False``."""
        value = coerce_path(path, operation="mkdir")
        with os_errors("mkdir", value):
            self.fs.mkdir(value, parents=parents)
        logger.debug(
            "Created directory.", event="file_utils.mkdir", context={"path": value}
        )

    def remove_file(self, path: PathInput) -> None:
        """Delete a regular file.

        Raises:
            IoError: ``path`` is a directory.
        """
        descriptor = self.describe(path)
        if descriptor.is_directory:
            msg = "Is a directory"
            raise IoError(msg, operation="remove_file", path=descriptor.path)
        self._delete(descriptor.path, recursive=False, operation="remove_file")

    def remove_directory(self, path: PathInput) -> None:
        """Delete an empty directory.

        Raises:
            IoError: ``path`` is not a directory, or it is not empty.
        """
        self._delete_directory(path, recursive=False, operation="remove_directory")

    def remove_directory_recursive(self, path: PathInput) -> None:
        """Delete a directory and everything below it."""
        self._delete_directory(
            path, recursive=True, operation="remove_directory_recursive"
        )

    def copy_file(self, source: PathInput, destination: PathInput) -> int:
        """Copy a file and return the number of bytes copied."""
        src = coerce_path(source, operation="copy")
        dst = coerce_path(destination, operation="copy")
        with os_errors("copy", src):
            copied = self.fs.copy(src, dst)
        logger.debug(
            "Copied file.",
            event="file_utils.copy",
            context={"source": src, "destination": dst, "bytes": copied},
        )
        return copied

    def move_item(self, source: PathInput, destination: PathInput) -> None:
        """Move or rename a file or directory."""
        src = coerce_path(source, operation="move")
        dst = coerce_path(destination, operation="move")
        with os_errors("move", src):
            self.fs.move(src, dst)
        logger.debug(
            "Moved item.",
            event="file_utils.move",
            context={"source": src, "destination": dst},
        )

    # --- Internals ---

    def _describe_if_exists(self, path: PathInput, operation: str) -> Descriptor | None:
        value = coerce_path(path, operation=operation)
        try:
            return extract(self.fs, value)
        except NotFoundError:
            return None
        except ArchivusError as error:
            logger.debug(
                "Treating unreadable path as missing.",
                event="file_utils.exists_failed",
                context={"path": value, "error": str(error)},
            )
            return None

    def _write(self, path: PathInput, content: bytes, *, append: bool) -> int:
        value = coerce_path(path, operation="write")
        with os_errors("write", value):
            written = self.fs.write_bytes(
                value, content, mode="append" if append else "overwrite"
            )
        logger.debug(
            "Wrote file.",
            event="file_utils.write",
            context={"path": value, "bytes": written, "append": append},
        )
        return written

    def _delete_directory(
        self, path: PathInput, *, recursive: bool, operation: str
    ) -> None:
        descriptor = self.describe(path)
        if not descriptor.is_directory:
            msg = "Not a directory"
            raise IoError(msg, operation=operation, path=descriptor.path)
        self._delete(descriptor.path, recursive=recursive, operation=operation)

    def _delete(self, path: str, *, recursive: bool, operation: str) -> None:
        with os_errors(operation, path):
            self.fs.delete(path, recursive=recursive)
        logger.debug(
            "Deleted path.",
            event="file_utils.delete",
            context={"path": path, "recursive": recursive},
        )
