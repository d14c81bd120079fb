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

"""Directory traversal producing :class:`~archivus.descriptor.Descriptor` values.

:class:`TreeWalker` walks a directory either one level deep or depth-first
through every subdirectory. Entries are produced in pre-order: a directory
comes before its contents, and siblings keep the order the platform
enumerated them in.

Failures are split in two classes:

- The root cannot be listed (missing, not a directory, access denied): the
  walk raises before producing anything.
- A single entry or subtree cannot be read: it is recorded as a
  :class:`SkippedEntry`, logged, and the walk continues.

Symlinked directories are reported like any other directory but only
descended into when ``follow_symlinks`` is enabled. ``max_depth`` bounds the
walk in every mode.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import TypeAlias
from dataclasses import dataclass, field

from .config import DEFAULT_MAX_DEPTH, ArchivusConfig
from .descriptor import Descriptor, extract
from .errors import ArchivusError, os_errors
from .filesystem import FileEntry, Filesystem, HostFilesystem, PathInput, coerce_path
from .filters import DEFAULT_FILTER, FileFilter
from .logging import StructuredLogger, get_logger
from .pattern import matches

__all__ = ["SkipHandler", "SkippedEntry", "TreeWalker", "WalkResult"]

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class SkippedEntry:
    """An entry the walk could not describe or descend into.

    Attributes:
        path: The entry's path.
        reason: Short description (``"metadata unavailable"``,
            ``"directory unreadable"``, ``"depth limit reached"``).
        error: The translated platform error, when there was one.
    """

    path: str
    reason: str
    error: ArchivusError | None = None


SkipHandler: TypeAlias = Callable[[SkippedEntry], None]


@dataclass(slots=True, frozen=True)
class WalkResult:
    """Materialized outcome of a walk: accepted entries plus skipped ones."""

    root: str
    entries: tuple[Descriptor, ...]
    skipped: tuple[SkippedEntry, ...] = ()

    def __iter__(self) -> Iterator[Descriptor]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(slots=True, frozen=True)
class TreeWalker:
    """Walks directory trees through a :class:`Filesystem` backend.

    Example::

        walker = TreeWalker(max_depth=8)
        for descriptor in walker.iter("src", FileFilter(recursive=True)):
            print(descriptor.path, descriptor.size)
    """

    fs: Filesystem = field(default_factory=HostFilesystem)
    max_depth: int = DEFAULT_MAX_DEPTH
    follow_symlinks: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be at least 1 (got {self.max_depth})."
            raise ValueError(msg)

    @classmethod
    def from_config(
        cls, config: ArchivusConfig, fs: Filesystem | None = None
    ) -> TreeWalker:
        """Build a walker honoring ``config``'s traversal settings."""
        return cls(
            fs=fs if fs is not None else HostFilesystem(),
            max_depth=config.max_depth,
            follow_symlinks=config.follow_symlinks,
        )

    def iter(
        self,
        root: PathInput,
        file_filter: FileFilter = DEFAULT_FILTER,
        *,
        pattern: str | None = None,
        on_skip: SkipHandler | None = None,
    ) -> Iterator[Descriptor]:
        """Return a lazy iterator over accepted descriptors below ``root``.

        The root is listed eagerly, so root failures raise here rather than on
        the first ``next()``. The iterator can be consumed once.

        Args:
            root: Directory to walk.
            file_filter: Acceptance criteria; ``file_filter.recursive``
                selects depth-first recursion.
            pattern: Optional wildcard pattern the entry name must match.
            on_skip: Called with every :class:`SkippedEntry`.

        Raises:
            InvalidPathError: ``root`` is empty or not a directory.
            NotFoundError: ``root`` does not exist.
            PermissionDeniedError: ``root`` cannot be listed.
            IoError: Any other failure listing ``root``.
        """
        root_path = coerce_path(root, operation="list")
        with os_errors("list", root_path):
            children = self.fs.list(root_path)

        def accept(descriptor: Descriptor) -> bool:
            if not file_filter.accepts(descriptor):
                return False
            return pattern is None or matches(descriptor.name, pattern)

        return self._walk(
            root_path,
            children,
            accept=accept,
            recursive=file_filter.recursive,
            on_skip=on_skip,
        )

    def walk(
        self,
        root: PathInput,
        file_filter: FileFilter = DEFAULT_FILTER,
        *,
        pattern: str | None = None,
    ) -> WalkResult:
        """Walk ``root`` to completion. See :meth:`iter` for the arguments."""
        skipped: list[SkippedEntry] = []
        iterator = self.iter(root, file_filter, pattern=pattern, on_skip=skipped.append)
        entries = tuple(iterator)
        return WalkResult(
            root=coerce_path(root, operation="list"),
            entries=entries,
            skipped=tuple(skipped),
        )

    def _walk(
        self,
        root: str,
        children: Sequence[FileEntry],
        *,
        accept: Callable[[Descriptor], bool],
        recursive: bool,
        on_skip: SkipHandler | None,
    ) -> Iterator[Descriptor]:
        log = logger.bind(root=root)
        log.debug(
            "Walking directory.",
            event="traversal.start",
            context={"recursive": recursive, "max_depth": self.max_depth},
        )
        produced = skipped = 0
        stack: list[tuple[Iterator[FileEntry], int]] = [(iter(children), 1)]
        while stack:
            entries, depth = stack[-1]
            entry = next(entries, None)
            if entry is None:
                _ = stack.pop()
                continue

            try:
                descriptor = extract(self.fs, entry.path)
            except ArchivusError as error:
                skipped += 1
                failure = SkippedEntry(entry.path, "metadata unavailable", error)
                self._skip(log, on_skip, failure)
                continue

            if accept(descriptor):
                produced += 1
                yield descriptor

            if not (recursive and descriptor.is_directory):
                continue
            if entry.is_symlink and not self.follow_symlinks:
                log.debug(
                    "Not following symlinked directory.",
                    event="traversal.symlink_skipped",
                    context={"path": entry.path},
                )
                continue
            if depth >= self.max_depth:
                skipped += 1
                self._skip(
                    log,
                    on_skip,
                    SkippedEntry(entry.path, "depth limit reached"),
                    event="traversal.depth_limit",
                )
                continue

            try:
                with os_errors("list", entry.path):
                    grandchildren = self.fs.list(entry.path)
            except ArchivusError as error:
                skipped += 1
                failure = SkippedEntry(entry.path, "directory unreadable", error)
                self._skip(log, on_skip, failure)
                continue
            stack.append((iter(grandchildren), depth + 1))

        log.debug(
            "Finished walking directory.",
            event="traversal.complete",
            context={"produced": produced, "skipped": skipped},
        )

    @staticmethod
    def _skip(
        log: StructuredLogger,
        on_skip: SkipHandler | None,
        skipped: SkippedEntry,
        *,
        event: str = "traversal.entry_skipped",
    ) -> None:
        log.warning(
            "Skipping entry: %s.",
            skipped.reason,
            event=event,
            context={
                "path": skipped.path,
                "error": str(skipped.error) if skipped.error is not None else None,
            },
        )
        if on_skip is not None:
            on_skip(skipped)
