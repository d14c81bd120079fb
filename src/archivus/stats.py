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

"""Summary statistics and post-processing over descriptor collections.

Nothing in this module performs I/O. Every function consumes descriptors that
were already produced by a walk.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from operator import attrgetter
from types import MappingProxyType
from typing import Final, Literal, TypeAlias

from .descriptor import Descriptor
from .formatting import format_bytes

__all__ = [
    "DirectoryStats",
    "SortKey",
    "aggregate",
    "format_bytes",
    "group_by_extension",
    "index_by_name",
    "sort_descriptors",
]

SortKey: TypeAlias = Literal["name", "path", "size", "modified"]

_SORT_KEYS: Final[frozenset[str]] = frozenset({"name", "path", "size", "modified"})


@dataclass(slots=True, frozen=True)
class DirectoryStats:
    """Totals computed over a sequence of descriptors.

    Attributes:
        file_count: Number of regular files.
        directory_count: Number of directories.
        total_size: Sum of file sizes in bytes. Directories add nothing.
        extension_counts: Number of entries per extension. Entries without
            an extension are not counted.
        largest_file_size: Size of the largest file, 0 when there are none.
        largest_file_name: Name of the first file seen with
            ``largest_file_size``, None when there are no files.
    """

    file_count: int = 0
    directory_count: int = 0
    total_size: int = 0
    extension_counts: Mapping[str, int] = field(default_factory=dict[str, int])
    largest_file_size: int = 0
    largest_file_name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "extension_counts", MappingProxyType(dict(self.extension_counts))
        )

    @property
    def formatted_size(self) -> str:
        """``total_size`` rendered with :func:`format_bytes`."""
        return format_bytes(self.total_size)

    @property
    def formatted_largest_file_size(self) -> str:
        """``largest_file_size`` rendered with :func:`format_bytes`."""
        return format_bytes(self.largest_file_size)


def aggregate(descriptors: Iterable[Descriptor]) -> DirectoryStats:
    """Fold ``descriptors`` into a :class:`DirectoryStats`.

    Counts and sums do not depend on input order. The largest file only
    changes on a strictly larger size, so among equally sized files the
    first one wins. Only files contribute to ``extension_counts``.

    Example::

        stats = aggregate(walker.iter("data", FileFilter(
            include_directories=True, recursive=True)))
        print(stats.file_count, stats.formatted_size)
    """
    file_count = directory_count = total_size = largest_size = 0
    largest_name: str | None = None
    extension_counts: dict[str, int] = {}
    for descriptor in descriptors:
        if descriptor.is_file:
            file_count += 1
            total_size += descriptor.size
            if largest_name is None or descriptor.size > largest_size:
                largest_size = descriptor.size
                largest_name = descriptor.name
            if descriptor.extension is not None:
                extension_counts[descriptor.extension] = (
                    extension_counts.get(descriptor.extension, 0) + 1
                )
        elif descriptor.is_directory:
            directory_count += 1
    return DirectoryStats(
        file_count=file_count,
        directory_count=directory_count,
        total_size=total_size,
        extension_counts=extension_counts,
        largest_file_size=largest_size,
        largest_file_name=largest_name,
    )


def group_by_extension(
    descriptors: Iterable[Descriptor],
) -> dict[str | None, list[Descriptor]]:
    """Group descriptors by extension, keeping input order inside each group.

    Descriptors without an extension are collected under the ``None`` key.
    """
    groups: dict[str | None, list[Descriptor]] = {}
    for descriptor in descriptors:
        groups.setdefault(descriptor.extension, []).append(descriptor)
    return groups


def index_by_name(descriptors: Iterable[Descriptor]) -> dict[str, Descriptor]:
    """Map each name to its descriptor. Later duplicates replace earlier ones."""
    return {descriptor.name: descriptor for descriptor in descriptors}


def sort_descriptors(
    descriptors: Iterable[Descriptor],
    key: SortKey = "name",
    *,
    reverse: bool = False,
) -> list[Descriptor]:
    """Return descriptors sorted by one attribute.

    Sorting is stable. With ``key="modified"`` descriptors lacking a
    modification time sort before all others.

    Raises:
        ValueError: If ``key`` is not a supported attribute.
    """
    if key not in _SORT_KEYS:
        msg = f"Unsupported sort key: {key!r}"
        raise ValueError(msg)
    if key == "modified":
        return sorted(
            descriptors,
            key=lambda d: (d.modified is not None, d.modified or 0),
            reverse=reverse,
        )
    return sorted(descriptors, key=attrgetter(key), reverse=reverse)
