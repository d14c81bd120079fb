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

"""Composable predicates over :class:`~archivus.descriptor.Descriptor`."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from .descriptor import Descriptor
from .errors import InvalidExtensionError

__all__ = ["DEFAULT_FILTER", "FileFilter", "accepts", "normalize_extension"]

_SEPARATORS: Final[frozenset[str]] = frozenset({"/", "\\"})


def normalize_extension(extension: str) -> str:
    """Validate a user supplied extension and drop one leading dot.

    Case is preserved: ``"TXT"`` and ``"txt"`` are different extensions.

    Raises:
        InvalidExtensionError: If the value is empty (also after removing
            the dot) or contains a path separator.

    Examples:
        >>> normalize_extension(".txt")
        'txt'
    """
    value = extension[1:] if extension.startswith(".") else extension
    if not value:
        raise InvalidExtensionError(
            "Extension must not be empty", operation="filter"
        )
    if any(char in _SEPARATORS for char in value):
        msg = f"Extension must not contain a path separator: {extension!r}"
        raise InvalidExtensionError(msg, operation="filter")
    return value


@dataclass(slots=True, frozen=True)
class FileFilter:
    """Criteria a :class:`Descriptor` must meet to be returned.

    All criteria are combined with logical AND. The defaults accept every
    file and no directory, without recursion.

    Attributes:
        extensions: Accepted extensions, compared case-sensitively. Entries
            without an extension never match a non-empty set. None (or an
            empty set) disables the check.
        min_size: Smallest accepted file size in bytes, inclusive.
        max_size: Largest accepted file size in bytes, inclusive.
        include_directories: Accept directories.
        include_files: Accept regular files.
        recursive: Descend into subdirectories when walking.

    Size bounds only constrain files; directories are never rejected for
    their size.

    Example::

        images = FileFilter(extensions={"jpg", "png"}, min_size=1024, recursive=True)
        entries = utils.list_with_filter("photos", images)
    """

    extensions: frozenset[str] | None = None
    min_size: int | None = None
    max_size: int | None = None
    include_directories: bool = False
    include_files: bool = True
    recursive: bool = False

    def __post_init__(self) -> None:
        extensions: Iterable[str] | None = self.extensions
        if isinstance(extensions, str):
            extensions = (extensions,)
        if extensions is not None:
            normalized = frozenset(normalize_extension(ext) for ext in extensions)
            object.__setattr__(self, "extensions", normalized or None)
        for label, bound in (("min_size", self.min_size), ("max_size", self.max_size)):
            if bound is not None and bound < 0:
                msg = f"{label} must be non-negative (got {bound})."
                raise ValueError(msg)

    def accepts(self, descriptor: Descriptor) -> bool:
        """Return True if ``descriptor`` satisfies every criterion."""
        if descriptor.is_directory and not self.include_directories:
            return False
        if descriptor.is_file and not self.include_files:
            return False
        if self.extensions is not None and (
            descriptor.extension is None or descriptor.extension not in self.extensions
        ):
            return False
        if descriptor.is_file:
            if self.min_size is not None and descriptor.size < self.min_size:
                return False
            if self.max_size is not None and descriptor.size > self.max_size:
                return False
        return True


DEFAULT_FILTER: Final[FileFilter] = FileFilter()


def accepts(descriptor: Descriptor, file_filter: FileFilter = DEFAULT_FILTER) -> bool:
    """Functional form of :meth:`FileFilter.accepts`."""
    return file_filter.accepts(descriptor)
