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

"""Archivus: listing, searching and summarizing directory trees.

Quick start::

    from archivus import FileFilter, FileUtils, format_bytes

    utils = FileUtils()
    pictures = utils.list_with_filter(
        "photos", FileFilter(extensions={"jpg", "png"}, recursive=True)
    )
    stats = utils.directory_stats("photos")
    print(stats.file_count, format_bytes(stats.total_size))
"""

from __future__ import annotations

from .config import ArchivusConfig, load_config
from .descriptor import Descriptor, extract, split_extension
from .errors import (
    ArchivusError,
    ConfigError,
    InvalidExtensionError,
    InvalidPathError,
    IoError,
    NotFoundError,
    PermissionDeniedError,
)
from .filesystem import FileEntry, FileStat, Filesystem, HostFilesystem
from .filters import FileFilter, accepts
from .formatting import format_bytes
from .logging import configure_logging, get_logger
from .pattern import matches
from .stats import (
    DirectoryStats,
    aggregate,
    group_by_extension,
    index_by_name,
    sort_descriptors,
)
from .traversal import SkippedEntry, TreeWalker, WalkResult
from .utils import FileUtils

__all__ = [
    "ArchivusConfig",
    "ArchivusError",
    "ConfigError",
    "Descriptor",
    "DirectoryStats",
    "FileEntry",
    "FileFilter",
    "FileStat",
    "FileUtils",
    "Filesystem",
    "HostFilesystem",
    "InvalidExtensionError",
    "InvalidPathError",
    "IoError",
    "NotFoundError",
    "PermissionDeniedError",
    "SkippedEntry",
    "TreeWalker",
    "WalkResult",
    "accepts",
    "aggregate",
    "configure_logging",
    "extract",
    "format_bytes",
    "get_logger",
    "group_by_extension",
    "index_by_name",
    "load_config",
    "matches",
    "sort_descriptors",
    "split_extension",
]
