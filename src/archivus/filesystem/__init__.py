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

"""Platform collaborator for archivus.

This package defines the :class:`Filesystem` protocol the archivus core talks
to, its value types and the host backend.

Example usage::

    from archivus.filesystem import HostFilesystem

    fs = HostFilesystem()
    for entry in fs.list("."):
        print(entry.name, fs.stat(entry.path).size_bytes)
"""

from __future__ import annotations

from ._host import HostFilesystem
from ._path import PathInput, base_name, coerce_path, join_path
from ._protocol import Filesystem
from ._types import FileEntry, FileStat, WriteMode

__all__ = [
    "FileEntry",
    "FileStat",
    "Filesystem",
    "HostFilesystem",
    "PathInput",
    "WriteMode",
    "base_name",
    "coerce_path",
    "join_path",
]
