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

"""Path coercion and validation shared by the archivus core.

Functions:
    coerce_path: Turn ``str``/``os.PathLike`` input into a validated string.
    join_path: Join a directory path and an entry name.
    base_name: Final segment of a path.
"""

from __future__ import annotations

import os
from typing import TypeAlias

from ..errors import InvalidPathError

__all__ = ["PathInput", "base_name", "coerce_path", "join_path"]

PathInput: TypeAlias = str | os.PathLike[str]


def coerce_path(path: PathInput, *, operation: str) -> str:
    """Return ``path`` as a string after validating it.

    Args:
        path: Caller supplied path.
        operation: Name of the operation, used in the raised error.

    Returns:
        The path as a ``str``, otherwise unchanged.

    Raises:
        InvalidPathError: If the path is empty, contains a NUL byte or is not
            a string or path-like object.

    Examples:
        >>> coerce_path("docs/a.txt", operation="stat")
        'docs/a.txt'
    """
    try:
        value = os.fspath(path)
    except TypeError:
        msg = f"Expected a str or os.PathLike, got {type(path).__name__}"
        raise InvalidPathError(msg, operation=operation) from None
    if not isinstance(value, str):
        msg = "Byte paths are not supported"
        raise InvalidPathError(msg, operation=operation, path=repr(value))
    if not value:
        raise InvalidPathError("Path is empty", operation=operation, path=value)
    if "\x00" in value:
        msg = "Path contains a NUL byte"
        raise InvalidPathError(msg, operation=operation, path=value)
    return value


def join_path(directory: str, name: str) -> str:
    """Join ``directory`` and ``name`` with the platform separator."""
    return os.path.join(directory, name)


def base_name(path: str) -> str:
    """Return the last path segment, ignoring trailing separators.

    A filesystem root is its own name.

    Examples:
        >>> base_name("photos/2024/")
        '2024'
        >>> base_name("/")
        '/'
    """
    normalized = os.path.normpath(path)
    return os.path.basename(normalized) or normalized
