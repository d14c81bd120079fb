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

"""Base exception hierarchy for :mod:`archivus`."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

__all__ = [
    "ArchivusError",
    "ConfigError",
    "InvalidExtensionError",
    "InvalidPathError",
    "IoError",
    "NotFoundError",
    "PermissionDeniedError",
    "os_errors",
    "translate_os_error",
]


class ArchivusError(Exception):
    """Base class for all archivus exceptions.

    Every instance identifies the operation that failed and the path it was
    operating on, so callers can report failures without inspecting the
    underlying platform error.

    Example:
        Catch any archivus-specific error::

            try:
                entries = utils.list_files("/srv/data")
            except ArchivusError as e:
                logger.error("Listing failed: %s", e)

    Note:
        Subclasses may also inherit from standard exception types (e.g.,
        ``ValueError``) to enable more specific handling when needed.

    Attributes:
        message: Human readable cause, usually the platform's own message.
        operation: Name of the failed operation (``"list"``, ``"stat"``, ...).
        path: The path the operation was applied to.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.path = path

    def __str__(self) -> str:
        if self.operation is None and self.path is None:
            return self.message
        operation = self.operation or "operation"
        if self.path is None:
            return f"{operation} failed: {self.message}"
        return f"{operation} failed for {self.path!r}: {self.message}"


class NotFoundError(ArchivusError):
    """Raised when a path does not exist."""


class PermissionDeniedError(ArchivusError):
    """Raised when the platform refuses access to a path."""


class IoError(ArchivusError):
    """Raised for any other platform I/O failure.

    Also covers entries the library cannot describe, such as sockets or
    named pipes, and text that cannot be decoded with the requested
    encoding.
    """


class InvalidExtensionError(ArchivusError, ValueError):
    """Raised when an extension filter value is empty or malformed.

    Example::

        try:
            utils.find_by_extension("/srv/data", "")
        except InvalidExtensionError:
            ...

    Note:
        This exception also inherits from ``ValueError``.
    """


class InvalidPathError(ArchivusError, ValueError):
    """Raised for empty or malformed paths, and for non-directory roots."""


class ConfigError(ArchivusError, ValueError):
    """Raised when archivus configuration is invalid."""


def translate_os_error(
    error: OSError,
    *,
    operation: str,
    path: str,
) -> ArchivusError:
    """Map a platform ``OSError`` onto the matching archivus error kind.

    Args:
        error: The exception raised by the filesystem backend.
        operation: Name of the operation that was attempted.
        path: Path the operation was applied to.

    Returns:
        A new :class:`ArchivusError` subclass instance carrying the
        platform message. The caller is expected to chain ``error``.
    """
    message = error.strerror or str(error) or type(error).__name__
    if isinstance(error, FileNotFoundError):
        return NotFoundError(message, operation=operation, path=path)
    if isinstance(error, PermissionError):
        return PermissionDeniedError(message, operation=operation, path=path)
    if isinstance(error, NotADirectoryError):
        return InvalidPathError(message, operation=operation, path=path)
    return IoError(message, operation=operation, path=path)


@contextmanager
def os_errors(operation: str, path: str) -> Iterator[None]:
    """Translate any ``OSError`` raised inside the block.

    Example::

        with os_errors("read", path):
            data = fs.read_bytes(path)
    """
    try:
        yield
    except OSError as err:
        raise translate_os_error(err, operation=operation, path=path) from err
