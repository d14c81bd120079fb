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

"""Human readable rendering of byte counts."""

from __future__ import annotations

from typing import Final

__all__ = ["BYTE_UNITS", "format_bytes"]

BYTE_UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB")
_STEP: Final[int] = 1024


def format_bytes(size: int) -> str:
    """Render ``size`` with the largest binary unit that keeps it >= 1.

    Byte counts below 1024 are printed as integers, anything larger with two
    decimals. Values beyond the terabyte range stay in ``TB``.

    Raises:
        ValueError: If ``size`` is negative.

    Examples:
        >>> format_bytes(0)
        '0 B'
        >>> format_bytes(1536)
        '1.50 KB'
        >>> format_bytes(1048576)
        '1.00 MB'
    """
    if size < 0:
        msg = f"Byte count must be non-negative (got {size})."
        raise ValueError(msg)
    if size < _STEP:
        return f"{size} B"
    value = float(size)
    unit = 0
    while value >= _STEP and unit < len(BYTE_UNITS) - 1:
        value /= _STEP
        unit += 1
    return f"{value:.2f} {BYTE_UNITS[unit]}"
